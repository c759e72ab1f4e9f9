"""
Macloader Collectors
=====================

Modules:
    macaddr  -- Bounded reader for the MAC prefix source file
"""

from macloader.collectors.macaddr import MacPrefixReader

__all__ = ["MacPrefixReader"]
