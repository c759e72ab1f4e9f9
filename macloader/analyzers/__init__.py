"""
Macloader Analyzers
====================

Modules:
    ranges      -- Static vendor MAC prefix table
    classifier  -- Prefix-to-vendor lookup
"""

from macloader.analyzers.classifier import RangeClassifier, classify_mac_prefix
from macloader.analyzers.ranges import VENDOR_RANGES

__all__ = [
    "RangeClassifier",
    "classify_mac_prefix",
    "VENDOR_RANGES",
]
