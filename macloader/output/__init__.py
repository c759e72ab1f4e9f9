"""
Macloader Output
=================

Modules:
    console  -- Rich-based console display
"""

from macloader.output.console import MacloaderConsoleOutput

__all__ = ["MacloaderConsoleOutput"]
