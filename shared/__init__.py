"""
Macloader Shared Module
=======================

Configuration, logging and console utilities used by the macloader
provisioning tool.
"""

from shared.config import LoaderConfig, get_config

__all__ = ["LoaderConfig", "get_config"]
