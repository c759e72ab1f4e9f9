"""
Macloader -- WiFi Vendor Provisioning
======================================

Boot-time tool that identifies the WiFi module vendor from the device
MAC address prefix, records it in the CID file and points the WiFi
driver at the matching NVRAM calibration file.

Modules:
    core.engine     -- Provisioning pipeline
    core.models     -- Pydantic domain models
    core.errors     -- Fatal error hierarchy
    collectors      -- MAC prefix source reader
    analyzers       -- Vendor range table and classifier
    output          -- Console output
    cli             -- Click-based command-line interface
"""

__version__ = "1.0.0"
__tool__ = "Macloader"
__description__ = "WiFi Vendor Provisioning"
