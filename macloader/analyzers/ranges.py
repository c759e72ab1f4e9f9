"""
Vendor MAC Range Table
=======================

Static table of MAC address prefixes (OUIs, ``xx:xx:xx``) assigned to
each WiFi module vendor. Declaration order is significant: vendors are
matched in the order they appear here, then prefixes in list order.

The table is built once at import time and exposed read-only.

References:
    - IEEE Registration Authority. MA-L Public Listing.
      https://standards-oui.ieee.org/oui/oui.txt
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from macloader.core.models import VendorRange, VendorType


MURATA_RANGE = VendorRange(
    vendor=VendorType.MURATA,
    prefixes=(
        "00:0e:6d", "00:13:e0", "00:21:e8", "00:26:e8",
        "00:37:6d", "00:60:57", "04:46:65", "10:5f:06",
        "10:a5:d0", "14:7d:c5", "1c:99:4c", "20:02:af",
        "40:f3:08", "44:a7:cf", "5c:da:d4", "5c:f8:a1",
        "60:21:c0", "60:f1:89", "78:4b:87", "88:30:8a",
        "90:b6:86", "98:f1:70", "f0:27:65", "fc:c2:de",
        "fc:db:b3",
    ),
)

SEMCOSH_RANGE = VendorRange(
    vendor=VendorType.SEMCOSH,
    prefixes=(
        "5c:0a:5b",
    ),
)

SEMCO3RD_RANGE = VendorRange(
    vendor=VendorType.SEMCO3RD,
    prefixes=(
        "00:12:47", "00:12:fb", "00:13:77", "00:15:99",
        "00:15:b9", "00:16:32", "00:16:6b", "00:16:6c",
        "00:17:c9", "00:17:d5", "00:18:af", "00:1a:8a",
        "00:1b:98", "00:1c:43", "00:1d:25", "00:1d:f6",
        "00:1e:7d", "00:1f:cc", "00:1f:cd", "00:21:19",
        "00:21:4c", "00:21:d1", "00:21:d2", "00:23:39",
        "00:23:3a", "00:23:99", "00:23:d6", "00:23:d7",
        "00:24:54", "00:24:90", "00:24:91", "00:24:e9",
        "00:25:66", "00:25:67", "00:26:37", "00:26:5d",
        "00:26:5f", "00:e0:64", "08:08:c2", "08:d4:2b",
    ),
)

SEMCO_RANGE = VendorRange(
    vendor=VendorType.SEMCO,
    prefixes=(
        "08:37:3d", "10:1d:c0", "10:d5:42", "18:3f:47",
        "20:64:32", "24:c6:96", "2c:44:01", "38:aa:3c",
        "50:cc:f8", "5c:3c:27", "78:25:ad", "84:25:db",
        "8c:77:12", "90:18:7c", "9c:02:98", "a0:0b:ba",
        "b4:07:f9", "cc:3a:61", "d0:22:be", "e4:32:cb",
        "f0:08:f1", "f4:9f:54",
    ),
)

WISOL_RANGE = VendorRange(
    vendor=VendorType.WISOL,
    prefixes=(
        "48:5a:3f", "70:2c:1f",
    ),
)


#: Vendor ranges in match order.
VENDOR_RANGES: Mapping[VendorType, VendorRange] = MappingProxyType(
    {
        r.vendor: r
        for r in (
            MURATA_RANGE,
            SEMCOSH_RANGE,
            SEMCO3RD_RANGE,
            SEMCO_RANGE,
            WISOL_RANGE,
        )
    }
)
