"""
MAC Prefix Classifier
======================

Maps a MAC address prefix to the WiFi module vendor by looking it up in
the static vendor range table.

Matching is exact and ASCII case-insensitive. Vendors are tried in
table order and prefixes in declaration order; the first hit wins, so a
prefix accidentally listed under two vendors always resolves to the one
declared first.
"""

from __future__ import annotations

import string
from collections import defaultdict
from typing import Iterable

from shared.logger import LoaderLogger

from macloader.analyzers.ranges import VENDOR_RANGES
from macloader.core.models import ClassificationResult, VendorRange, VendorType

logger = LoaderLogger("analyzers.classifier")

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def fold_ascii(value: str) -> str:
    """Lower-case ASCII letters only, leaving every other character intact."""
    return value.translate(_ASCII_LOWER)


class RangeClassifier:
    """Vendor lookup over an ordered collection of :class:`VendorRange`.

    Usage::

        classifier = RangeClassifier()
        classifier.classify("00:37:6D")    # VendorType.MURATA

    Args:
        ranges: Vendor ranges in match order. Defaults to the built-in
            table.
        log: Logger for match details. Uses the module logger if None.
    """

    def __init__(
        self,
        ranges: Iterable[VendorRange] | None = None,
        log: LoaderLogger | None = None,
    ) -> None:
        self._log = log or logger
        self._ranges: tuple[VendorRange, ...] = tuple(
            VENDOR_RANGES.values() if ranges is None else ranges
        )

    @property
    def ranges(self) -> tuple[VendorRange, ...]:
        return self._ranges

    def classify(self, prefix: str) -> VendorType:
        """Return the vendor owning *prefix*, or ``VendorType.NONE``."""
        needle = fold_ascii(prefix)
        for vendor_range in self._ranges:
            for candidate in vendor_range.prefixes:
                if fold_ascii(candidate) == needle:
                    self._log.debug(
                        "Prefix %s matched %s range entry %s",
                        prefix, vendor_range.vendor.value, candidate,
                    )
                    return vendor_range.vendor
        return VendorType.NONE

    def classify_result(self, prefix: str) -> ClassificationResult:
        return ClassificationResult(prefix=prefix, vendor=self.classify(prefix))

    def overlapping_prefixes(self) -> dict[str, list[VendorType]]:
        """Find prefixes declared under more than one vendor.

        Returns:
            Mapping of folded prefix to the vendors listing it, in table
            order. The first vendor in each list is the one ``classify``
            returns.
        """
        owners: dict[str, list[VendorType]] = defaultdict(list)
        for vendor_range in self._ranges:
            for candidate in vendor_range.prefixes:
                folded = fold_ascii(candidate)
                if vendor_range.vendor not in owners[folded]:
                    owners[folded].append(vendor_range.vendor)
        return {p: vendors for p, vendors in owners.items() if len(vendors) > 1}


_DEFAULT_CLASSIFIER = RangeClassifier()


def classify_mac_prefix(prefix: str) -> VendorType:
    """Classify *prefix* against the built-in vendor table."""
    return _DEFAULT_CLASSIFIER.classify(prefix)
