"""
Macloader Core Data Models
===========================

Pydantic-based domain models for the macloader provisioning tool:
vendor identifiers, vendor MAC-prefix ranges, classification results,
calibration requests and the per-run provisioning summary.

References:
    - IEEE. (2017). Guidelines for Use of Extended Unique Identifier (EUI),
      Organizationally Unique Identifier (OUI), and Company ID (CID).
    - Pydantic v2 Documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

#: Size of one range entry including its terminator; a prefix is at most
#: ``RANGE_ENTRY_LEN - 1`` characters (``"00:37:6d"``).
RANGE_ENTRY_LEN: int = 9

#: Maximum number of prefixes a single vendor range may hold.
MAX_RANGE_ENTRIES: int = 64


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class VendorType(str, enum.Enum):
    """WiFi module vendor identified from the MAC address prefix.

    ``NONE`` is the explicit no-match member; it has no CID name and no
    calibration suffix.
    """

    MURATA = "MURATA"
    SEMCOSH = "SEMCOSH"
    SEMCO3RD = "SEMCO3RD"
    SEMCO = "SEMCO"
    WISOL = "WISOL"
    NONE = "NONE"

    @property
    def is_match(self) -> bool:
        return self is not VendorType.NONE

    @property
    def cid_name(self) -> str:
        """Canonical lowercase name written to the CID file.

        Also used as the calibration-file suffix.

        Raises:
            ValueError: For :attr:`NONE`, which is never persisted.
        """
        name = _CID_NAMES[self]
        if name is None:
            raise ValueError(f"Vendor type {self.value} has no CID name")
        return name


_CID_NAMES: dict[VendorType, Optional[str]] = {
    VendorType.MURATA: "murata",
    VendorType.SEMCOSH: "semcosh",
    VendorType.SEMCO3RD: "semco3rd",
    VendorType.SEMCO: "semco",
    VendorType.WISOL: "wisol",
    VendorType.NONE: None,
}

# Every member must be mapped; adding a vendor without a name fails at import.
_unmapped = set(VendorType) - set(_CID_NAMES)
if _unmapped:
    raise RuntimeError(
        "VendorType members without a CID name: "
        + ", ".join(sorted(v.value for v in _unmapped))
    )


class ExitStatus(enum.IntEnum):
    """Process exit status; one code per fatal error kind."""

    SUCCESS = 0
    CONFIG_UNAVAILABLE = 1
    CID_WRITE_FAILURE = 2
    PERMISSION_FAILURE = 3
    UNKNOWN_ACCOUNT = 4
    OWNERSHIP_FAILURE = 5
    DRIVER_WRITE_FAILURE = 6


class CidAction(str, enum.Enum):
    """What a provisioning run did to the CID file."""

    WRITTEN = "written"
    REMOVED = "removed"
    UNTOUCHED = "untouched"


# ---------------------------------------------------------------------------
# Vendor Range
# ---------------------------------------------------------------------------


class VendorRange(BaseModel):
    """Ordered, immutable list of MAC prefixes assigned to one vendor.

    An empty entry acts as an end-of-list sentinel: it and everything
    after it are dropped, so ranges written in sentinel-terminated form
    keep their meaning.

    Attributes:
        vendor: Vendor the prefixes belong to (never ``NONE``).
        prefixes: Prefixes in declaration order.
    """

    model_config = ConfigDict(frozen=True)

    vendor: VendorType
    prefixes: tuple[str, ...] = ()

    @field_validator("vendor")
    @classmethod
    def vendor_not_none(cls, value: VendorType) -> VendorType:
        if value is VendorType.NONE:
            raise ValueError("a vendor range cannot be declared for NONE")
        return value

    @field_validator("prefixes", mode="before")
    @classmethod
    def truncate_at_sentinel(cls, value: object) -> object:
        if isinstance(value, (list, tuple)):
            entries = list(value)
            if "" in entries:
                entries = entries[: entries.index("")]
            return tuple(entries)
        return value

    @field_validator("prefixes")
    @classmethod
    def check_entries(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if len(value) > MAX_RANGE_ENTRIES:
            raise ValueError(
                f"{len(value)} prefixes exceed the limit of {MAX_RANGE_ENTRIES}"
            )
        for prefix in value:
            if not prefix.isascii():
                raise ValueError(f"prefix {prefix!r} is not ASCII")
            if len(prefix) > RANGE_ENTRY_LEN - 1:
                raise ValueError(
                    f"prefix {prefix!r} is longer than {RANGE_ENTRY_LEN - 1} characters"
                )
        return value

    def __len__(self) -> int:
        return len(self.prefixes)


# ---------------------------------------------------------------------------
# Classification & Calibration
# ---------------------------------------------------------------------------


class ClassificationResult(BaseModel):
    """Outcome of classifying one MAC prefix."""

    model_config = ConfigDict(frozen=True)

    prefix: str
    vendor: VendorType = VendorType.NONE

    @property
    def matched(self) -> bool:
        return self.vendor.is_match


class CalibrationRequest(BaseModel):
    """Base NVRAM calibration file plus the vendor suffix to try on top.

    Attributes:
        base_path: Path of the default calibration file.
        vendor: Vendor whose calibration variant is requested.
    """

    model_config = ConfigDict(frozen=True)

    base_path: str
    vendor: VendorType

    @property
    def suffix(self) -> str:
        return self.vendor.cid_name

    @property
    def vendor_path(self) -> str:
        """Vendor-specific calibration path, ``<base_path>_<suffix>``."""
        return f"{self.base_path}_{self.suffix}"


# ---------------------------------------------------------------------------
# Provisioning Result
# ---------------------------------------------------------------------------


class ProvisioningResult(BaseModel):
    """Summary of one provisioning run.

    Attributes:
        classification: Classification outcome; ``None`` if the MAC prefix
            could not be read.
        cid_path: Path of the CID file.
        cid_action: What was done to the CID file.
        driver_writes: Calibration paths accepted by the driver, in order.
        vendor_calibration_applied: Whether the vendor-specific calibration
            path was accepted in addition to the base one.
        exit_status: Final process exit status.
        error: Message of the fatal error, if any.
    """

    classification: Optional[ClassificationResult] = None
    cid_path: str = ""
    cid_action: CidAction = CidAction.UNTOUCHED
    driver_writes: list[str] = Field(default_factory=list)
    vendor_calibration_applied: bool = False
    exit_status: ExitStatus = ExitStatus.SUCCESS
    error: Optional[str] = None

    @property
    def vendor(self) -> VendorType:
        if self.classification is None:
            return VendorType.NONE
        return self.classification.vendor

    @property
    def succeeded(self) -> bool:
        return self.exit_status is ExitStatus.SUCCESS
