"""
Macloader Core
===============

Domain models, error hierarchy and the provisioning engine.

The engine is imported from :mod:`macloader.core.engine` directly; it
depends on the analyzers, which in turn depend on the models here.
"""

from macloader.core.errors import (
    CalibrationUnavailable,
    CidWriteFailure,
    ConfigUnavailable,
    DriverWriteFailure,
    OwnershipFailure,
    PermissionFailure,
    ProvisioningError,
    UnknownAccount,
)
from macloader.core.models import (
    CalibrationRequest,
    CidAction,
    ClassificationResult,
    ExitStatus,
    ProvisioningResult,
    VendorRange,
    VendorType,
)

__all__ = [
    "CalibrationUnavailable",
    "CidWriteFailure",
    "ConfigUnavailable",
    "DriverWriteFailure",
    "OwnershipFailure",
    "PermissionFailure",
    "ProvisioningError",
    "UnknownAccount",
    "CalibrationRequest",
    "CidAction",
    "ClassificationResult",
    "ExitStatus",
    "ProvisioningResult",
    "VendorRange",
    "VendorType",
]
