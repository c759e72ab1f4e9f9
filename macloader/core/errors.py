"""
Macloader Errors
=================

Exception hierarchy for the provisioning pipeline. Every class maps to
one fatal error kind and carries the process exit status it produces.
Only the exit status and the log message leave the process.
"""

from __future__ import annotations

from typing import ClassVar

from macloader.core.models import ExitStatus


class ProvisioningError(Exception):
    """Base class for fatal provisioning failures.

    Args:
        message: Human-readable description for the log.
        path: File-system path involved in the failure, if any.
    """

    status: ClassVar[ExitStatus] = ExitStatus.CONFIG_UNAVAILABLE

    def __init__(self, message: str, *, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ConfigUnavailable(ProvisioningError):
    """The MAC prefix source could not be opened or read."""

    status = ExitStatus.CONFIG_UNAVAILABLE


class CidWriteFailure(ProvisioningError):
    """The CID file could not be opened or written."""

    status = ExitStatus.CID_WRITE_FAILURE


class PermissionFailure(ProvisioningError):
    """The CID file mode could not be set."""

    status = ExitStatus.PERMISSION_FAILURE


class UnknownAccount(ProvisioningError):
    """The CID file owner account does not exist."""

    status = ExitStatus.UNKNOWN_ACCOUNT


class OwnershipFailure(ProvisioningError):
    """The CID file owner could not be changed."""

    status = ExitStatus.OWNERSHIP_FAILURE


class DriverWriteFailure(ProvisioningError):
    """The base calibration path could not be handed to the driver."""

    status = ExitStatus.DRIVER_WRITE_FAILURE


class CalibrationUnavailable(DriverWriteFailure):
    """The base calibration file does not exist."""
