"""
Macloader Engine
=================

Provisioning pipeline run once at boot. It classifies the device MAC
prefix and leaves the result where later boot stages and the WiFi driver
pick it up.

The pipeline is strictly linear:
    1. Read the MAC prefix from the persistent partition
    2. Classify it against the vendor range table
    3. No match: remove any stale CID file and stop
    4. Match: write the CID file, then set its mode and owner
    5. Point the driver at the base calibration file, then at the
       vendor-specific variant when one is installed

Every stage except the vendor-specific calibration write is fatal on
failure. Nothing already committed is rolled back.
"""

from __future__ import annotations

import errno
import os
import pwd
from pathlib import Path
from typing import BinaryIO, Optional

from shared.config import LoaderConfig
from shared.logger import LoaderLogger

from macloader.analyzers.classifier import RangeClassifier
from macloader.collectors.macaddr import MacPrefixReader
from macloader.core.errors import (
    CalibrationUnavailable,
    CidWriteFailure,
    DriverWriteFailure,
    OwnershipFailure,
    PermissionFailure,
    ProvisioningError,
    UnknownAccount,
)
from macloader.core.models import (
    CalibrationRequest,
    CidAction,
    ExitStatus,
    ProvisioningResult,
    VendorType,
)

logger = LoaderLogger("core.engine")


def _open_write_only(path: str, flags: int) -> int:
    # Driver parameters must exist already; never create or truncate them.
    return os.open(path, os.O_WRONLY)


class ProvisioningPipeline:
    """Boot-time WiFi vendor provisioning.

    Usage::

        pipeline = ProvisioningPipeline()
        status = pipeline.run()
        sys.exit(int(status))

    Args:
        config: Loader configuration. Uses built-in defaults if None.
        classifier: Vendor classifier. Uses the built-in table if None.
        log: Logger to report through. Uses the module logger if None.
    """

    def __init__(
        self,
        config: Optional[LoaderConfig] = None,
        classifier: Optional[RangeClassifier] = None,
        log: Optional[LoaderLogger] = None,
    ) -> None:
        self._config = config or LoaderConfig()
        self._settings = self._config.macloader
        self._log = log or logger
        self._classifier = classifier or RangeClassifier(log=self._log)
        self._reader = MacPrefixReader(self._settings.macaddr_path)
        self.last_result: Optional[ProvisioningResult] = None

    # ------------------------------------------------------------------ #
    #  Entry points
    # ------------------------------------------------------------------ #

    def run(self) -> ExitStatus:
        """Execute the pipeline and return the process exit status.

        Fatal errors are logged and converted to their exit status; the
        partial result stays available on :attr:`last_result`.
        """
        try:
            self.provision()
        except ProvisioningError as exc:
            self._log.error("%s", exc)
            self._log.error("Macloader error return code: %d", int(exc.status))
            if self.last_result is not None:
                self.last_result.exit_status = exc.status
                self.last_result.error = str(exc)
            return exc.status
        return ExitStatus.SUCCESS

    def provision(self) -> ProvisioningResult:
        """Execute the pipeline, raising on the first fatal error.

        Raises:
            ProvisioningError: Subclass matching the failed stage.
        """
        result = ProvisioningResult(cid_path=self._settings.cid_path)
        self.last_result = result

        with self._log.operation("read_mac_prefix"):
            prefix = self._reader.read()

        with self._log.operation("classify"):
            classification = self._classifier.classify_result(prefix)
            result.classification = classification

        if not classification.matched:
            with self._log.operation("remove_cid_file"):
                if self._remove_cid_file():
                    result.cid_action = CidAction.REMOVED
            return result

        vendor = classification.vendor
        self._log.info("Found CID type: %s", vendor.value, prefix=prefix)

        with self._log.operation("write_cid_file"):
            self._write_cid_file(vendor)
            result.cid_action = CidAction.WRITTEN

        nvram_path = self._settings.nvram_path
        if nvram_path:
            with self._log.operation("request_calibration_switch"):
                request = CalibrationRequest(base_path=nvram_path, vendor=vendor)
                self._request_calibration_switch(request, result)

        return result

    # ------------------------------------------------------------------ #
    #  Stages
    # ------------------------------------------------------------------ #

    def _remove_cid_file(self) -> bool:
        """Delete the CID file; returns whether a file was removed."""
        cid_path = self._settings.cid_path
        self._log.debug("Deleting file %s", cid_path)
        try:
            os.remove(cid_path)
        except FileNotFoundError:
            return False
        except OSError as exc:
            self._log.warning("Can't delete %s: %s", cid_path, exc.strerror)
            return False
        return True

    def _write_cid_file(self, vendor: VendorType) -> None:
        """Write the vendor name to the CID file and fix its mode and owner."""
        cid_path = self._settings.cid_path
        type_str = vendor.cid_name

        self._log.info("Setting wifi type to %s in %s", type_str, cid_path)

        try:
            cid_file = open(cid_path, "w", encoding="ascii")
        except OSError as exc:
            raise CidWriteFailure(
                f"Can't open {cid_path}: {exc.strerror}", path=cid_path
            ) from exc

        with cid_file:
            try:
                cid_file.write(type_str)
                cid_file.flush()
            except OSError as exc:
                raise CidWriteFailure(
                    f"Can't write to {cid_path}: {exc.strerror}", path=cid_path
                ) from exc

            fd = cid_file.fileno()

            self._log.debug("Change permissions of %s", cid_path)
            try:
                os.fchmod(fd, self._settings.cid_mode)
            except OSError as exc:
                raise PermissionFailure(
                    f"Can't set permissions on {cid_path} - {exc.strerror}",
                    path=cid_path,
                ) from exc

            owner = self._settings.cid_owner
            try:
                account = pwd.getpwnam(owner)
            except KeyError as exc:
                raise UnknownAccount(
                    f"Failed to find '{owner}' user", path=cid_path
                ) from exc

            try:
                os.fchown(fd, account.pw_uid, account.pw_gid)
            except OSError as exc:
                raise OwnershipFailure(
                    f"Failed to change owner of {cid_path} - {exc.strerror}",
                    path=cid_path,
                ) from exc

    def _request_calibration_switch(
        self,
        request: CalibrationRequest,
        result: ProvisioningResult,
    ) -> None:
        """Hand the base and vendor calibration paths to the driver.

        Only a failure to deliver the base path is fatal.
        """
        param_path = self._settings.nvram_param_path
        base_path = request.base_path

        if not Path(base_path).exists():
            raise CalibrationUnavailable(
                f"Failed to check for NVRAM calibration file '{base_path}'",
                path=base_path,
            )

        self._log.debug("Using NVRAM calibration file: %s", base_path)

        try:
            driver = open(param_path, "wb", buffering=0, opener=_open_write_only)
        except OSError as exc:
            raise DriverWriteFailure(
                f"Failed to open wifi nvram config path {param_path} - {exc.strerror}",
                path=param_path,
            ) from exc

        with driver:
            try:
                self._send_path(driver, base_path)
            except OSError as exc:
                raise DriverWriteFailure(
                    f"Failed to write to wifi config path {param_path} - {exc.strerror}",
                    path=param_path,
                ) from exc
            result.driver_writes.append(base_path)

            vendor_path = request.vendor_path
            self._log.debug(
                "Changing NVRAM calibration file for %s chipset", request.suffix
            )

            if not Path(vendor_path).exists():
                self._log.warning(
                    "NVRAM calibration file '%s' doesn't exist", vendor_path
                )
                return

            try:
                self._send_path(driver, vendor_path)
            except OSError as exc:
                self._log.warning(
                    "Failed to write to wifi config path %s - %s",
                    param_path, exc.strerror,
                )
                return

            result.driver_writes.append(vendor_path)
            result.vendor_calibration_applied = True
            self._log.info("NVRAM calibration file set to '%s'", vendor_path)

    @staticmethod
    def _send_path(driver: BinaryIO, path: str) -> None:
        """Write *path* NUL-terminated, treating a short write as an error."""
        payload = path.encode() + b"\0"
        written = driver.write(payload)
        if written != len(payload):
            raise OSError(
                errno.EIO,
                f"short write ({written} of {len(payload)} bytes)",
            )
