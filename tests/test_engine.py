"""Tests for the provisioning pipeline side effects and exit statuses."""

from __future__ import annotations

import errno
import os
import stat

import pytest

from macloader.analyzers.classifier import RangeClassifier
from macloader.core.engine import ProvisioningPipeline
from macloader.core.errors import CalibrationUnavailable, DriverWriteFailure
from macloader.core.models import CidAction, ExitStatus, VendorRange, VendorType


def _pipeline(device, **overrides) -> ProvisioningPipeline:
    return ProvisioningPipeline(config=device.config(**overrides))


def _failing(*args, **kwargs):
    raise OSError(errno.EPERM, "Operation not permitted")


# ---------------------------------------------------------------------------
# Matching vendor
# ---------------------------------------------------------------------------


def test_wisol_example_writes_cid_and_both_calibrations(device):
    device.write_mac("aa:bb:cc:01:02:03\n")
    (device.root / "etc" / "nvram_net.txt_wisol").write_bytes(b"wisol calibration")
    classifier = RangeClassifier(
        [VendorRange(vendor=VendorType.WISOL, prefixes=("AA:BB:CC",))]
    )
    pipeline = ProvisioningPipeline(config=device.config(), classifier=classifier)

    assert pipeline.run() is ExitStatus.SUCCESS

    assert device.cid.read_text() == "wisol"
    assert device.driver_writes() == [
        str(device.nvram),
        f"{device.nvram}_wisol",
    ]
    result = pipeline.last_result
    assert result.vendor is VendorType.WISOL
    assert result.cid_action is CidAction.WRITTEN
    assert result.vendor_calibration_applied


def test_match_sets_mode_and_owner(device):
    device.write_mac("00:37:6d:aa:bb:cc\n")

    assert _pipeline(device).run() is ExitStatus.SUCCESS

    st = device.cid.stat()
    assert device.cid.read_text() == "murata"
    assert stat.S_IMODE(st.st_mode) == 0o644
    assert st.st_uid == os.getuid()


def test_driver_writes_are_nul_terminated(device):
    device.write_mac("00:37:6d")

    _pipeline(device).run()

    assert device.nvram_param.read_bytes() == str(device.nvram).encode() + b"\0"


def test_existing_cid_file_is_overwritten(device):
    device.cid.write_text("semco3rd-with-a-long-tail")
    device.write_mac("48:5a:3f")

    assert _pipeline(device).run() is ExitStatus.SUCCESS
    assert device.cid.read_text() == "wisol"


def test_missing_vendor_calibration_falls_back_to_base(device):
    device.write_mac("cc:3a:61:00:00:00")
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.SUCCESS

    assert device.driver_writes() == [str(device.nvram)]
    assert not pipeline.last_result.vendor_calibration_applied


def test_failed_vendor_calibration_write_is_not_fatal(device, monkeypatch):
    device.write_mac("5c:0a:5b")
    (device.root / "etc" / "nvram_net.txt_semcosh").write_bytes(b"semcosh")
    original = ProvisioningPipeline._send_path

    def send_base_only(driver, path):
        if path.endswith("_semcosh"):
            raise OSError(errno.EIO, "Input/output error")
        original(driver, path)

    monkeypatch.setattr(ProvisioningPipeline, "_send_path", staticmethod(send_base_only))
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.SUCCESS
    assert device.driver_writes() == [str(device.nvram)]
    assert pipeline.last_result.driver_writes == [str(device.nvram)]


def test_empty_nvram_path_skips_calibration(device):
    device.write_mac("00:37:6d")
    pipeline = _pipeline(device, nvram_path="")

    assert pipeline.run() is ExitStatus.SUCCESS
    assert device.cid.read_text() == "murata"
    assert device.nvram_param.read_bytes() == b""
    assert pipeline.last_result.driver_writes == []


# ---------------------------------------------------------------------------
# No match
# ---------------------------------------------------------------------------


def test_no_match_removes_stale_cid_file(device):
    device.cid.write_text("murata")
    device.write_mac("de:ad:be:ef:00:01")
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.SUCCESS

    assert not device.cid.exists()
    assert device.nvram_param.read_bytes() == b""
    assert pipeline.last_result.cid_action is CidAction.REMOVED


def test_no_match_without_cid_file_succeeds(device):
    device.write_mac("de:ad:be")
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.SUCCESS
    assert not device.cid.exists()
    assert pipeline.last_result.cid_action is CidAction.UNTOUCHED


# ---------------------------------------------------------------------------
# Fatal errors
# ---------------------------------------------------------------------------


def test_unreadable_source_mutates_nothing(device):
    device.cid.write_text("murata")
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.CONFIG_UNAVAILABLE

    assert device.cid.read_text() == "murata"
    assert device.nvram_param.read_bytes() == b""
    assert pipeline.last_result.classification is None
    assert pipeline.last_result.error


def test_cid_open_failure(device):
    device.write_mac("00:37:6d")
    pipeline = _pipeline(device, cid_path=str(device.root / "missing" / ".cid.info"))

    assert pipeline.run() is ExitStatus.CID_WRITE_FAILURE
    assert device.nvram_param.read_bytes() == b""


def test_permission_failure(device, monkeypatch):
    device.write_mac("00:37:6d")
    monkeypatch.setattr(os, "fchmod", _failing)

    assert _pipeline(device).run() is ExitStatus.PERMISSION_FAILURE
    assert device.nvram_param.read_bytes() == b""


def test_unknown_account(device):
    device.write_mac("00:37:6d")

    status = _pipeline(device, cid_owner="no-such-account-macloader").run()

    assert status is ExitStatus.UNKNOWN_ACCOUNT
    assert device.cid.read_text() == "murata"
    assert device.nvram_param.read_bytes() == b""


def test_ownership_failure(device, monkeypatch):
    device.write_mac("00:37:6d")
    monkeypatch.setattr(os, "fchown", _failing)

    assert _pipeline(device).run() is ExitStatus.OWNERSHIP_FAILURE


def test_driver_open_failure_keeps_cid_file(device):
    device.write_mac("00:37:6d")
    device.nvram_param.unlink()
    pipeline = _pipeline(device)

    assert pipeline.run() is ExitStatus.DRIVER_WRITE_FAILURE

    assert device.cid.read_text() == "murata"
    assert not device.nvram_param.exists()


def test_short_driver_write_is_fatal(device, monkeypatch):
    device.write_mac("00:37:6d")

    def short_write(driver, path):
        raise OSError(errno.EIO, "short write (3 of 10 bytes)")

    monkeypatch.setattr(ProvisioningPipeline, "_send_path", staticmethod(short_write))

    assert _pipeline(device).run() is ExitStatus.DRIVER_WRITE_FAILURE


def test_missing_base_calibration_is_fatal(device):
    device.write_mac("00:37:6d")
    device.nvram.unlink()

    with pytest.raises(CalibrationUnavailable) as info:
        _pipeline(device).provision()

    assert isinstance(info.value, DriverWriteFailure)
    assert info.value.status is ExitStatus.DRIVER_WRITE_FAILURE
    assert device.nvram_param.read_bytes() == b""


def test_trailing_binary_data_in_mac_file_still_classifies(device):
    device.macaddr.write_bytes(b"00:37:6d:12:34:56\n\xff")

    assert _pipeline(device).run() is ExitStatus.SUCCESS
    assert device.cid.read_text() == "murata"
