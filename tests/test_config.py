"""Tests for TOML configuration loading."""

from __future__ import annotations

import pytest

from shared.config import LoaderConfig


def test_defaults_match_device_paths():
    config = LoaderConfig()
    assert config.macloader.macaddr_path == "/efs/wifi/.mac.info"
    assert config.macloader.cid_path == "/data/.cid.info"
    assert config.macloader.cid_owner == "system"
    assert config.macloader.cid_mode == 0o644
    assert config.macloader.nvram_param_path == "/sys/module/dhd/parameters/nvram_path"


def test_load_overrides_and_ignores_unknown_keys(tmp_path):
    path = tmp_path / "board.toml"
    path.write_text(
        "[global]\n"
        "log_level = 'DEBUG'\n"
        "[macloader]\n"
        "cid_path = '/tmp/.cid.info'\n"
        "nvram_path = ''\n"
        "unknown_key = 1\n",
        encoding="utf-8",
    )
    config = LoaderConfig.load(path)
    assert config.global_settings.log_level == "DEBUG"
    assert config.macloader.cid_path == "/tmp/.cid.info"
    assert config.macloader.nvram_path == ""
    assert config.macloader.macaddr_path == "/efs/wifi/.mac.info"


def test_explicit_missing_path_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        LoaderConfig.load(tmp_path / "absent.toml")


def test_to_dict_round_trips_sections():
    data = LoaderConfig().to_dict()
    assert set(data) == {"global_settings", "macloader"}


def test_get_config_caches_until_a_path_is_given(tmp_path):
    from shared.config import get_config

    path = tmp_path / "board.toml"
    path.write_text("[macloader]\ncid_owner = 'wifi'\n", encoding="utf-8")

    loaded = get_config(path)
    assert loaded.macloader.cid_owner == "wifi"
    assert get_config() is loaded


def test_quoted_cid_mode_is_read_as_octal(tmp_path):
    path = tmp_path / "board.toml"
    path.write_text("[macloader]\ncid_mode = '0640'\n", encoding="utf-8")
    assert LoaderConfig.load(path).macloader.cid_mode == 0o640


def test_toml_octal_cid_mode_is_kept(tmp_path):
    path = tmp_path / "board.toml"
    path.write_text("[macloader]\ncid_mode = 0o600\n", encoding="utf-8")
    assert LoaderConfig.load(path).macloader.cid_mode == 0o600


@pytest.mark.parametrize(
    ("value", "error"),
    [
        ("'rw-r--r--'", ValueError),
        ("true", TypeError),
        ("6.44", TypeError),
        ("0o17777", ValueError),
    ],
)
def test_invalid_cid_mode_is_rejected(tmp_path, value, error):
    path = tmp_path / "board.toml"
    path.write_text(f"[macloader]\ncid_mode = {value}\n", encoding="utf-8")
    with pytest.raises(error, match="cid_mode"):
        LoaderConfig.load(path)
