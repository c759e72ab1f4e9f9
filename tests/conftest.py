"""Shared fixtures: a throw-away device file-system layout under tmp_path."""

from __future__ import annotations

import os
import pwd
from dataclasses import dataclass
from pathlib import Path

import pytest

from shared.config import GlobalConfig, LoaderConfig, MacloaderConfig


@dataclass
class DeviceLayout:
    root: Path
    macaddr: Path
    cid: Path
    nvram: Path
    nvram_param: Path
    owner: str

    def config(self, **overrides) -> LoaderConfig:
        settings = MacloaderConfig(
            macaddr_path=str(self.macaddr),
            cid_path=str(self.cid),
            cid_owner=self.owner,
            nvram_path=str(self.nvram),
            nvram_param_path=str(self.nvram_param),
        )
        for key, value in overrides.items():
            setattr(settings, key, value)
        return LoaderConfig(global_settings=GlobalConfig(), macloader=settings)

    def write_mac(self, text: str) -> None:
        self.macaddr.write_text(text, encoding="ascii")

    def driver_writes(self) -> list[str]:
        raw = self.nvram_param.read_bytes()
        return [chunk.decode() for chunk in raw.split(b"\0") if chunk]


@pytest.fixture
def current_account() -> str:
    try:
        return pwd.getpwuid(os.getuid()).pw_name
    except KeyError:
        pytest.skip("current uid has no passwd entry")


@pytest.fixture
def device(tmp_path: Path, current_account: str) -> DeviceLayout:
    layout = DeviceLayout(
        root=tmp_path,
        macaddr=tmp_path / "efs" / ".mac.info",
        cid=tmp_path / "data" / ".cid.info",
        nvram=tmp_path / "etc" / "nvram_net.txt",
        nvram_param=tmp_path / "sys" / "nvram_path",
        owner=current_account,
    )
    for path in (layout.macaddr, layout.cid, layout.nvram, layout.nvram_param):
        path.parent.mkdir(parents=True, exist_ok=True)
    layout.nvram.write_bytes(b"calibration")
    layout.nvram_param.write_bytes(b"")
    return layout
