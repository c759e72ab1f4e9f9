"""
Macloader Configuration Management
===================================

Centralized configuration for the macloader provisioning tool using
Python dataclasses and TOML-based persistence.

Every value has a built-in default matching the paths the device image
expects at boot, so the tool runs without any configuration file at all.
A TOML file only overrides those defaults (for bring-up on a new board
or for tests).

References:
    - PEP 681 -- Data Class Transforms (2022).
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Config ===========================


@dataclass(frozen=False, slots=True)
class MacloaderConfig:
    """Paths and identity used by the provisioning pipeline.

    ``nvram_path`` may be empty, in which case the calibration switch
    request is skipped entirely.
    """

    # MAC prefix source
    macaddr_path: str = "/efs/wifi/.mac.info"

    # CID file
    cid_path: str = "/data/.cid.info"
    cid_owner: str = "system"
    cid_mode: int = 0o644

    # Driver calibration
    nvram_path: str = "/system/etc/wifi/nvram_net.txt"
    nvram_param_path: str = "/sys/module/dhd/parameters/nvram_path"

    def __post_init__(self) -> None:
        # TOML spells octal as 0o644; a quoted "0644" is read as octal as well.
        mode = self.cid_mode
        if isinstance(mode, str):
            try:
                mode = int(mode, 8)
            except ValueError:
                raise ValueError(
                    f"cid_mode must be an octal permission string, got {self.cid_mode!r}"
                ) from None
        elif isinstance(mode, bool) or not isinstance(mode, int):
            raise TypeError(
                f"cid_mode must be an integer or octal string, got {type(mode).__name__}"
            )
        if not 0 <= mode <= 0o7777:
            raise ValueError(f"cid_mode {oct(mode)} is outside 0o0..0o7777")
        self.cid_mode = mode


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Logging and general operational settings."""

    log_level: str = "INFO"
    log_file: str = ""
    log_json: bool = False
    debug: bool = False
    version: str = "1.0.0"


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class LoaderConfig:
    """Master configuration aggregating tool-specific and global settings.

    Usage:
        >>> config = LoaderConfig.load()                  # from default path
        >>> config = LoaderConfig.load("board.toml")      # from custom path
        >>> print(config.macloader.cid_path)
        '/data/.cid.info'
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    macloader: MacloaderConfig = field(default_factory=MacloaderConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> LoaderConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys gracefully fall back to dataclass
        defaults -- no ``KeyError`` is raised.

        Args:
            path: Filesystem path to a TOML configuration file.
                  Defaults to ``<project_root>/config.toml``.

        Returns:
            A fully-populated :class:`LoaderConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            # Fall back to pure defaults when the default file is absent.
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            macloader=cls._build_section(MacloaderConfig, raw.get("macloader", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    # ------------------------------------------------------------------ #
    #  Internal helpers
    # ------------------------------------------------------------------ #

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are silently ignored so that
        forward-compatible config files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)


# ========================= Module-level convenience ========================

def get_config(path: str | Path | None = None) -> LoaderConfig:
    """Module-level convenience wrapper around :meth:`LoaderConfig.load`.

    Caches the result so that repeated imports share one instance.
    """
    if not hasattr(get_config, "_cached") or path is not None:
        get_config._cached = LoaderConfig.load(path)  # type: ignore[attr-defined]
    return get_config._cached  # type: ignore[attr-defined]
