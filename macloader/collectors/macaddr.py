"""
MAC Prefix Reader
==================

Reads the device MAC address prefix from the file the bootloader or
factory tooling leaves on the persistent partition. Only the first line
is consulted, and only up to ``RANGE_ENTRY_LEN - 1`` characters of it,
so a full address such as ``00:37:6d:12:34:56`` yields ``00:37:6d``.
"""

from __future__ import annotations

from pathlib import Path

from macloader.core.errors import ConfigUnavailable
from macloader.core.models import RANGE_ENTRY_LEN


class MacPrefixReader:
    """Bounded reader for the MAC prefix source file.

    Args:
        path: Path of the MAC address file.
        max_length: Maximum number of characters to read.
    """

    def __init__(self, path: str | Path, max_length: int = RANGE_ENTRY_LEN - 1) -> None:
        self._path = Path(path)
        self._max_length = max_length

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> str:
        """Return the MAC prefix from the first line of the source file.

        Only the bounded slice is decoded, byte for byte (latin-1), so
        whatever follows the first line never affects the result.

        Raises:
            ConfigUnavailable: The file cannot be opened or read, or holds
                no data.
        """
        try:
            with open(self._path, "rb") as fh:
                raw = fh.readline(self._max_length)
        except OSError as exc:
            raise ConfigUnavailable(
                f"Can't read {self._path}: {exc}", path=str(self._path)
            ) from exc

        if not raw:
            raise ConfigUnavailable(
                f"Can't read from {self._path}: file is empty",
                path=str(self._path),
            )

        return raw.decode("latin-1").rstrip("\r\n")
