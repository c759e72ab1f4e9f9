"""
Macloader Console Interface
============================

Rich-powered console abstraction providing a single presentation layer
for the macloader tool.

The class wraps :class:`rich.console.Console` and adds convenience methods
for section headers, status-coloured messages and tables, all with
consistent styling.

References:
    - Rich library: https://github.com/Textualize/rich
"""

from __future__ import annotations

from typing import Any, Sequence

from rich.console import Console
from rich.table import Table
from rich.theme import Theme

# ---------------------------------------------------------------------------
# Theme -- consistent palette across all macloader output
# ---------------------------------------------------------------------------
_LOADER_THEME = Theme(
    {
        "loader.section": "bold bright_magenta",
        "loader.success": "bold green",
        "loader.warning": "bold yellow",
        "loader.error": "bold red",
    }
)


class LoaderConsole:
    """Unified console interface for macloader.

    Usage::

        con = LoaderConsole()
        con.section("Provisioning")
        con.success("CID file written")
    """

    def __init__(self, *, quiet: bool = False) -> None:
        """Initialise the console.

        Args:
            quiet: Suppress all output (boot mode / tests).
        """
        self._console = Console(
            theme=_LOADER_THEME,
            quiet=quiet,
            highlight=False,
        )

    @property
    def rich(self) -> Console:
        """Direct access to the underlying Rich Console instance."""
        return self._console

    # ------------------------------------------------------------------ #
    #  Section header
    # ------------------------------------------------------------------ #

    def section(self, title: str) -> None:
        """Print a prominent section header."""
        self._console.rule(
            f"  {title}  ",
            style="loader.section",
            characters="─",
        )

    # ------------------------------------------------------------------ #
    #  Message helpers
    # ------------------------------------------------------------------ #

    def success(self, message: str) -> None:
        self._console.print(
            f"[loader.success][✔] SUCCESS:[/loader.success] {message}"
        )

    def warning(self, message: str) -> None:
        self._console.print(
            f"[loader.warning][⚠] WARNING:[/loader.warning] {message}"
        )

    def error(self, message: str) -> None:
        self._console.print(
            f"[loader.error][✘] ERROR:[/loader.error] {message}"
        )

    # ------------------------------------------------------------------ #
    #  Table display
    # ------------------------------------------------------------------ #

    def table(
        self,
        title: str,
        columns: Sequence[str],
        rows: Sequence[Sequence[Any]],
        *,
        caption: str | None = None,
        styles: Sequence[str] | None = None,
    ) -> None:
        """Render a styled Rich table.

        Args:
            title:    Table title.
            columns:  Column header labels.
            rows:     Iterable of row tuples; each element is stringified.
            caption:  Optional footer caption.
            styles:   Optional per-column Rich style strings.
        """
        tbl = Table(
            title=title,
            caption=caption,
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=False,
            padding=(0, 1),
        )
        for idx, col_name in enumerate(columns):
            style = styles[idx] if styles and idx < len(styles) else ""
            tbl.add_column(col_name, style=style)

        for row in rows:
            tbl.add_row(*(str(cell) for cell in row))

        self._console.print(tbl)

    # ------------------------------------------------------------------ #
    #  Utility
    # ------------------------------------------------------------------ #

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Proxy to :meth:`rich.console.Console.print`."""
        self._console.print(*args, **kwargs)
