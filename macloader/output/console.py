"""
Macloader Console Output
=========================

Rich-based console output for provisioning runs, single-prefix lookups
and the vendor range table.
"""

from __future__ import annotations

from typing import Optional, Sequence

from rich.table import Table

from shared.console import LoaderConsole

from macloader.core.models import (
    CidAction,
    ExitStatus,
    ProvisioningResult,
    VendorRange,
    VendorType,
)


_VENDOR_COLORS: dict[VendorType, str] = {
    VendorType.MURATA: "bold bright_green",
    VendorType.SEMCOSH: "bold bright_cyan",
    VendorType.SEMCO3RD: "bold cyan",
    VendorType.SEMCO: "bold bright_blue",
    VendorType.WISOL: "bold bright_magenta",
    VendorType.NONE: "dim",
}

_CID_ACTION_LABELS: dict[CidAction, str] = {
    CidAction.WRITTEN: "[green]written[/green]",
    CidAction.REMOVED: "[yellow]removed[/yellow]",
    CidAction.UNTOUCHED: "[dim]untouched[/dim]",
}


def _vendor_cell(vendor: VendorType) -> str:
    color = _VENDOR_COLORS[vendor]
    return f"[{color}]{vendor.value}[/{color}]"


class MacloaderConsoleOutput:
    """Console display for macloader results.

    Args:
        console: LoaderConsole instance. Creates a new one if None.
    """

    def __init__(self, console: Optional[LoaderConsole] = None) -> None:
        self._console = console or LoaderConsole()

    def display_result(self, result: ProvisioningResult) -> None:
        """Render the summary of one provisioning run."""
        self._console.section("Provisioning")

        table = Table(
            show_header=False,
            border_style="bright_cyan",
            padding=(0, 2),
        )
        table.add_column("Field", style="bold")
        table.add_column("Value", style="bright_white")

        prefix = result.classification.prefix if result.classification else "-"
        table.add_row("MAC prefix", prefix)
        table.add_row("Vendor", _vendor_cell(result.vendor))
        table.add_row("CID file", result.cid_path)
        table.add_row("CID action", _CID_ACTION_LABELS[result.cid_action])

        if result.driver_writes:
            for idx, path in enumerate(result.driver_writes, start=1):
                table.add_row(f"Calibration #{idx}", path)
        else:
            table.add_row("Calibration", "[dim]not requested[/dim]")

        self._console.print(table)

        if result.exit_status is ExitStatus.SUCCESS:
            if result.driver_writes and not result.vendor_calibration_applied:
                self._console.warning(
                    "Vendor calibration not applied; using base calibration only"
                )
            self._console.success("Provisioning complete")
        else:
            self._console.error(
                f"Provisioning failed: {result.error} "
                f"(exit status {int(result.exit_status)}, {result.exit_status.name})"
            )

    def display_classification(self, prefix: str, vendor: VendorType) -> None:
        """Render the outcome of a single prefix lookup."""
        if vendor.is_match:
            self._console.success(
                f"{prefix} -> {_vendor_cell(vendor)} (CID '{vendor.cid_name}')"
            )
        else:
            self._console.warning(f"{prefix} does not match any vendor range")

    def display_ranges(
        self,
        ranges: Sequence[VendorRange],
        overlaps: dict[str, list[VendorType]],
    ) -> None:
        """Render the vendor range table and any overlapping prefixes."""
        self._console.section("Vendor Ranges")
        rows = [
            (
                _vendor_cell(r.vendor),
                r.vendor.cid_name,
                len(r),
                ", ".join(r.prefixes),
            )
            for r in ranges
        ]
        self._console.table(
            "Match Order",
            ["Vendor", "CID", "Entries", "Prefixes"],
            rows,
            caption="Vendors are tried top to bottom; first match wins.",
        )

        if not overlaps:
            self._console.success("No prefix is declared under more than one vendor")
            return

        for prefix, vendors in sorted(overlaps.items()):
            names = ", ".join(v.value for v in vendors)
            self._console.warning(
                f"{prefix} is declared under {names}; resolves to {vendors[0].value}"
            )
