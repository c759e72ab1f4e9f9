"""
Macloader CLI
==============

Click-based command-line interface for the macloader provisioning tool.

Running ``macloader`` with no arguments performs the boot-time
provisioning run, which is how the init system invokes it.

Commands:
    macloader                     Provision (default)
    macloader run                 Provision
    macloader classify PREFIX     Look up the vendor of a MAC prefix
    macloader ranges              Show the vendor range table

Common options:
    --config PATH       TOML file overriding the built-in paths
    --quiet             Suppress console output
    --verbose           Enable debug logging

References:
    - Click Documentation: https://click.palletsprojects.com/
"""

from __future__ import annotations

import sys
from typing import Optional

import click

from shared.config import LoaderConfig
from shared.console import LoaderConsole
from shared.logger import build_logger


# ---------------------------------------------------------------------------
# CLI Group
# ---------------------------------------------------------------------------


@click.group(
    name="macloader",
    invoke_without_command=True,
    help=(
        "MACLOADER - WiFi Vendor Provisioning\n\n"
        "Identify the WiFi module vendor from the device MAC address, "
        "record it in the CID file and select the matching NVRAM "
        "calibration. Without a subcommand, performs the provisioning run."
    ),
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to a macloader configuration file (TOML).",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Suppress console output (exit status only).",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable debug logging.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_path: Optional[str],
    quiet: bool,
    verbose: bool,
) -> None:
    """Macloader - main CLI entry point."""
    ctx.ensure_object(dict)

    try:
        config = LoaderConfig.load(config_path) if config_path else LoaderConfig()
    except (FileNotFoundError, ValueError, TypeError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    ctx.obj["config"] = config
    ctx.obj["console"] = LoaderConsole(quiet=quiet)
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(run_provisioning)


# ---------------------------------------------------------------------------
# Provisioning Command
# ---------------------------------------------------------------------------


@cli.command(
    name="run",
    help=(
        "Provision the WiFi vendor.\n\n"
        "Reads the MAC prefix, writes or removes the CID file and "
        "requests the calibration switch. Exits non-zero on the first "
        "fatal error."
    ),
)
@click.pass_context
def run_provisioning(ctx: click.Context) -> None:
    """Run the provisioning pipeline and exit with its status."""
    config = ctx.obj["config"]
    console = ctx.obj["console"]

    from macloader.core.engine import ProvisioningPipeline
    from macloader.output.console import MacloaderConsoleOutput

    log = build_logger(
        "core.engine", config.global_settings, verbose=ctx.obj["verbose"]
    )
    pipeline = ProvisioningPipeline(config=config, log=log)
    try:
        status = pipeline.run()
    finally:
        log.close()

    if pipeline.last_result is not None:
        MacloaderConsoleOutput(console).display_result(pipeline.last_result)

    sys.exit(int(status))


# ---------------------------------------------------------------------------
# Classify Command
# ---------------------------------------------------------------------------


@cli.command(
    name="classify",
    help=(
        "Look up the vendor of a MAC prefix.\n\n"
        "PREFIX is compared case-insensitively against the vendor range "
        "table, e.g. 00:37:6d. Exits 1 when no vendor matches. "
        "Does not touch the file system."
    ),
)
@click.argument("prefix")
@click.pass_context
def classify(ctx: click.Context, prefix: str) -> None:
    """Classify a single MAC prefix."""
    console = ctx.obj["console"]

    from macloader.analyzers.classifier import classify_mac_prefix
    from macloader.output.console import MacloaderConsoleOutput

    vendor = classify_mac_prefix(prefix)
    MacloaderConsoleOutput(console).display_classification(prefix, vendor)

    if not vendor.is_match:
        sys.exit(1)


# ---------------------------------------------------------------------------
# Ranges Command
# ---------------------------------------------------------------------------


@cli.command(
    name="ranges",
    help=(
        "Show the vendor range table.\n\n"
        "Lists vendors in match order and flags prefixes declared under "
        "more than one vendor."
    ),
)
@click.pass_context
def ranges(ctx: click.Context) -> None:
    """Display the built-in vendor range table."""
    console = ctx.obj["console"]

    from macloader.analyzers.classifier import RangeClassifier
    from macloader.output.console import MacloaderConsoleOutput

    classifier = RangeClassifier()
    MacloaderConsoleOutput(console).display_ranges(
        classifier.ranges, classifier.overlapping_prefixes()
    )


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """Main entry point for the macloader CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
