"""Main CLI entry point for getip."""

import asyncio
import logging
from enum import Enum

import typer
from rich.console import Console
from rich.logging import RichHandler

from getip.core.models import AddressVersion

# Create the main app
app = typer.Typer(
    name="getip",
    help="Find the public IP address of this host using DNS echo services",
    no_args_is_help=True,
)

console = Console()
err_console = Console(stderr=True)


class OutputFormat(str, Enum):
    """Output format options."""

    TEXT = "text"
    JSON = "json"


class GlobalOptions:
    def __init__(self):
        self.verbose: bool = False


def _version_from_flags(ipv4: bool, ipv6: bool) -> AddressVersion:
    if ipv4 and ipv6:
        raise typer.BadParameter("--ipv4 and --ipv6 are mutually exclusive")
    if ipv4:
        return AddressVersion.V4
    if ipv6:
        return AddressVersion.V6
    return AddressVersion.ANY


# ============================================================================
# Address Commands
# ============================================================================


@app.command("addr")
def addr(
    ctx: typer.Context,
    ipv4: bool = typer.Option(False, "--ipv4", "-4", help="Only accept an IPv4 address"),
    ipv6: bool = typer.Option(False, "--ipv6", "-6", help="Only accept an IPv6 address"),
    timeout: float = typer.Option(5.0, "--timeout", min=0.001, help="Per-query timeout in seconds"),
    output: OutputFormat = typer.Option(OutputFormat.TEXT, "--output", "-o", help="Output format"),
):
    """Print the public IP address of this host."""
    from getip.cli.commands.lookup import lookup

    version = _version_from_flags(ipv4, ipv6)
    code = asyncio.run(lookup(version, timeout, output.value, ctx.obj))
    raise typer.Exit(code)


@app.command("providers")
def providers(
    ctx: typer.Context,
    ipv4: bool = typer.Option(False, "--ipv4", "-4", help="Only show IPv4 servers"),
    ipv6: bool = typer.Option(False, "--ipv6", "-6", help="Only show IPv6 servers"),
):
    """List the DNS echo providers in priority order."""
    from getip.cli.commands.providers import show

    show(_version_from_flags(ipv4, ipv6), ctx.obj)


# ============================================================================
# Version Command
# ============================================================================


@app.command("version")
def version():
    """Show version information."""
    from getip import __version__

    console.print(f"getip version {__version__}")


# ============================================================================
# Main Callback (Global Options)
# ============================================================================


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log every query attempt"),
):
    """getip - public IP discovery over DNS."""
    ctx.ensure_object(GlobalOptions)
    ctx.obj.verbose = verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


if __name__ == "__main__":
    app()
