"""Address lookup command implementation."""

import json

from rich.console import Console
from rich.markup import escape

from getip.core.engine import ResolutionEngine
from getip.core.errors import GetIPError
from getip.core.models import AddressVersion, ResolveOptions

console = Console()
err_console = Console(stderr=True)


async def lookup(version: AddressVersion, timeout: float, output: str, options) -> int:
    """Resolve and print the public address. Returns the process exit code."""
    engine = ResolutionEngine(options=ResolveOptions(timeout=timeout))

    try:
        address = await engine.resolve(version)
    except GetIPError as e:
        err_console.print(f"[red]Error:[/] {escape(str(e))}")
        return 1

    if output == "json":
        console.print_json(json.dumps({"address": str(address), "version": address.version}))
    else:
        console.print(str(address), highlight=False)
    return 0
