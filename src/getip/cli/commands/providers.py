"""Provider listing command implementation."""

from rich.console import Console
from rich.table import Table

from getip.core import providers as catalog
from getip.core.models import AddressVersion

console = Console()


def show(version: AddressVersion, options) -> None:
    """Print the provider catalog, keeping only servers that match ``version``."""
    table = Table(title="DNS Echo Providers")
    table.add_column("#", style="dim")
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Query", style="magenta")
    table.add_column("Method", style="yellow")
    table.add_column("Class")
    table.add_column("Port")
    table.add_column("Servers", style="green")

    for index, provider in enumerate(catalog.ALL, 1):
        servers = provider.servers_for(version)
        if not servers:
            continue
        table.add_row(
            str(index),
            provider.name,
            provider.query_name,
            provider.method.value,
            provider.query_class.value,
            str(provider.port),
            "\n".join(str(s) for s in servers),
        )

    console.print(table)
