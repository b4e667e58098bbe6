"""Info command - Version information."""
import sys

from rich.table import Table

from .utils import console


def version():
    """
    Show dockforge version information.

    Examples:
        dockforge version
    """
    import dockforge_cli
    import dockforge_sdk

    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    table = Table(title="dockforge Version Information", show_header=True, header_style="bold cyan")
    table.add_column("Component", style="cyan", no_wrap=True)
    table.add_column("Version", style="green")

    table.add_row("CLI", dockforge_cli.__version__)
    table.add_row("SDK", dockforge_sdk.__version__)
    table.add_row("Python", python_version)

    console.print(table)
