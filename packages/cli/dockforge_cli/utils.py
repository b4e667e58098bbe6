"""Console helpers shared by CLI commands."""
import typer
from rich.console import Console
from rich.table import Table

from dockforge_common import DockforgeError, InvalidSelection

console = Console()


def success(message: str) -> None:
    console.print(f"[bold green]✓[/bold green] {message}")


def error(message: str) -> None:
    console.print(f"[bold red]✗[/bold red] {message}")


def warning(message: str) -> None:
    console.print(f"[bold yellow]![/bold yellow] {message}")


def info(message: str) -> None:
    console.print(f"[bold cyan]i[/bold cyan] {message}")


def confirm_action(message: str, default: bool = False) -> bool:
    """Ask the user a yes/no question."""
    return typer.confirm(message, default=default)


def print_violations(exc: InvalidSelection) -> None:
    """Show every violated constraint of an InvalidSelection."""
    error(f"Selection is invalid ({len(exc.violations)} problem(s))")
    table = Table(show_header=True, header_style="bold red")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Problem")
    for violation in exc.violations:
        table.add_row(violation.field, violation.message)
    console.print(table)


def handle_error(exc: Exception) -> None:
    """Report an error and exit with status 1."""
    if isinstance(exc, InvalidSelection):
        print_violations(exc)
    elif isinstance(exc, DockforgeError):
        error(exc.message)
    else:
        error(f"Unexpected error: {exc}")
    raise typer.Exit(1)
