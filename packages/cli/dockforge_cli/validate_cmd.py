"""Validate command - Check an answers file."""
import typer

from dockforge_common import DEFAULT_SELECTION_FILE, DockforgeError
from dockforge_sdk import load_selection

from .utils import console, handle_error, success


def validate(
    path: str = typer.Argument(DEFAULT_SELECTION_FILE, help="Path to answers file"),
):
    """
    Validate an answers file and list every problem found.

    Examples:
        dockforge validate
        dockforge validate deploy/dockforge.yaml
    """
    try:
        selection = load_selection(path)
    except DockforgeError as e:
        handle_error(e)
        return

    success(f"{path} is valid")
    console.print(
        f"  [dim]{selection.project_name}: {selection.framework} on Python "
        f"{selection.python_version}, environment {selection.environment}[/dim]"
    )
