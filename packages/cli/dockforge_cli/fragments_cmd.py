"""Fragments command - Inspect the template catalog."""
from typing import Optional

import typer
from rich.syntax import Syntax
from rich.table import Table

from dockforge_common import DockforgeError
from dockforge_sdk import FragmentKey, list_fragments
from dockforge_sdk.templates import get_fragment

from .utils import console, error, handle_error


def fragments(
    category: Optional[str] = typer.Option(None, "--category", "-c", help="Only list this category"),
    show: Optional[str] = typer.Option(None, "--show", help="Print one fragment, e.g. service/postgresql"),
):
    """
    List the fragments dockforge assembles artifacts from.

    Examples:
        dockforge fragments
        dockforge fragments --category service
        dockforge fragments --show command/fastapi
    """
    if show:
        if "/" not in show:
            error("Fragment must be given as category/variant")
            raise typer.Exit(1)
        key = FragmentKey(*show.split("/", 1))
        try:
            text = get_fragment(key)
        except DockforgeError as e:
            handle_error(e)
            return
        console.print(Syntax(text, "jinja", theme="ansi_dark"))
        return

    keys = [key for key in list_fragments() if category is None or key.category == category]
    if not keys:
        error(f"No fragments in category: {category}")
        raise typer.Exit(1)

    table = Table(title="Fragment catalog", show_header=True, header_style="bold cyan")
    table.add_column("Category", style="cyan", no_wrap=True)
    table.add_column("Variant", style="green")
    for key in keys:
        table.add_row(key.category, key.variant)
    console.print(table)
