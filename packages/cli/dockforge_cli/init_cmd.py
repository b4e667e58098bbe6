"""Init command - Create a starter answers file."""
from pathlib import Path
from typing import List, Optional

import typer

from dockforge_common import DEFAULT_SELECTION_FILE, DockforgeError, get_settings
from dockforge_schema import Selection, to_yaml_string

from .utils import confirm_action, console, handle_error, success, warning


def generate_answers_template(
    name: str,
    framework: str = "fastapi",
    python_version: Optional[str] = None,
    port: int = 8000,
    database: str = "none",
    cache: str = "none",
    worker: str = "none",
    extra: Optional[List[str]] = None,
    environment: str = "production",
) -> str:
    """Build a validated Selection and serialize it as a YAML answers file.

    Going through the schema keeps the template in sync with validation,
    so a freshly created file always passes ``dockforge validate``.

    Raises:
        InvalidSelection: If any of the given answers is invalid
    """
    selection = Selection(
        project_name=name,
        framework=framework,
        python_version=python_version or get_settings().default_python_version,
        port=port,
        database=database,
        cache=cache,
        background_worker=worker,
        extra_services=frozenset(extra or []),
        environment=environment,
    )
    header = (
        "# dockforge answers file\n"
        "# Edit the choices below, then run: dockforge generate\n"
    )
    return header + to_yaml_string(selection)


def init(
    name: str = typer.Argument(..., help="Project name (lowercase letters, digits, hyphens)"),
    framework: str = typer.Option("fastapi", "--framework", help="flask, django, fastapi, streamlit, cli or other"),
    python_version: Optional[str] = typer.Option(None, "--python-version", help="Pinned Python version, e.g. 3.12"),
    port: int = typer.Option(8000, "--port", help="Application port"),
    database: str = typer.Option("none", "--database", help="none, postgresql, mysql, mongodb or sqlite"),
    cache: str = typer.Option("none", "--cache", help="none, redis or memcached"),
    worker: str = typer.Option("none", "--worker", help="none, celery or rq"),
    extra: Optional[List[str]] = typer.Option(None, "--extra", help="Extra service (nginx, rabbitmq); repeatable"),
    environment: str = typer.Option("production", "--environment", help="development, production or both"),
    output: str = typer.Option(DEFAULT_SELECTION_FILE, "--output", "-o", help="Output file path"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing file without asking"),
):
    """
    Create a starter answers file.

    Examples:
        dockforge init my-app
        dockforge init my-app --framework django --database postgresql
        dockforge init my-app --output deploy/dockforge.yaml --force
    """
    try:
        output_path = Path(output)

        if output_path.exists() and not force:
            if not confirm_action(f"{output} already exists. Overwrite?", default=False):
                warning("Cancelled")
                raise typer.Exit(0)

        content = generate_answers_template(
            name,
            framework=framework,
            python_version=python_version,
            port=port,
            database=database,
            cache=cache,
            worker=worker,
            extra=extra,
            environment=environment,
        )

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        success(f"Created {output}")

        console.print("\n[bold cyan]Next steps:[/bold cyan]")
        console.print(f"  1. Review the answers in [cyan]{output}[/cyan]")
        console.print(f"  2. Generate the Docker files:")
        console.print(f"     [cyan]dockforge generate {output}[/cyan]")

    except typer.Exit:
        raise
    except DockforgeError as e:
        handle_error(e)
    except OSError as e:
        handle_error(e)
