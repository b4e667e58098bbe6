"""Generate command - Render and write Docker artifacts."""
from pathlib import Path
from typing import Any, Dict, List, Optional

import typer
from rich.panel import Panel
from rich.syntax import Syntax

from dockforge_common import DEFAULT_SELECTION_FILE, DockforgeError, get_settings
from dockforge_sdk import load_selection, render, write_artifacts

from .utils import console, handle_error, info, success

_SYNTAX_LEXERS = {
    "Dockerfile": "docker",
    "docker-compose.yml": "yaml",
    "docker-compose.prod.yml": "yaml",
    ".env.example": "bash",
    ".dockerignore": "text",
}


def collect_overrides(
    framework: Optional[str] = None,
    name: Optional[str] = None,
    python_version: Optional[str] = None,
    port: Optional[int] = None,
    database: Optional[str] = None,
    cache: Optional[str] = None,
    worker: Optional[str] = None,
    extra: Optional[List[str]] = None,
    system_dep: Optional[List[str]] = None,
    environment: Optional[str] = None,
) -> Dict[str, Any]:
    """Map command-line options to Selection fields (unset options are ``None``)."""
    return {
        "framework": framework,
        "project_name": name,
        "python_version": python_version,
        "port": port,
        "database": database,
        "cache": cache,
        "background_worker": worker,
        "extra_services": extra,
        "system_dependencies": system_dep,
        "environment": environment,
    }


def generate(
    path: Optional[str] = typer.Argument(
        None, help=f"Answers file (defaults to {DEFAULT_SELECTION_FILE} when present)"
    ),
    output_dir: Optional[str] = typer.Option(
        None, "--output-dir", "-o", help="Directory to write artifacts to"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing files"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print artifacts instead of writing them"),
    framework: Optional[str] = typer.Option(None, "--framework", help="flask, django, fastapi, streamlit, cli or other"),
    name: Optional[str] = typer.Option(None, "--name", help="Project name"),
    python_version: Optional[str] = typer.Option(None, "--python-version", help="Pinned Python version"),
    port: Optional[int] = typer.Option(None, "--port", help="Application port"),
    database: Optional[str] = typer.Option(None, "--database", help="none, postgresql, mysql, mongodb or sqlite"),
    cache: Optional[str] = typer.Option(None, "--cache", help="none, redis or memcached"),
    worker: Optional[str] = typer.Option(None, "--worker", help="none, celery or rq"),
    extra: Optional[List[str]] = typer.Option(None, "--extra", help="Extra service; repeatable"),
    system_dep: Optional[List[str]] = typer.Option(None, "--system-dep", help="Debian package; repeatable"),
    environment: Optional[str] = typer.Option(None, "--environment", help="development, production or both"),
):
    """
    Render the Dockerfile, compose file(s), .env template and .dockerignore.

    Options given on the command line take precedence over the answers file.
    Nothing is written if any answer is invalid or a target file exists
    (unless --force).

    Examples:
        dockforge generate
        dockforge generate dockforge.yaml --output-dir deploy
        dockforge generate --name myapp --framework fastapi --database postgresql --cache redis
        dockforge generate --dry-run
    """
    settings = get_settings()

    if path is None and Path(DEFAULT_SELECTION_FILE).exists():
        path = DEFAULT_SELECTION_FILE

    overrides = collect_overrides(
        framework=framework,
        name=name,
        python_version=python_version,
        port=port,
        database=database,
        cache=cache,
        worker=worker,
        extra=extra,
        system_dep=system_dep,
        environment=environment,
    )

    try:
        selection = load_selection(
            path,
            overrides=overrides,
            defaults={"python_version": settings.default_python_version},
        )
        result = render(selection)

        if dry_run:
            for artifact in result:
                lexer = _SYNTAX_LEXERS.get(artifact.filename, "text")
                console.print(
                    Panel(
                        Syntax(artifact.content, lexer, theme="ansi_dark"),
                        title=artifact.filename,
                        expand=False,
                    )
                )
            info(f"Dry run: {len(result)} artifact(s) rendered, nothing written")
            return

        target_dir = output_dir or settings.output_dir
        written = write_artifacts(result, target_dir, force=force)
    except DockforgeError as e:
        handle_error(e)
        return

    for written_path in written:
        success(f"Wrote {written_path}")
    if result.compose_override is not None:
        console.print(
            "\n[dim]Production: docker compose -f docker-compose.yml "
            "-f docker-compose.prod.yml up -d[/dim]"
        )
