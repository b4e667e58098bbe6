"""dockforge CLI - Main entry point."""
import typer
from pydantic import ValidationError

from dockforge_common import configure_logging, get_settings

from . import fragments_cmd, generate_cmd, info_cmd, init_cmd, validate_cmd
from .utils import error

app = typer.Typer(
    name="dockforge",
    help="dockforge - Generate Dockerfile, compose and env files for Python apps",
    no_args_is_help=True,
    add_completion=False,
)


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Configure logging from DOCKFORGE_* settings before any command runs."""
    try:
        settings = get_settings()
    except ValidationError as e:
        for err in e.errors():
            error(f"Invalid DOCKFORGE_{str(err['loc'][0]).upper()} setting: {err['msg']}")
        raise typer.Exit(1)
    configure_logging("debug" if verbose else settings.log_level, json_format=settings.log_json)


# Register all commands
app.command()(init_cmd.init)
app.command()(validate_cmd.validate)
app.command()(generate_cmd.generate)
app.command()(fragments_cmd.fragments)
app.command()(info_cmd.version)


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
