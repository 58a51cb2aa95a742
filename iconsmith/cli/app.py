"""Core CLI app definition and global state."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

app = typer.Typer(
    name="iconsmith",
    help="Compile icon archetypes into SVG under a shared DNA profile.",
    no_args_is_help=True,
)

console = Console()

# Global state for JSON mode (set by callback)
_json_mode = False


def get_json_mode() -> bool:
    """Get current JSON mode state."""
    return _json_mode


def is_agent_mode() -> bool:
    """Check if CLI is in agent mode (from config).

    Agent mode means JSON output instead of rich terminal formatting.
    """
    from ..config import get_config

    return get_config().cli.mode == "agent"


def is_json_output() -> bool:
    """Check if JSON output is enabled (via --json flag or agent mode config)."""
    return get_json_mode() or is_agent_mode()


def setup_logging(verbose: bool = False) -> None:
    """Route iconsmith logging through rich; DEBUG when verbose."""
    level = logging.DEBUG if verbose else logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=False, markup=True)],
        force=True,
    )
    logging.getLogger("iconsmith").setLevel(level)


def _version_callback(value: bool) -> None:
    if value:
        from .. import __version__

        print(f"iconsmith {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output machine-readable JSON instead of human-friendly text",
            is_eager=True,
        ),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show debug logging"),
    ] = False,
):
    """iconsmith: deterministic icon compiler.

    Use --json for machine-readable output suitable for scripting.
    Use --verbose to see what the compiler is doing.
    """
    global _json_mode
    _json_mode = json_output
    setup_logging(verbose)


# Import commands to register them with the app
from .commands import (  # noqa: E402, F401
    archetypes,
    compile,
    config_cmd,
    dna,
)
