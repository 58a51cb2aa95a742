"""Archetype listing and parameter schema commands."""

import typer

from ...archetypes import get_all_archetypes, get_archetype
from ..app import app, console, is_json_output
from ..utils import ExitCode, Output, format_parameter_row


@app.command("archetypes")
def archetypes_command():
    """List the available icon archetypes.

    EXAMPLES:
        iconsmith archetypes
        iconsmith --json archetypes
    """
    out = Output(console=console, json_mode=is_json_output())

    rows = [
        [a.id, a.name, a.category, str(len(a.parameters))]
        for a in get_all_archetypes()
    ]
    out.table(
        "Archetypes",
        ["Id", "Name", "Category", "Parameters"],
        rows,
        data_key="archetypes",
        styles=["cyan", None, "dim", None],
    )
    raise typer.Exit(out.finish())


@app.command("params")
def params_command(
    archetype_id: str = typer.Argument(..., help="Archetype id, e.g. search"),
):
    """Show the parameter schema of an archetype.

    EXIT CODES:
        0 = Success
        4 = Unknown archetype

    EXAMPLES:
        iconsmith params settings
    """
    out = Output(console=console, json_mode=is_json_output())

    archetype = get_archetype(archetype_id)
    if archetype is None:
        out.error(
            f"Unknown archetype: {archetype_id}",
            exit_code=ExitCode.UNKNOWN_ARCHETYPE,
            suggestion="Run `iconsmith archetypes` to list the available ids",
        )
        raise typer.Exit(out.finish())

    out.text(f"[bold]{archetype.name}[/bold] [dim]({archetype.category})[/dim]")
    out.text(archetype.description)
    out.set_data("archetype", archetype.id)
    out.table(
        "Parameters",
        ["Id", "Name", "Type", "Min", "Max", "Default", "Step", "Unit"],
        [format_parameter_row(p) for p in archetype.parameters],
        data_key="parameters",
        styles=["cyan"],
    )
    raise typer.Exit(out.finish())
