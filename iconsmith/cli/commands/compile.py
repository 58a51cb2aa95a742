"""Compile command: archetype + parameters + DNA → SVG."""

import logging
from pathlib import Path

import typer
import yaml

from ...archetypes import get_archetype, resolve_params
from ...compiler import ParameterValidationError, compile_icon, compiled_icon_to_svg
from ...config import get_config
from ...core.models import DNAValidationError, IconStyle
from ..app import app, console, is_json_output
from ..utils import ExitCode, Output, load_dna_profile, parse_param_overrides

logger = logging.getLogger(__name__)


@app.command("compile")
def compile_command(
    archetype_id: str = typer.Argument(..., help="Archetype id, e.g. search"),
    param: list[str] | None = typer.Option(
        None,
        "--param",
        "-p",
        help="Parameter override as key=value (repeatable)",
    ),
    style: IconStyle | None = typer.Option(
        None,
        "--style",
        "-s",
        help="Icon style (defaults to config defaults.style)",
        case_sensitive=False,
    ),
    dna_path: Path | None = typer.Option(
        None,
        "--dna",
        help="DNA profile YAML (defaults to config defaults.dna_profile, else built-in)",
    ),
    output: Path | None = typer.Option(
        None, "--output", "-o", help="Write the SVG here instead of stdout"
    ),
):
    """Compile an archetype into SVG.

    Unspecified parameters take the archetype's defaults.

    EXIT CODES:
        0 = Success
        1 = Validation error (parameters, style or DNA profile)
        3 = DNA profile not found
        4 = Unknown archetype

    EXAMPLES:
        iconsmith compile search
        iconsmith compile settings -p toothCount=10 --style filled
        iconsmith compile trash --dna brand.yaml -o trash.svg
    """
    out = Output(console=console, json_mode=is_json_output())
    config = get_config()

    archetype = get_archetype(archetype_id)
    if archetype is None:
        out.error(
            f"Unknown archetype: {archetype_id}",
            exit_code=ExitCode.UNKNOWN_ARCHETYPE,
            suggestion="Run `iconsmith archetypes` to list the available ids",
        )
        raise typer.Exit(out.finish())

    try:
        overrides = parse_param_overrides(param or [])
    except ValueError as e:
        out.error(str(e))
        raise typer.Exit(out.finish())

    unknown = [key for key in overrides if archetype.get_parameter(key) is None]
    if unknown:
        out.error(
            f"Unknown parameter(s) for {archetype_id}: {', '.join(unknown)}",
            suggestion=f"Run `iconsmith params {archetype_id}` to see the schema",
        )
        raise typer.Exit(out.finish())

    try:
        resolved_style = style or IconStyle(config.defaults.style)
    except ValueError:
        out.error(f"Invalid default style in config: {config.defaults.style}")
        raise typer.Exit(out.finish())

    profile_path = dna_path or config.dna_profile_path
    try:
        dna = load_dna_profile(profile_path)
    except FileNotFoundError:
        out.error(
            f"DNA profile not found: {profile_path}",
            exit_code=ExitCode.FILE_NOT_FOUND,
        )
        raise typer.Exit(out.finish())
    except DNAValidationError as e:
        out.error(f"Invalid DNA profile: {e}", field=e.field)
        raise typer.Exit(out.finish())
    except yaml.YAMLError as e:
        out.error(f"Invalid YAML in {profile_path}: {e}")
        raise typer.Exit(out.finish())

    params = resolve_params(archetype_id, overrides)
    logger.debug("Resolved %s parameters: %s", archetype_id, params)

    try:
        icon = compile_icon(archetype_id, params, dna, resolved_style)
    except ParameterValidationError as e:
        for message in e.errors:
            out.error(message)
        raise typer.Exit(out.finish())

    svg = compiled_icon_to_svg(icon)

    if output is not None:
        if output.exists():
            out.warning(f"Overwriting {output}")
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(svg + "\n", encoding="utf-8")
        out.success(
            f"Compiled {archetype_id} ({resolved_style.value}) → {output}",
            output=str(output),
        )
    elif not out.json_mode:
        typer.echo(svg)

    out.set_data("icon", icon.model_dump(mode="json"))
    out.set_data("svg", svg)
    raise typer.Exit(out.finish())
