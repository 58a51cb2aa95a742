"""DNA profile commands: show and validate."""

from pathlib import Path

import typer
import yaml

from ...config import get_config
from ...core.models import DNAValidationError
from ..app import app, console, is_json_output
from ..utils import ExitCode, Output, load_dna_profile

dna_app = typer.Typer(help="Inspect and validate DNA profiles.", no_args_is_help=True)
app.add_typer(dna_app, name="dna")


def _load(path: Path | None, out: Output):
    """Load a profile, reporting failures through `out`; None on failure."""
    try:
        return load_dna_profile(path)
    except FileNotFoundError:
        out.error(
            f"File not found: {path}",
            exit_code=ExitCode.FILE_NOT_FOUND,
            suggestion="Check the file path",
        )
    except DNAValidationError as e:
        out.error(str(e), field=e.field)
    except yaml.YAMLError as e:
        out.error(f"Invalid YAML in {path}: {e}")
    return None


@dna_app.command("show")
def show_command(
    path: Path | None = typer.Argument(
        None, help="DNA profile YAML (defaults to the configured or built-in profile)"
    ),
):
    """Show a DNA profile.

    EXAMPLES:
        iconsmith dna show
        iconsmith dna show brand.yaml
    """
    out = Output(console=console, json_mode=is_json_output())

    dna = _load(path or get_config().dna_profile_path, out)
    if dna is None:
        raise typer.Exit(out.finish())

    out.text(f"[bold]{dna.name}[/bold] [dim]({dna.id}, v{dna.version})[/dim]")
    out.blank()
    if not out.json_mode:
        typer.echo(dna.to_yaml_str().rstrip())
    out.set_data("dna", dna.model_dump(mode="json"))
    raise typer.Exit(out.finish())


@dna_app.command("validate")
def validate_command(
    path: Path = typer.Argument(..., help="DNA profile YAML to validate"),
):
    """Validate a DNA profile file.

    EXIT CODES:
        0 = Valid profile
        1 = Validation error
        3 = File not found

    EXAMPLES:
        iconsmith dna validate brand.yaml
    """
    out = Output(console=console, json_mode=is_json_output())

    dna = _load(path, out)
    if dna is not None:
        out.success(f"{path} is a valid DNA profile ({dna.id})", valid=True, dna_id=dna.id)
    else:
        out.set_data("valid", False)
    raise typer.Exit(out.finish())
