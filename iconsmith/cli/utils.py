"""CLI utilities for dual-mode output (human-friendly + machine-readable).

This module provides utilities for CLI commands to support both:
- Human mode (default): Rich formatting with colors and tables
- Machine mode (--json): Structured JSON output for scripts and tools

Example:
    from ..cli.utils import Output, ExitCode

    @app.command()
    def my_command():
        out = Output(console=console, json_mode=is_json_output())
        out.success("Compiled icon", id="1a2b3c4d")
        out.table("Parameters", ["Id", "Default"], [["lensRadius", "5"]])
        return out.finish()
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr
from rich.console import Console
from rich.table import Table

from ..core.models import ArchetypeParameter, IconDNA, ParamValue, create_dna
from ..geometry.path import format_number

DEFAULT_DNA_ID = "default"
DEFAULT_DNA_NAME = "Default"


class ExitCode:
    """Standardized exit codes for CLI commands.

        0 = Success
        1 = Validation error (bad DNA profile, parameters or style)
        3 = File not found
        4 = Unknown archetype
    """

    SUCCESS = 0
    VALIDATION_ERROR = 1
    FILE_NOT_FOUND = 3
    UNKNOWN_ARCHETYPE = 4


class Output(BaseModel):
    """Dual-mode output handler for CLI commands.

    In human mode: Uses Rich for pretty terminal output with colors and formatting.
    In JSON mode: Collects structured data and outputs JSON at the end.

    Usage:
        out = Output(console=console, json_mode=False)
        out.success("Profile is valid", dna_id="default")
        out.warning("Overwriting trash.svg")
        exit_code = out.finish()
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    console: Console
    json_mode: bool = False

    _data: dict[str, Any] = PrivateAttr()
    _exit_code: int = PrivateAttr(default=ExitCode.SUCCESS)

    def model_post_init(self, __context: Any) -> None:
        self._data = {
            "status": "success",
            "warnings": [],
            "errors": [],
        }

    def success(self, message: str, **data: Any) -> None:
        """Output a success message with optional data."""
        if self.json_mode:
            self._data.update(data)
        else:
            self.console.print(f"[green]✓[/green] {message}")

    def warning(self, message: str, *, suggestion: str | None = None) -> None:
        """Output a warning message."""
        if self.json_mode:
            warning_obj: dict[str, Any] = {"message": message}
            if suggestion:
                warning_obj["suggestion"] = suggestion
            self._data["warnings"].append(warning_obj)
        else:
            self.console.print(f"[yellow]⚠[/yellow] {message}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def error(
        self,
        message: str,
        *,
        field: str | None = None,
        suggestion: str | None = None,
        exit_code: int = ExitCode.VALIDATION_ERROR,
    ) -> None:
        """Output an error message and set exit code."""
        self._exit_code = exit_code
        self._data["status"] = "error"

        if self.json_mode:
            error_obj: dict[str, Any] = {"message": message}
            if field:
                error_obj["field"] = field
            if suggestion:
                error_obj["suggestion"] = suggestion
            self._data["errors"].append(error_obj)
        else:
            self.console.print(f"[red]✗[/red] {message}")
            if suggestion:
                self.console.print(f"  [dim]→ {suggestion}[/dim]")

    def text(self, message: str) -> None:
        """Output plain text (human mode only)."""
        if not self.json_mode:
            self.console.print(message)

    def blank(self) -> None:
        """Output a blank line (human mode only)."""
        if not self.json_mode:
            self.console.print()

    def table(
        self,
        title: str,
        columns: list[str],
        rows: list[list[str]],
        *,
        data_key: str | None = None,
        styles: list[str] | None = None,
    ) -> None:
        """Output a formatted table.

        Args:
            title: Table title
            columns: Column headers
            rows: Table rows (list of lists)
            data_key: Key to use in JSON output (defaults to snake_case of title)
            styles: Optional Rich styles for each column
        """
        key = data_key or title.lower().replace(" ", "_")

        if self.json_mode:
            self._data[key] = [dict(zip(columns, row)) for row in rows]
        else:
            table = Table(title=title, show_header=True, header_style="bold")
            for i, col in enumerate(columns):
                style = styles[i] if styles and i < len(styles) else None
                table.add_column(col, style=style)
            for row in rows:
                table.add_row(*row)
            self.console.print(table)

    def set_data(self, key: str, value: Any) -> None:
        """Set arbitrary data in JSON output."""
        self._data[key] = value

    def finish(self) -> int:
        """Finalize output and return exit code.

        In JSON mode, prints the accumulated data as JSON to stdout.
        Returns the exit code that should be passed to sys.exit().
        """
        if self.json_mode:
            self._data["exit_code"] = self._exit_code
            print(json.dumps(self._data, indent=2, default=str))

        return self._exit_code


def load_dna_profile(path: Path | None) -> IconDNA:
    """Load a DNA profile from YAML, or build the default one when path is None.

    Raises:
        FileNotFoundError: If path does not exist
        DNAValidationError: If the file is not a valid profile
        yaml.YAMLError: If the file is not valid YAML
    """
    if path is None:
        return create_dna(DEFAULT_DNA_ID, DEFAULT_DNA_NAME)
    if not path.exists():
        raise FileNotFoundError(str(path))
    return IconDNA.from_yaml(path)


def parse_param_value(raw: str) -> ParamValue:
    """Parse a command-line parameter value: true/false, int, or float.

    Raises:
        ValueError: If the value is none of these
    """
    lowered = raw.strip().lower()
    if lowered in ("true", "false"):
        return lowered == "true"
    try:
        return int(raw)
    except ValueError:
        pass
    return float(raw)


def parse_param_overrides(items: list[str]) -> dict[str, ParamValue]:
    """Parse repeated `key=value` options into a parameter mapping.

    Raises:
        ValueError: On a malformed item or value
    """
    overrides: dict[str, ParamValue] = {}
    for item in items:
        key, sep, raw = item.partition("=")
        key = key.strip()
        if not sep or not key:
            raise ValueError(f"Expected key=value, got {item!r}")
        try:
            overrides[key] = parse_param_value(raw)
        except ValueError:
            raise ValueError(f"Parameter {key!r} has a non-numeric value {raw!r}") from None
    return overrides


def format_parameter_row(param: ArchetypeParameter) -> list[str]:
    """Table row for a parameter schema entry."""

    def fmt(value: float | None) -> str:
        return "-" if value is None else format_number(value)

    return [
        param.id,
        param.name,
        param.type,
        fmt(param.min),
        fmt(param.max),
        format_number(param.default),
        fmt(param.step),
        param.unit or "-",
    ]

