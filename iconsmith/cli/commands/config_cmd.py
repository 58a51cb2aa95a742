"""Config command for viewing and managing iconsmith configuration."""

import typer

from ..app import app, console
from ...config import (
    CONFIG_FILE,
    VALID_CLI_MODES,
    VALID_STYLES,
    get_config,
    reset_config,
)


VALID_KEYS = {
    "defaults.style",
    "defaults.dna_profile",
    "cli.mode",
}

ALLOWED_VALUES = {
    "defaults.style": VALID_STYLES,
    "cli.mode": VALID_CLI_MODES,
}


@app.command("config")
def config_command(
    action: str = typer.Argument(
        ...,
        help="Action: show, set, reset",
    ),
    key: str | None = typer.Argument(
        None,
        help="Config key (e.g. defaults.style, cli.mode)",
    ),
    value: str | None = typer.Argument(
        None,
        help="Value to set",
    ),
):
    """View or modify iconsmith configuration.

    Examples:
        iconsmith config show
        iconsmith config set defaults.style filled
        iconsmith config set defaults.dna_profile ~/icons/brand.yaml
        iconsmith config reset
    """
    if action == "show":
        _show_config()
    elif action == "set":
        if not key or value is None:
            console.print("[red]Usage:[/red] iconsmith config set <key> <value>")
            console.print()
            console.print("Available keys:")
            for k in sorted(VALID_KEYS):
                console.print(f"  {k}")
            raise typer.Exit(1)
        _set_config(key, value)
    elif action == "reset":
        _reset_config()
    else:
        console.print(f"[red]Unknown action:[/red] {action}")
        console.print("Valid actions: show, set, reset")
        raise typer.Exit(1)


def _show_config():
    """Display current resolved configuration."""
    config = get_config()

    console.print()
    console.print("[bold]Iconsmith Configuration[/bold]")
    console.print("─" * 40)

    console.print()
    console.print("[bold cyan]Defaults[/bold cyan] (compile)")
    console.print(f"  style       = {config.defaults.style}")
    profile = config.defaults.dna_profile or "[dim](built-in)[/dim]"
    console.print(f"  dna_profile = {profile}")

    console.print()
    console.print("[bold cyan]CLI[/bold cyan]")
    console.print(f"  mode        = {config.cli.mode}")

    console.print()
    if CONFIG_FILE.exists():
        console.print(f"Config file: {CONFIG_FILE}")
    else:
        console.print(f"Config file: [dim]not created yet[/dim] ({CONFIG_FILE})")
    console.print()


def _set_config(key: str, value: str):
    """Set a config value and save."""
    if key not in VALID_KEYS:
        console.print(f"[red]Unknown key:[/red] {key}")
        console.print()
        console.print("Available keys:")
        for k in sorted(VALID_KEYS):
            console.print(f"  {k}")
        raise typer.Exit(1)

    allowed = ALLOWED_VALUES.get(key)
    if allowed and value not in allowed:
        console.print(f"[red]Invalid value:[/red] {value}")
        console.print(f"Allowed: {', '.join(allowed)}")
        raise typer.Exit(1)

    config = get_config()
    zone, field_name = key.split(".", 1)
    target = config.defaults if zone == "defaults" else config.cli
    setattr(target, field_name, value)

    config.save()
    reset_config()  # Clear cached singleton so next get_config() reloads

    console.print(f"[green]✓[/green] Set {key} = {value}")
    console.print(f"  Saved to {CONFIG_FILE}")


def _reset_config():
    """Reset config to defaults."""
    if CONFIG_FILE.exists():
        CONFIG_FILE.unlink()
        reset_config()
        console.print("[green]✓[/green] Config reset to defaults")
        console.print(f"  Removed {CONFIG_FILE}")
    else:
        console.print("Config already at defaults (no config file exists)")
