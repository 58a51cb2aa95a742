"""Configuration management for iconsmith.

Config resolution order (highest priority first):
1. Programmatic (IconsmithConfig constructed in code)
2. Environment variables (ICONSMITH_DEFAULT_STYLE, ICONSMITH_DNA_PROFILE,
   ICONSMITH_CLI_MODE)
3. Config file (~/.config/iconsmith/config.json, managed by `iconsmith config`)
4. Hardcoded defaults

Only the CLI reads this; the compiler API takes everything as arguments.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


# =============================================================================
# Config file location
# =============================================================================

CONFIG_DIR = Path.home() / ".config" / "iconsmith"
CONFIG_FILE = CONFIG_DIR / "config.json"

VALID_STYLES = ("outline", "filled")
VALID_CLI_MODES = ("human", "agent")


# =============================================================================
# Config dataclasses
# =============================================================================


@dataclass
class DefaultsConfig:
    """Defaults applied by `iconsmith compile` when flags are omitted.

    - style: icon style when --style is not given
    - dna_profile: YAML profile used when --dna is not given; empty means
      the built-in default profile
    """

    style: str = "outline"
    dna_profile: str = ""


@dataclass
class CliConfig:
    """CLI behaviour.

    mode "agent" makes every command emit JSON, as if --json were passed.
    """

    mode: str = "human"


@dataclass
class IconsmithConfig:
    """Top-level iconsmith configuration.

    Examples:
        # Package use, no files needed
        config = IconsmithConfig(defaults=DefaultsConfig(style="filled"))

        # CLI use, loads from ~/.config/iconsmith/config.json
        config = IconsmithConfig.load()
    """

    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    cli: CliConfig = field(default_factory=CliConfig)

    @classmethod
    def load(cls) -> "IconsmithConfig":
        """Load config from file + env vars.

        Priority: env var values > config.json values > defaults.
        """
        config = cls()

        # Layer 1: config file
        if CONFIG_FILE.exists():
            try:
                with open(CONFIG_FILE) as f:
                    data = json.load(f)
                if isinstance(data, dict):
                    _apply_dict(config, data)
            except (json.JSONDecodeError, OSError) as exc:
                logger.warning("Failed to load config from %s: %s", CONFIG_FILE, exc)

        # Layer 2: env var overrides
        if val := os.environ.get("ICONSMITH_DEFAULT_STYLE"):
            if val in VALID_STYLES:
                config.defaults.style = val
            else:
                logger.warning("Invalid ICONSMITH_DEFAULT_STYLE=%r, ignoring", val)
        if val := os.environ.get("ICONSMITH_DNA_PROFILE"):
            config.defaults.dna_profile = val
        if val := os.environ.get("ICONSMITH_CLI_MODE"):
            if val in VALID_CLI_MODES:
                config.cli.mode = val
            else:
                logger.warning("Invalid ICONSMITH_CLI_MODE=%r, ignoring", val)

        return config

    def save(self) -> None:
        """Save config to ~/.config/iconsmith/config.json."""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        with open(CONFIG_FILE, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dict for display."""
        return {
            "defaults": asdict(self.defaults),
            "cli": asdict(self.cli),
        }

    @property
    def dna_profile_path(self) -> Path | None:
        """Configured DNA profile as a path, or None for the built-in default."""
        if not self.defaults.dna_profile:
            return None
        return Path(self.defaults.dna_profile).expanduser()


# =============================================================================
# Config dict application
# =============================================================================


def _apply_dict(config: IconsmithConfig, data: dict) -> None:
    """Apply a dict of values onto an IconsmithConfig."""
    if "defaults" in data and isinstance(data["defaults"], dict):
        for k, v in data["defaults"].items():
            if hasattr(config.defaults, k):
                setattr(config.defaults, k, str(v))
    if "cli" in data and isinstance(data["cli"], dict):
        for k, v in data["cli"].items():
            if hasattr(config.cli, k):
                setattr(config.cli, k, str(v))


# =============================================================================
# Global config singleton
# =============================================================================

_config: IconsmithConfig | None = None


def get_config() -> IconsmithConfig:
    """Get the global IconsmithConfig instance.

    First call loads from file + env vars. Subsequent calls return cached instance.
    Use configure() to replace the global config programmatically.
    """
    global _config
    if _config is None:
        _config = IconsmithConfig.load()
    return _config


def configure(config: IconsmithConfig) -> None:
    """Set the global IconsmithConfig programmatically."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config (forces reload on next get_config())."""
    global _config
    _config = None
