"""CLI commands for iconsmith."""

from . import (
    archetypes,
    compile,
    config_cmd,
    dna,
)

__all__ = [
    "archetypes",
    "compile",
    "config_cmd",
    "dna",
]
