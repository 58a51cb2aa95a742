"""Compiled icon models.

SVGPath is one renderable path (command string plus paint attributes);
CompiledIcon is the full output of a single compile_icon() call.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .archetype import ParamValue


class IconStyle(str, Enum):
    OUTLINE = "outline"
    FILLED = "filled"


class SVGPath(BaseModel):
    """A single path element."""

    model_config = ConfigDict(frozen=True)

    d: str = Field(description="Path data")
    fill: str | None = None
    stroke: str | None = None
    stroke_width: float | None = None
    stroke_linecap: str | None = None
    stroke_linejoin: str | None = None
    fill_rule: str | None = Field(default=None, description="'evenodd' or 'nonzero'")
    vector_effect: str | None = Field(
        default=None, description="e.g. 'non-scaling-stroke'"
    )


class IconMetadata(BaseModel):
    """Provenance embedded in the SVG output.

    Serializes with camelCase keys (dnaId, archetypeId, compiledAt).
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    dna_id: str
    archetype_id: str
    style: IconStyle
    parameters: dict[str, ParamValue]
    compiled_at: str


class CompiledIcon(BaseModel):
    """Result of compiling one archetype against one DNA profile."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="8-hex-digit content hash")
    archetype_id: str
    parameters: dict[str, ParamValue]
    style: IconStyle
    view_box: str
    paths: tuple[SVGPath, ...]
    metadata: IconMetadata
