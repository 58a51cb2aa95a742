"""Shared pieces for archetype compilers.

Every compiler has the same shape:
    (params, dna, style) -> list[SVGPath]
and reads the stroke settings from the DNA profile.
"""

import math
from typing import Any, Callable, Mapping

from ..core.models.dna import IconDNA
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.constraints import clamp

ArchetypeCompiler = Callable[[Mapping[str, Any], IconDNA, IconStyle], list[SVGPath]]

NONE = "none"


def shape_paint(style: IconStyle | str, ink: str) -> tuple[str, str]:
    """(fill, stroke) for a closed shape: stroked when outline, filled when filled."""
    if style == IconStyle.FILLED:
        return ink, NONE
    return NONE, ink


def make_path(
    d: str,
    dna: IconDNA,
    *,
    fill: str,
    stroke: str,
    stroke_width: float | None = None,
) -> SVGPath:
    """Path descriptor with the DNA's stroke width, cap and join."""
    return SVGPath(
        d=d,
        fill=fill,
        stroke=stroke,
        stroke_width=dna.stroke_width if stroke_width is None else stroke_width,
        stroke_linecap=dna.stroke_line_cap.value,
        stroke_linejoin=dna.stroke_line_join.value,
    )


def round_count(value: float, low: int, high: int) -> int:
    """Nearest whole count within [low, high]; non-finite input gives low."""
    if not math.isfinite(value):
        return low
    return int(clamp(math.floor(value + 0.5), low, high))
