"""Info: a circle enclosing a lowercase "i"."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_circle_path, create_line_path
from .base import NONE, make_path, shape_paint

STEM_STROKE_RATIO = 1.5


def compile_info_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    circle_radius = params["circleRadius"]
    dot_radius = params["dotRadius"]
    text_height = params["textHeight"]

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)
    center = dna.view_box_size / 2

    circle = create_circle_path(center, center, circle_radius)
    dot = create_circle_path(center, center - text_height / 2 - dot_radius * 2, dot_radius)
    stem = create_line_path(center, center - text_height / 4, center, center + text_height / 2)

    return [
        make_path(circle, dna, fill=fill, stroke=stroke),
        make_path(dot, dna, fill=ink, stroke=NONE, stroke_width=0),
        make_path(stem, dna, fill=NONE, stroke=ink, stroke_width=dna.stroke_width * STEM_STROKE_RATIO),
    ]
