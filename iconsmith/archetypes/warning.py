"""Warning: an upward triangle with an exclamation mark."""

import math
from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import SVGPathBuilder, create_circle_path, create_line_path
from .base import NONE, make_path, shape_paint

STEM_STROKE_RATIO = 1.5


def compile_warning_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    triangle_height = params["triangleHeight"]
    dot_radius = params["dotRadius"]
    exclamation_height = params["exclamationHeight"]

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)
    center = dna.view_box_size / 2

    half_width = triangle_height * math.sqrt(3) / 4
    top_y = center - triangle_height / 2
    bottom_y = center + triangle_height / 2
    triangle = (
        SVGPathBuilder()
        .move_to(center, top_y)
        .line_to(center + half_width, bottom_y)
        .line_to(center - half_width, bottom_y)
        .close()
        .build()
    )

    stem = create_line_path(
        center, center - exclamation_height / 2, center, center + exclamation_height / 4
    )
    dot = create_circle_path(center, center + exclamation_height / 2 + dot_radius, dot_radius)

    return [
        make_path(triangle, dna, fill=fill, stroke=stroke),
        make_path(stem, dna, fill=NONE, stroke=ink, stroke_width=dna.stroke_width * STEM_STROKE_RATIO),
        make_path(dot, dna, fill=ink, stroke=NONE, stroke_width=0),
    ]
