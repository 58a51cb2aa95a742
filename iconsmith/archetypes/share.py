"""Share: three dots joined by two lines, fanning out to the right."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import Point, create_circle_path, create_line_path
from .base import NONE, make_path, shape_paint


def compile_share_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    dot_radius = params["dotRadius"]
    # lineWidth scales the DNA stroke width
    line_stroke = dna.stroke_width * params["lineWidth"]

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    center = dna.view_box_size / 2
    spacing = dna.view_box_size * 0.25
    top_right = Point(center + spacing, center - spacing)
    center_left = Point(center - spacing, center)
    bottom_right = Point(center + spacing, center + spacing)

    paths = [
        make_path(
            create_line_path(*center_left, *top_right),
            dna, fill=NONE, stroke=ink, stroke_width=line_stroke,
        ),
        make_path(
            create_line_path(*center_left, *bottom_right),
            dna, fill=NONE, stroke=ink, stroke_width=line_stroke,
        ),
    ]
    for dot in (top_right, center_left, bottom_right):
        paths.append(
            make_path(create_circle_path(dot.x, dot.y, dot_radius), dna, fill=fill, stroke=stroke)
        )
    return paths
