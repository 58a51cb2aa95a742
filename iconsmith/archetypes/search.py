"""Search: a magnifying glass with an angled handle."""

import math
from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_circle_path, create_line_path
from .base import NONE, make_path, shape_paint


def compile_search_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    lens_radius = params["lensRadius"]
    handle_length = params["handleLength"]
    handle_angle = math.radians(params["handleAngle"])

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    center = dna.view_box_size / 2
    lens_x = center - lens_radius * 0.3
    lens_y = center - lens_radius * 0.3

    lens = create_circle_path(lens_x, lens_y, lens_radius)

    handle = create_line_path(
        lens_x + lens_radius * math.cos(handle_angle) * 0.7,
        lens_y + lens_radius * math.sin(handle_angle) * 0.7,
        lens_x + lens_radius + handle_length * math.cos(handle_angle),
        lens_y + lens_radius + handle_length * math.sin(handle_angle),
    )

    return [
        make_path(lens, dna, fill=fill, stroke=stroke),
        make_path(handle, dna, fill=NONE, stroke=ink),
    ]
