"""Refresh: a circular arc starting at 6 o'clock with an arrow head at its end."""

import math
from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import SVGPathBuilder
from .base import NONE, make_path

START_ANGLE = 90


def compile_refresh_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    radius = params["circleRadius"]
    arrow_width = params["arrowWidth"]
    arc_angle = params["arcAngle"]

    ink = resolve_ink(dna)
    center = dna.view_box_size / 2

    start = math.radians(START_ANGLE)
    end = math.radians(START_ANGLE + arc_angle)
    start_x = center + radius * math.cos(start)
    start_y = center + radius * math.sin(start)
    end_x = center + radius * math.cos(end)
    end_y = center + radius * math.sin(end)

    arc = (
        SVGPathBuilder()
        .move_to(start_x, start_y)
        .arc(radius, radius, 0, arc_angle > 180, True, end_x, end_y)
        .build()
    )

    # Head points outward along the radius, base spans the tangent
    tangent = end + math.pi / 2
    half_base = arrow_width * 0.5
    head = (
        SVGPathBuilder()
        .move_to(end_x + half_base * math.cos(tangent), end_y + half_base * math.sin(tangent))
        .line_to(end_x + arrow_width * math.cos(end), end_y + arrow_width * math.sin(end))
        .line_to(end_x - half_base * math.cos(tangent), end_y - half_base * math.sin(tangent))
        .build()
    )

    return [
        make_path(arc, dna, fill=NONE, stroke=ink),
        make_path(head, dna, fill=NONE, stroke=ink),
    ]
