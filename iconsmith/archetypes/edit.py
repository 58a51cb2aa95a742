"""Edit: a pencil laid at -45 degrees, body plus a solid tip.

tipAngle is part of the schema but does not yet change the geometry.
"""

import math
from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import SVGPathBuilder
from .base import NONE, make_path, shape_paint

ROTATION = -45
BODY_WIDTH_RATIO = 0.25


def compile_edit_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    pencil_length = params["pencilLength"]
    tip_length = params["tipLength"]

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    center = dna.view_box_size / 2
    cos = math.cos(math.radians(ROTATION))
    sin = math.sin(math.radians(ROTATION))

    half = pencil_length / 2
    body_length = pencil_length - tip_length
    half_width = pencil_length * BODY_WIDTH_RATIO / 2

    start_x = center - half * cos
    start_y = center - half * sin
    joint_x = center + (body_length / 2 - half) * cos
    joint_y = center + (body_length / 2 - half) * sin
    tip_x = center + half * cos
    tip_y = center + half * sin

    # Unit normal to the pencil axis
    perp_x, perp_y = -sin, cos
    off_x, off_y = perp_x * half_width, perp_y * half_width

    body = (
        SVGPathBuilder()
        .move_to(start_x + off_x, start_y + off_y)
        .line_to(joint_x + off_x, joint_y + off_y)
        .line_to(joint_x - off_x, joint_y - off_y)
        .line_to(start_x - off_x, start_y - off_y)
        .close()
        .build()
    )

    tip = (
        SVGPathBuilder()
        .move_to(joint_x + off_x, joint_y + off_y)
        .line_to(tip_x, tip_y)
        .line_to(joint_x - off_x, joint_y - off_y)
        .close()
        .build()
    )

    return [
        make_path(body, dna, fill=fill, stroke=stroke),
        make_path(tip, dna, fill=ink, stroke=ink if style == IconStyle.OUTLINE else NONE),
    ]
