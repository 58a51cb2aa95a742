"""Profile: a user silhouette, round head over a trapezoid body.

The head radius is quantized to the DNA's allowed radii.
"""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.constraints import quantize_radius
from ..geometry.path import SVGPathBuilder
from .base import make_path, shape_paint

# Vertical offsets of the head centre and the shoulder line from the centre
HEAD_OFFSET = -4
SHOULDER_OFFSET = 2


def compile_profile_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    center = dna.view_box_size / 2
    head_radius = quantize_radius(params["headRadius"], dna.allowed_radii)
    shoulder_width = min(params["shoulderWidth"], dna.view_box_size - 4)
    body_height = params["bodyHeight"]

    fill, stroke = shape_paint(style, resolve_ink(dna))

    head_y = center + HEAD_OFFSET
    head = (
        SVGPathBuilder()
        .move_to(center + head_radius, head_y)
        .arc(head_radius, head_radius, 0, False, True, center - head_radius, head_y)
        .arc(head_radius, head_radius, 0, False, True, center + head_radius, head_y)
        .close()
        .build()
    )

    shoulder_y = center + SHOULDER_OFFSET
    body = (
        SVGPathBuilder()
        .move_to(center - shoulder_width / 2, shoulder_y)
        .line_to(center - shoulder_width / 4, shoulder_y + body_height)
        .line_to(center + shoulder_width / 4, shoulder_y + body_height)
        .line_to(center + shoulder_width / 2, shoulder_y)
        .close()
        .build()
    )

    return [
        make_path(head, dna, fill=fill, stroke=stroke),
        make_path(body, dna, fill=fill, stroke=stroke),
    ]
