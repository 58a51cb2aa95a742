"""Pause: two vertical bars either side of the centre."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_rect_path
from .base import make_path, shape_paint


def compile_pause_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    bar_width = params["barWidth"]
    bar_height = params["barHeight"]
    bar_gap = params["barGap"]

    center = dna.view_box_size / 2
    bar_y = center - bar_height / 2

    left = create_rect_path(center - bar_gap / 2 - bar_width, bar_y, bar_width, bar_height)
    right = create_rect_path(center + bar_gap / 2, bar_y, bar_width, bar_height)

    fill, stroke = shape_paint(style, resolve_ink(dna))
    return [
        make_path(left, dna, fill=fill, stroke=stroke),
        make_path(right, dna, fill=fill, stroke=stroke),
    ]
