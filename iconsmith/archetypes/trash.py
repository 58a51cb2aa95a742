"""Trash: a can with a lid handle and vertical interior lines."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import SVGPathBuilder, create_line_path
from .base import NONE, make_path, round_count, shape_paint

MIN_LINES = 2
MAX_LINES = 5
INTERIOR_STROKE_RATIO = 0.7


def compile_trash_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    center = dna.view_box_size / 2
    handle_width = params["handleWidth"]
    can_width = params["canWidth"]
    line_count = round_count(params["lineCount"], MIN_LINES, MAX_LINES)

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    handle = (
        SVGPathBuilder()
        .move_to(center - handle_width / 2, center - 7)
        .line_to(center + handle_width / 2, center - 7)
        .close()
        .build()
    )

    left = center - can_width / 2
    right = center + can_width / 2
    can = (
        SVGPathBuilder()
        .move_to(left, center - 5)
        .line_to(left, center + 5)
        .line_to(right, center + 5)
        .line_to(right, center - 5)
        .close()
        .build()
    )

    paths = [
        make_path(handle, dna, fill=NONE, stroke=ink),
        make_path(can, dna, fill=fill, stroke=stroke),
    ]

    spacing = can_width / (line_count + 1)
    for i in range(1, line_count + 1):
        x = left + spacing * i
        paths.append(
            make_path(
                create_line_path(x, center - 3, x, center + 3),
                dna,
                fill=NONE,
                stroke=ink if style == IconStyle.OUTLINE else NONE,
                stroke_width=dna.stroke_width * INTERIOR_STROKE_RATIO,
            )
        )

    return paths
