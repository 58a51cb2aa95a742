"""Play: a right-pointing triangle."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_polygon_path
from .base import make_path, shape_paint


def compile_play_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    half_width = params["triangleWidth"] / 2
    half_height = params["triangleHeight"] / 2
    center = dna.view_box_size / 2

    triangle = create_polygon_path(
        [
            (center - half_width, center - half_height),
            (center + half_width, center),
            (center - half_width, center + half_height),
        ]
    )

    fill, stroke = shape_paint(style, resolve_ink(dna))
    return [make_path(triangle, dna, fill=fill, stroke=stroke)]
