"""Download: a downward arrow over a base line."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import SVGPathBuilder, create_line_path
from .base import NONE, make_path


def compile_download_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    arrow_width = params["arrowWidth"]
    arrow_length = params["arrowLength"]
    line_width = params["lineWidth"]

    ink = resolve_ink(dna)
    center = dna.view_box_size / 2

    shaft_start_y = center - arrow_length / 2
    shaft_end_y = center + arrow_length / 4
    shaft = create_line_path(center, shaft_start_y, center, shaft_end_y)

    head = (
        SVGPathBuilder()
        .move_to(center - arrow_width, shaft_end_y)
        .line_to(center, shaft_end_y + arrow_width)
        .line_to(center + arrow_width, shaft_end_y)
        .build()
    )

    base_y = center + arrow_length / 2 + arrow_width / 2
    base = create_line_path(center - line_width / 2, base_y, center + line_width / 2, base_y)

    return [
        make_path(shaft, dna, fill=NONE, stroke=ink),
        make_path(head, dna, fill=ink if style == IconStyle.FILLED else NONE, stroke=ink),
        make_path(base, dna, fill=NONE, stroke=ink),
    ]
