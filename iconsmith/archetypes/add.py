"""Add: a plus sign drawn as four arms around an optional centre gap."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_line_path
from .base import NONE, make_path


def compile_add_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    half_length = params["lineLength"] / 2
    half_gap = params["centerGap"] / 2
    # lineWidth scales the DNA stroke width
    stroke_width = dna.stroke_width * params["lineWidth"]

    ink = resolve_ink(dna)
    c = dna.view_box_size / 2

    arms = [
        create_line_path(c - half_length, c, c - half_gap, c),
        create_line_path(c + half_gap, c, c + half_length, c),
        create_line_path(c, c - half_length, c, c - half_gap),
        create_line_path(c, c + half_gap, c, c + half_length),
    ]
    return [
        make_path(d, dna, fill=NONE, stroke=ink, stroke_width=stroke_width)
        for d in arms
    ]
