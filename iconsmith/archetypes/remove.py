"""Remove: a single horizontal minus line."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_line_path
from .base import NONE, make_path


def compile_remove_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    center = dna.view_box_size / 2
    half_length = params["lineLength"] / 2

    line = create_line_path(center - half_length, center, center + half_length, center)

    # lineWidth is an absolute stroke width here, unlike add/share
    return [
        make_path(
            line,
            dna,
            fill=NONE,
            stroke=resolve_ink(dna),
            stroke_width=params["lineWidth"],
        )
    ]
