"""Settings: a gear with grid-snapped teeth and a centre hole.

Tooth depth and hole radius are quantized to the DNA's allowed radii, and
tooth vertices are snapped to the DNA grid.
"""

import logging
import math
from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.constraints import quantize_radius, snap_point_to_grid
from ..geometry.path import Point, SVGPathBuilder
from .base import NONE, make_path, round_count, shape_paint

logger = logging.getLogger(__name__)

OUTER_RADIUS = 8
INNER_RADIUS = 6
MIN_TEETH = 6
MAX_TEETH = 12

# Knock-out colour for the centre hole
HOLE_FILL = "white"


def compile_settings_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    tooth_count = round_count(params["toothCount"], MIN_TEETH, MAX_TEETH)
    if tooth_count != params["toothCount"]:
        logger.debug("Gear tooth count %s clamped to %d", params["toothCount"], tooth_count)
    tooth_depth = quantize_radius(params["toothDepth"], dna.allowed_radii)
    center_radius = quantize_radius(params["centerRadius"], dna.allowed_radii)

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    center = dna.view_box_size / 2
    angle_per_tooth = 360 / tooth_count

    gear = SVGPathBuilder()
    for i in range(tooth_count):
        angle = math.radians(i * angle_per_tooth)
        between = math.radians((i + 0.5) * angle_per_tooth)
        next_angle = math.radians((i + 1) * angle_per_tooth)

        tip = snap_point_to_grid(
            Point(
                center + math.cos(angle) * (OUTER_RADIUS + tooth_depth),
                center + math.sin(angle) * (OUTER_RADIUS + tooth_depth),
            ),
            dna.grid_size,
        )
        root = snap_point_to_grid(
            Point(
                center + math.cos(between) * INNER_RADIUS,
                center + math.sin(between) * INNER_RADIUS,
            ),
            dna.grid_size,
        )

        if i == 0:
            gear.move_to(*tip)
        gear.line_to(*root)
        gear.arc(
            INNER_RADIUS,
            INNER_RADIUS,
            0,
            False,
            True,
            center + math.cos(next_angle) * OUTER_RADIUS,
            center + math.sin(next_angle) * OUTER_RADIUS,
        )
    gear.close()

    hole = (
        SVGPathBuilder()
        .move_to(center + center_radius, center)
        .arc(center_radius, center_radius, 0, False, True, center - center_radius, center)
        .arc(center_radius, center_radius, 0, False, True, center + center_radius, center)
        .close()
        .build()
    )

    return [
        make_path(gear.build(), dna, fill=fill, stroke=stroke),
        make_path(hole, dna, fill=HOLE_FILL, stroke=ink if style == IconStyle.OUTLINE else NONE),
    ]
