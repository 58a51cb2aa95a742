"""Home: a house with a triangular roof, door and two windows."""

from typing import Any, Mapping

from ..core.models.dna import IconDNA, resolve_ink
from ..core.models.icon import IconStyle, SVGPath
from ..geometry.path import create_rect_path, create_triangle_path
from .base import NONE, make_path, shape_paint


def compile_home_icon(
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle = IconStyle.OUTLINE,
) -> list[SVGPath]:
    roof_height = params["roofHeight"]
    door_width = params["doorWidth"]
    window_size = params["windowSize"]

    ink = resolve_ink(dna)
    fill, stroke = shape_paint(style, ink)

    center = dna.view_box_size / 2
    live_size = dna.view_box_size - dna.live_area_inset * 2
    house_width = live_size * 0.7
    house_height = live_size * 0.6
    house_x = center - house_width / 2
    house_y = center + house_height / 2 - dna.live_area_inset

    # Roof: upward-pointing triangle above the body
    roof_center_y = house_y - house_height / 2 - roof_height / 2
    roof = create_triangle_path(center, roof_center_y, house_width / 2, -90)

    body = create_rect_path(house_x, house_y - house_height, house_width, house_height)

    door_height = door_width * 1.5
    door = create_rect_path(
        center - door_width / 2, house_y - door_height, door_width, door_height
    )

    window_spacing = house_width * 0.25
    window_y = house_y - house_height * 0.6
    left_window = create_rect_path(
        center - window_spacing - window_size / 2, window_y, window_size, window_size
    )
    right_window = create_rect_path(
        center + window_spacing - window_size / 2, window_y, window_size, window_size
    )

    return [
        make_path(roof, dna, fill=fill, stroke=stroke),
        make_path(body, dna, fill=fill, stroke=stroke),
        make_path(door, dna, fill=fill, stroke=stroke),
        # Windows stay outlined in both styles
        make_path(left_window, dna, fill=NONE, stroke=ink),
        make_path(right_window, dna, fill=NONE, stroke=ink),
    ]
