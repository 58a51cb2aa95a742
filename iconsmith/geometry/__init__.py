"""Geometry primitives: path construction and the constraint solver."""

from .path import (
    CIRCLE_KAPPA,
    PRECISION,
    Point,
    SVGPathBuilder,
    create_circle_path,
    create_line_path,
    create_polygon_path,
    create_rect_path,
    create_rounded_rect_path,
    create_triangle_path,
    format_number,
    round_coord,
)
from .constraints import (
    clamp,
    distance,
    get_angle,
    is_point_in_rect,
    lerp,
    normalize_angle,
    quantize_angle,
    quantize_line_to,
    quantize_radius,
    snap_point_to_grid,
    snap_points_to_grid,
    snap_to_grid,
    validate_constraints,
    validate_feature_size,
    validate_spacing,
)

__all__ = [
    # Path builder
    "CIRCLE_KAPPA",
    "PRECISION",
    "Point",
    "SVGPathBuilder",
    "create_circle_path",
    "create_line_path",
    "create_polygon_path",
    "create_rect_path",
    "create_rounded_rect_path",
    "create_triangle_path",
    "format_number",
    "round_coord",
    # Constraint solver
    "clamp",
    "distance",
    "get_angle",
    "is_point_in_rect",
    "lerp",
    "normalize_angle",
    "quantize_angle",
    "quantize_line_to",
    "quantize_radius",
    "snap_point_to_grid",
    "snap_points_to_grid",
    "snap_to_grid",
    "validate_constraints",
    "validate_feature_size",
    "validate_spacing",
]
