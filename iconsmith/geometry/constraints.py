"""Constraint solver: pure geometric helpers for DNA rules.

Covers grid snapping, angle and radius quantization, spacing and feature
size checks, plus the small numeric utilities the archetype compilers share.
Nothing here mutates its inputs.
"""

import math
from typing import TYPE_CHECKING, Sequence

from .path import Point, format_number

if TYPE_CHECKING:
    from ..core.models.dna import IconDNA


# =============================================================================
# Grid snapping
# =============================================================================


def snap_to_grid(value: float, grid_size: float) -> float:
    """Snap a coordinate to the nearest multiple of grid_size.

    Halves round up, so snapping is idempotent for a fixed grid.
    """
    return math.floor(value / grid_size + 0.5) * grid_size


def snap_point_to_grid(point: Point, grid_size: float) -> Point:
    return Point(snap_to_grid(point.x, grid_size), snap_to_grid(point.y, grid_size))


def snap_points_to_grid(points: Sequence[Point], grid_size: float) -> list[Point]:
    return [snap_point_to_grid(p, grid_size) for p in points]


# =============================================================================
# Angles
# =============================================================================


def normalize_angle(angle: float) -> float:
    """Normalize an angle in degrees to [0, 360)."""
    normalized = math.fmod(angle, 360)
    if normalized < 0:
        normalized += 360
    return normalized


def get_angle(p1: Point, p2: Point) -> float:
    """Direction from p1 to p2 in degrees, normalized to [0, 360)."""
    return normalize_angle(math.degrees(math.atan2(p2.y - p1.y, p2.x - p1.x)))


def quantize_angle(angle: float, allowed_angles: Sequence[float]) -> float:
    """Closest allowed angle to `angle` (after normalization).

    Ties keep the candidate seen first.

    Raises:
        ValueError: If allowed_angles is empty.
    """
    if not allowed_angles:
        raise ValueError("allowed_angles must not be empty")

    normalized = normalize_angle(angle)
    closest = allowed_angles[0]
    min_diff = abs(normalized - closest)
    for allowed in allowed_angles:
        diff = abs(normalized - allowed)
        if diff < min_diff:
            min_diff = diff
            closest = allowed
    return closest


def quantize_line_to(
    p1: Point,
    p2: Point,
    allowed_angles: Sequence[float],
    distance: float | None = None,
) -> Point:
    """Move p2 so the segment p1→p2 lies on the nearest allowed angle.

    The segment keeps its original length unless `distance` is given.
    """
    if distance is None:
        distance = math.hypot(p2.x - p1.x, p2.y - p1.y)
    quantized = math.radians(quantize_angle(get_angle(p1, p2), allowed_angles))
    return Point(
        p1.x + distance * math.cos(quantized),
        p1.y + distance * math.sin(quantized),
    )


# =============================================================================
# Radii
# =============================================================================


def quantize_radius(radius: float, allowed_radii: Sequence[float]) -> float:
    """Closest strictly-positive allowed radius.

    Returns 0 when radius <= 0, when 0 is itself allowed, or when no
    positive candidate exists. Ties keep the candidate seen first.
    """
    if radius <= 0 or 0 in allowed_radii:
        return 0

    closest: float | None = None
    min_diff = math.inf
    for allowed in allowed_radii:
        if allowed <= 0:
            continue
        diff = abs(radius - allowed)
        if diff < min_diff:
            min_diff = diff
            closest = allowed
    return 0 if closest is None else closest


# =============================================================================
# Spacing / size checks
# =============================================================================


def validate_spacing(features: Sequence[Point], minimum_gap: float) -> bool:
    """True iff every pair of points is at least minimum_gap apart."""
    for i, a in enumerate(features):
        for b in features[i + 1 :]:
            if math.dist(a, b) < minimum_gap:
                return False
    return True


def validate_feature_size(width: float, height: float, minimum_size: float) -> bool:
    return width >= minimum_size and height >= minimum_size


def validate_constraints(
    dna: "IconDNA",
    features: Sequence[Point],
    feature_size: float,
) -> list[str]:
    """Check feature points and size against a DNA profile.

    Returns:
        Human-readable violation messages; empty when conformant.
    """
    errors: list[str] = []

    if not validate_spacing(features, dna.minimum_gap):
        errors.append(
            "Features are too close together. "
            f"Minimum gap required: {format_number(dna.minimum_gap)}px"
        )

    if not validate_feature_size(feature_size, feature_size, dna.minimum_feature_size):
        errors.append(
            f"Feature size {format_number(feature_size)}px is too small. "
            f"Minimum required: {format_number(dna.minimum_feature_size)}px"
        )

    return errors


# =============================================================================
# Utilities
# =============================================================================


def clamp(value: float, minimum: float, maximum: float) -> float:
    return max(minimum, min(maximum, value))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def is_point_in_rect(
    point: Point, x: float, y: float, width: float, height: float
) -> bool:
    """Inclusive containment test against an axis-aligned rectangle."""
    return x <= point.x <= x + width and y <= point.y <= y + height
