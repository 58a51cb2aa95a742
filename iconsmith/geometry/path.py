"""SVG path construction.

SVGPathBuilder accumulates path commands for a single path. Every coordinate
is rounded to PRECISION fractional digits before it is written, so equal
real-valued inputs always produce byte-identical path strings.

The create_* helpers build complete primitives in one call:
- create_line_path: open two-point segment (for stroking)
- create_rect_path / create_rounded_rect_path: axis-aligned rectangles
- create_circle_path: four cubic Bézier quadrants
- create_triangle_path: equilateral triangle at any rotation
- create_polygon_path: closed polygon through a point sequence
"""

import math
from typing import NamedTuple, Sequence

PRECISION = 2

# Control-point ratio for approximating a quarter circle with a cubic Bézier
CIRCLE_KAPPA = 0.5522847498


class Point(NamedTuple):
    x: float
    y: float


def round_coord(value: float, precision: int = PRECISION) -> float:
    """Round half-up to `precision` fractional digits.

    Non-finite values pass through unchanged.
    """
    if not math.isfinite(value):
        return value
    factor = 10**precision
    return math.floor(value * factor + 0.5) / factor


def _decimal_text(value: float) -> str:
    # Shortest round-trip digits, laid out with ECMAScript Number#toString rules
    mantissa, _, exp = repr(abs(value)).partition("e")
    whole, _, frac = mantissa.partition(".")
    digits = (whole + frac).lstrip("0")
    point = len(whole) + int(exp or 0) - (len(whole + frac) - len(digits))
    digits = digits.rstrip("0")

    if 0 < point <= 21:
        if len(digits) <= point:
            text = digits + "0" * (point - len(digits))
        else:
            text = f"{digits[:point]}.{digits[point:]}"
    elif -6 < point <= 0:
        text = "0." + "0" * -point + digits
    else:
        exponent = point - 1
        text = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        text += f"e{'+' if exponent > 0 else '-'}{abs(exponent)}"
    return "-" + text if value < 0 else text


def format_number(value: float | int | bool) -> str:
    """Write a number the way it appears in path data and markup.

    Integral values lose their fractional part ("12", not "12.0") and
    negative zero is written as "0". Booleans are written as
    "true"/"false". Exponents and non-finite values use the JavaScript
    spelling ("1e-7", "NaN", "Infinity").
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return _decimal_text(value)


def _coord(value: float) -> str:
    return format_number(round_coord(value))


class SVGPathBuilder:
    """Accumulator for path commands.

    Builders are short-lived: create one per path, chain commands, call
    build(). Methods return the builder so calls can be chained.
    """

    def __init__(self) -> None:
        self._segments: list[str] = []

    def move_to(self, x: float, y: float) -> "SVGPathBuilder":
        self._segments.append(f"M{_coord(x)},{_coord(y)}")
        return self

    def line_to(self, x: float, y: float) -> "SVGPathBuilder":
        self._segments.append(f"L{_coord(x)},{_coord(y)}")
        return self

    def horizontal_to(self, x: float) -> "SVGPathBuilder":
        self._segments.append(f"H{_coord(x)}")
        return self

    def vertical_to(self, y: float) -> "SVGPathBuilder":
        self._segments.append(f"V{_coord(y)}")
        return self

    def curve_to(
        self,
        cp1x: float,
        cp1y: float,
        cp2x: float,
        cp2y: float,
        x: float,
        y: float,
    ) -> "SVGPathBuilder":
        """Cubic Bézier (C)."""
        self._segments.append(
            f"C{_coord(cp1x)},{_coord(cp1y)} "
            f"{_coord(cp2x)},{_coord(cp2y)} "
            f"{_coord(x)},{_coord(y)}"
        )
        return self

    def smooth_curve_to(
        self, cp2x: float, cp2y: float, x: float, y: float
    ) -> "SVGPathBuilder":
        """Smooth cubic Bézier (S)."""
        self._segments.append(f"S{_coord(cp2x)},{_coord(cp2y)} {_coord(x)},{_coord(y)}")
        return self

    def quadratic_curve_to(
        self, cpx: float, cpy: float, x: float, y: float
    ) -> "SVGPathBuilder":
        """Quadratic Bézier (Q)."""
        self._segments.append(f"Q{_coord(cpx)},{_coord(cpy)} {_coord(x)},{_coord(y)}")
        return self

    def arc(
        self,
        radius_x: float,
        radius_y: float,
        rotation: float,
        large_arc: bool,
        sweep: bool,
        end_x: float,
        end_y: float,
    ) -> "SVGPathBuilder":
        """Elliptical arc (A) from the current point to (end_x, end_y)."""
        flags = f"{int(large_arc)}{int(sweep)}"
        self._segments.append(
            f"A{_coord(radius_x)},{_coord(radius_y)} {_coord(rotation)} "
            f"{flags} {_coord(end_x)},{_coord(end_y)}"
        )
        return self

    def close(self) -> "SVGPathBuilder":
        self._segments.append("Z")
        return self

    def build(self) -> str:
        return " ".join(self._segments)

    def reset(self) -> "SVGPathBuilder":
        self._segments = []
        return self

    def __len__(self) -> int:
        return len(self._segments)


# =============================================================================
# Primitive constructors
# =============================================================================


def create_line_path(x1: float, y1: float, x2: float, y2: float) -> str:
    return SVGPathBuilder().move_to(x1, y1).line_to(x2, y2).build()


def create_rect_path(x: float, y: float, width: float, height: float) -> str:
    return (
        SVGPathBuilder()
        .move_to(x, y)
        .line_to(x + width, y)
        .line_to(x + width, y + height)
        .line_to(x, y + height)
        .close()
        .build()
    )


def create_rounded_rect_path(
    x: float, y: float, width: float, height: float, radius: float
) -> str:
    """Rectangle with quadratic corners.

    The corner radius is clamped to half of the smaller side.
    """
    r = min(radius, width / 2, height / 2)
    return (
        SVGPathBuilder()
        .move_to(x + r, y)
        .line_to(x + width - r, y)
        .quadratic_curve_to(x + width, y, x + width, y + r)
        .line_to(x + width, y + height - r)
        .quadratic_curve_to(x + width, y + height, x + width - r, y + height)
        .line_to(x + r, y + height)
        .quadratic_curve_to(x, y + height, x, y + height - r)
        .line_to(x, y + r)
        .quadratic_curve_to(x, y, x + r, y)
        .close()
        .build()
    )


def create_circle_path(cx: float, cy: float, r: float) -> str:
    """Circle as four cubic Bézier quadrants, starting at 3 o'clock."""
    k = r * CIRCLE_KAPPA
    return (
        SVGPathBuilder()
        .move_to(cx + r, cy)
        .curve_to(cx + r, cy + k, cx + k, cy + r, cx, cy + r)
        .curve_to(cx - k, cy + r, cx - r, cy + k, cx - r, cy)
        .curve_to(cx - r, cy - k, cx - k, cy - r, cx, cy - r)
        .curve_to(cx + k, cy - r, cx + r, cy - k, cx + r, cy)
        .close()
        .build()
    )


def create_triangle_path(
    cx: float, cy: float, size: float, rotation: float = 0
) -> str:
    """Equilateral triangle inscribed in a circle of radius `size`.

    `rotation` (degrees) places the first vertex; -90 points it up.
    """
    first = math.radians(rotation)
    vertices = [
        Point(
            cx + size * math.cos(first + i * 2 * math.pi / 3),
            cy + size * math.sin(first + i * 2 * math.pi / 3),
        )
        for i in range(3)
    ]
    return (
        SVGPathBuilder()
        .move_to(*vertices[0])
        .line_to(*vertices[1])
        .line_to(*vertices[2])
        .close()
        .build()
    )


def create_polygon_path(points: Sequence[Point | tuple[float, float]]) -> str:
    """Closed polygon through `points`; empty string for fewer than 2."""
    if len(points) < 2:
        return ""

    builder = SVGPathBuilder().move_to(points[0][0], points[0][1])
    for x, y in points[1:]:
        builder.line_to(x, y)
    return builder.close().build()
