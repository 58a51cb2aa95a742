"""Tests for the path builder and primitive constructors."""

from iconsmith.geometry.path import (
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


class TestRoundCoord:
    """Tests for fixed-precision rounding."""

    def test_rounds_to_two_places(self):
        assert round_coord(3.14159) == 3.14

    def test_halves_round_up(self):
        """0.125 sits exactly on the half and goes up."""
        assert round_coord(0.125) == 0.13

    def test_negative_halves_round_toward_positive(self):
        assert round_coord(-0.125) == -0.12

    def test_custom_precision(self):
        assert round_coord(2.5, precision=0) == 3

    def test_non_finite_passes_through(self):
        assert round_coord(float("inf")) == float("inf")


class TestFormatNumber:
    """Tests for number text in path data."""

    def test_integral_float_has_no_fraction(self):
        assert format_number(12.0) == "12"

    def test_fraction_kept(self):
        assert format_number(1.5) == "1.5"

    def test_negative_zero(self):
        assert format_number(-0.0) == "0"

    def test_int(self):
        assert format_number(7) == "7"

    def test_bools(self):
        assert format_number(True) == "true"
        assert format_number(False) == "false"

    def test_small_values_use_short_exponent(self):
        assert format_number(1e-7) == "1e-7"
        assert format_number(-2.5e-7) == "-2.5e-7"

    def test_exponent_threshold(self):
        """Plain decimals down to 1e-6, exponent form below."""
        assert format_number(0.000001) == "0.000001"
        assert format_number(0.000012) == "0.000012"
        assert format_number(0.05) == "0.05"

    def test_large_values(self):
        assert format_number(1e16) == "10000000000000000"
        assert format_number(1.5e21) == "1.5e+21"

    def test_non_finite(self):
        assert format_number(float("nan")) == "NaN"
        assert format_number(float("inf")) == "Infinity"
        assert format_number(float("-inf")) == "-Infinity"


class TestSVGPathBuilder:
    """Tests for the command accumulator."""

    def test_move_line_close(self):
        d = SVGPathBuilder().move_to(0, 0).line_to(10, 5.5).close().build()
        assert d == "M0,0 L10,5.5 Z"

    def test_coordinates_are_rounded(self):
        d = SVGPathBuilder().move_to(1.23456, 2.0).build()
        assert d == "M1.23,2"

    def test_horizontal_and_vertical(self):
        d = SVGPathBuilder().move_to(0, 0).horizontal_to(4).vertical_to(3).build()
        assert d == "M0,0 H4 V3"

    def test_curves(self):
        d = (
            SVGPathBuilder()
            .curve_to(1, 2, 3, 4, 5, 6)
            .smooth_curve_to(7, 8, 9, 10)
            .quadratic_curve_to(1, 1, 2, 2)
            .build()
        )
        assert d == "C1,2 3,4 5,6 S7,8 9,10 Q1,1 2,2"

    def test_arc_flags(self):
        d = SVGPathBuilder().move_to(1, 2).arc(3, 3, 0, True, False, 4, 5).build()
        assert d == "M1,2 A3,3 0 10 4,5"

    def test_empty_builder(self):
        builder = SVGPathBuilder()
        assert builder.build() == ""
        assert len(builder) == 0

    def test_reset(self):
        builder = SVGPathBuilder().move_to(1, 1).line_to(2, 2)
        assert len(builder) == 2
        assert builder.reset().build() == ""


class TestPrimitives:
    """Tests for the primitive path constructors."""

    def test_line(self):
        assert create_line_path(0, 0, 1, 1) == "M0,0 L1,1"

    def test_rect(self):
        assert create_rect_path(1, 2, 3, 4) == "M1,2 L4,2 L4,6 L1,6 Z"

    def test_rounded_rect_clamps_radius(self):
        """A radius larger than half the short side is clamped."""
        assert create_rounded_rect_path(0, 0, 4, 2, 5) == create_rounded_rect_path(
            0, 0, 4, 2, 1
        )

    def test_rounded_rect_shape(self):
        d = create_rounded_rect_path(0, 0, 10, 10, 2)
        assert d.startswith("M2,0 L8,0 Q10,0 10,2")
        assert d.endswith("Q0,0 2,0 Z")

    def test_circle(self):
        assert create_circle_path(12, 12, 2) == (
            "M14,12 C14,13.1 13.1,14 12,14 C10.9,14 10,13.1 10,12 "
            "C10,10.9 10.9,10 12,10 C13.1,10 14,10.9 14,12 Z"
        )

    def test_triangle(self):
        assert create_triangle_path(0, 0, 1) == "M1,0 L-0.5,0.87 L-0.5,-0.87 Z"

    def test_triangle_rotated_points_up(self):
        d = create_triangle_path(12, 12, 4, -90)
        assert d.startswith("M12,8 ")

    def test_polygon_closes(self):
        d = create_polygon_path([Point(0, 0), (4, 0), (2, 3)])
        assert d == "M0,0 L4,0 L2,3 Z"

    def test_polygon_too_few_points(self):
        assert create_polygon_path([]) == ""
        assert create_polygon_path([(1, 1)]) == ""
