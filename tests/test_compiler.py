"""Tests for compile_icon, icon ids and SVG serialization."""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from iconsmith.compiler import (
    ParameterValidationError,
    UnknownArchetypeError,
    compile_icon,
    compiled_icon_to_svg,
    generate_icon_id,
)
from iconsmith.core.models import (
    CompiledIcon,
    IconMetadata,
    IconStyle,
    SVGPath,
    create_dna,
)

COMPILED_AT = datetime(2025, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
SEARCH_PARAMS = {"lensRadius": 6, "handleLength": 5, "handleAngle": 45}


def clock():
    return COMPILED_AT


@pytest.fixture
def dna():
    return create_dna("test", "Test")


class TestGenerateIconId:
    """Tests for the deterministic icon id."""

    def test_format(self):
        icon_id = generate_icon_id("search", SEARCH_PARAMS, "outline")
        assert len(icon_id) == 8
        assert all(c in "0123456789abcdef" for c in icon_id)

    def test_deterministic(self):
        assert generate_icon_id("search", SEARCH_PARAMS, "outline") == generate_icon_id(
            "search", dict(SEARCH_PARAMS), IconStyle.OUTLINE
        )

    def test_key_order_does_not_matter(self):
        reordered = {"handleAngle": 45, "lensRadius": 6, "handleLength": 5}
        assert generate_icon_id("search", SEARCH_PARAMS, "outline") == generate_icon_id(
            "search", reordered, "outline"
        )

    def test_depends_on_inputs(self):
        base = generate_icon_id("search", SEARCH_PARAMS, "outline")
        assert generate_icon_id("search", SEARCH_PARAMS, "filled") != base
        assert generate_icon_id("search", {**SEARCH_PARAMS, "lensRadius": 7}, "outline") != base

    def test_integral_float_matches_int(self):
        """6.0 and 6 are written the same way, so they hash the same."""
        assert generate_icon_id("search", {**SEARCH_PARAMS, "lensRadius": 6.0}, "outline") == (
            generate_icon_id("search", SEARCH_PARAMS, "outline")
        )

    def test_hash_text_uses_short_exponent(self):
        """Tiny values are hashed as "1e-7", not "1e-07"."""
        h = 0
        for char in "add|centerGap:1e-7|outline":
            h = ((h << 5) - h + ord(char)) & 0xFFFFFFFF
        if h & 0x80000000:
            h -= 0x100000000
        assert generate_icon_id("add", {"centerGap": 1e-7}, "outline") == f"{abs(h):08x}"

    def test_invalid_style(self):
        with pytest.raises(ValueError):
            generate_icon_id("search", SEARCH_PARAMS, "bold")


class TestCompileIcon:
    """Tests for compile_icon()."""

    def test_search_example(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna, "outline", clock=clock)

        assert icon.id == generate_icon_id("search", SEARCH_PARAMS, "outline")
        assert icon.archetype_id == "search"
        assert icon.style == IconStyle.OUTLINE
        assert icon.view_box == "0 0 24 24"
        assert len(icon.paths) == 2
        assert icon.parameters == SEARCH_PARAMS
        assert icon.metadata.dna_id == "test"
        assert icon.metadata.archetype_id == "search"
        assert icon.metadata.compiled_at == "2025-01-02T03:04:05.678Z"

    def test_default_style_is_outline(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna, clock=clock)
        assert icon.style == IconStyle.OUTLINE

    def test_deterministic_with_fixed_clock(self, dna):
        first = compile_icon("trash", {"handleWidth": 4, "canWidth": 12, "lineCount": 3}, dna, clock=clock)
        second = compile_icon("trash", {"handleWidth": 4, "canWidth": 12, "lineCount": 3}, dna, clock=clock)
        assert first == second
        assert compiled_icon_to_svg(first) == compiled_icon_to_svg(second)

    def test_unknown_archetype(self, dna):
        with pytest.raises(UnknownArchetypeError) as exc_info:
            compile_icon("rocket", {}, dna)
        assert exc_info.value.archetype_id == "rocket"
        assert isinstance(exc_info.value, LookupError)

    def test_out_of_range_rejected(self, dna):
        """toothCount above the declared max is rejected before the gear is drawn."""
        with pytest.raises(ParameterValidationError) as exc_info:
            compile_icon("settings", {"toothCount": 14, "toothDepth": 2, "centerRadius": 2}, dna)
        assert exc_info.value.archetype_id == "settings"
        assert exc_info.value.errors == ['Parameter "toothCount" must be <= 12']
        assert isinstance(exc_info.value, ValueError)

    def test_all_errors_reported(self, dna):
        with pytest.raises(ParameterValidationError) as exc_info:
            compile_icon("pause", {"barWidth": 9}, dna)
        assert exc_info.value.errors == [
            'Parameter "barWidth" must be <= 3',
            'Parameter "barHeight" is required',
            'Parameter "barGap" is required',
        ]

    def test_home_example_rejected(self, dna):
        with pytest.raises(ParameterValidationError) as exc_info:
            compile_icon("home", {"roofHeight": -1, "doorWidth": 3, "windowSize": 2}, dna)
        assert exc_info.value.errors == ['Parameter "roofHeight" must be >= 2']

    def test_add_example(self, dna):
        icon = compile_icon("add", {"lineLength": 12, "lineWidth": 2, "centerGap": 0}, dna)

        assert len(icon.paths) == 4
        assert all(path.stroke == "currentColor" for path in icon.paths)
        assert all(path.fill == "none" for path in icon.paths)
        assert len(icon.id) == 8
        assert all(c in "0123456789abcdef" for c in icon.id)
        assert compiled_icon_to_svg(icon).startswith('<svg viewBox="0 0 24 24"')

    def test_non_finite_rejected(self, dna):
        """NaN and infinity never reach the gear geometry."""
        for bad in (float("nan"), float("inf")):
            with pytest.raises(ParameterValidationError) as exc_info:
                compile_icon("settings", {"toothCount": bad, "toothDepth": 2, "centerRadius": 2}, dna)
            assert exc_info.value.errors == ['Parameter "toothCount" must be a finite number']

    def test_filled(self, dna):
        icon = compile_icon("play", {"triangleWidth": 8, "triangleHeight": 8}, dna, IconStyle.FILLED)
        assert icon.style == IconStyle.FILLED
        assert icon.paths[0].fill == "currentColor"

    def test_result_is_immutable(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna)
        with pytest.raises(ValidationError):
            icon.id = "00000000"

    def test_metadata_serializes_camel_case(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna, clock=clock)
        assert icon.metadata.model_dump(mode="json", by_alias=True) == {
            "dnaId": "test",
            "archetypeId": "search",
            "style": "outline",
            "parameters": SEARCH_PARAMS,
            "compiledAt": "2025-01-02T03:04:05.678Z",
        }


class TestCompiledIconToSvg:
    """Tests for SVG serialization."""

    def test_structure(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna, clock=clock)
        lines = compiled_icon_to_svg(icon).split("\n")

        assert lines[0] == '<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg">'
        assert lines[1].startswith("<!-- Icon DNA: {")
        assert lines[1].endswith("} -->")
        assert lines[-1] == "</svg>"
        assert len(lines) == 2 + 2 + 1
        assert all(line.startswith("  <path d=") for line in lines[2:-1])

    def test_metadata_comment(self, dna):
        icon = compile_icon("search", SEARCH_PARAMS, dna, clock=clock)
        comment = compiled_icon_to_svg(icon).split("\n")[1]
        payload = comment[len("<!-- Icon DNA: ") : -len(" -->")]

        assert payload == (
            '{"dnaId":"test","archetypeId":"search","style":"outline",'
            '"parameters":{"lensRadius":6,"handleLength":5,"handleAngle":45},'
            '"compiledAt":"2025-01-02T03:04:05.678Z"}'
        )
        assert json.loads(payload)["dnaId"] == "test"

    def test_attribute_order(self, dna):
        icon = compile_icon("remove", {"lineLength": 12, "lineWidth": 2}, dna, clock=clock)
        path_line = compiled_icon_to_svg(icon).split("\n")[2]
        assert path_line == (
            '  <path d="M6,12 L18,12" fill="none" stroke="currentColor" '
            'stroke-width="2" stroke-linecap="round" stroke-linejoin="round" />'
        )

    def test_zero_stroke_width_kept(self, dna):
        icon = compile_icon("info", {"circleRadius": 10, "dotRadius": 1.5, "textHeight": 6}, dna)
        assert 'stroke="none" stroke-width="0"' in compiled_icon_to_svg(icon)

    def _icon(self, *paths):
        metadata = IconMetadata(
            dna_id="test",
            archetype_id="play",
            style=IconStyle.OUTLINE,
            parameters={},
            compiled_at="2025-01-02T03:04:05.678Z",
        )
        return CompiledIcon(
            id="0000abcd",
            archetype_id="play",
            parameters={},
            style=IconStyle.OUTLINE,
            view_box="0 0 24 24",
            paths=paths,
            metadata=metadata,
        )

    def test_unset_attributes_omitted(self):
        svg = compiled_icon_to_svg(self._icon(SVGPath(d="M0,0 L1,1")))
        assert '  <path d="M0,0 L1,1" />' in svg

    def test_optional_attributes(self):
        path = SVGPath(
            d="M0,0 Z",
            fill="currentColor",
            fill_rule="evenodd",
            vector_effect="non-scaling-stroke",
        )
        svg = compiled_icon_to_svg(self._icon(path))
        assert (
            '<path d="M0,0 Z" fill="currentColor" fill-rule="evenodd" '
            'vector-effect="non-scaling-stroke" />'
        ) in svg

    def test_attribute_values_escaped(self):
        path = SVGPath(d="M0,0", stroke='url("#g")&')
        svg = compiled_icon_to_svg(self._icon(path))
        assert 'stroke="url(&quot;#g&quot;)&amp;"' in svg

    def test_empty_icon(self):
        svg = compiled_icon_to_svg(self._icon())
        assert svg.split("\n")[-1] == "</svg>"
        assert "<path" not in svg
