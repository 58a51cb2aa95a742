"""Icon compiler: validate, dispatch to an archetype, serialize.

compile_icon() is the single entry point that turns (archetype, parameters,
DNA, style) into a CompiledIcon. compiled_icon_to_svg() renders the result
as standalone SVG markup with the compile metadata embedded as a comment.
"""

import html
import json
import logging
from typing import Any, Mapping

from .archetypes import get_archetype_compiler, validate_archetype_params
from .core.models.dna import IconDNA
from .core.models.icon import CompiledIcon, IconMetadata, IconStyle, SVGPath
from .geometry.path import format_number
from .utils.clock import Clock, to_iso8601, utc_now

logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class UnknownArchetypeError(LookupError):
    """No archetype is registered under the requested id."""

    def __init__(self, archetype_id: str):
        self.archetype_id = archetype_id
        super().__init__(f"Unknown archetype: {archetype_id}")


class ParameterValidationError(ValueError):
    """Parameters do not satisfy the archetype's schema.

    Attributes:
        archetype_id: The archetype being compiled
        errors: Every violation found, in parameter order
    """

    def __init__(self, archetype_id: str, errors: list[str]):
        self.archetype_id = archetype_id
        self.errors = list(errors)
        super().__init__(f"Invalid parameters: {', '.join(self.errors)}")


# =============================================================================
# Identity
# =============================================================================


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - 0x100000000 if value & 0x80000000 else value


def generate_icon_id(
    archetype_id: str,
    params: Mapping[str, Any],
    style: IconStyle | str,
) -> str:
    """Deterministic 8-hex-digit id for a compile request.

    The id depends only on the archetype, the parameter values (in sorted
    key order) and the style. Two requests that differ in any of these
    almost always get different ids; the hash is 32 bits wide.
    """
    style_value = IconStyle(style).value
    param_text = ",".join(f"{key}:{format_number(params[key])}" for key in sorted(params))
    content = f"{archetype_id}|{param_text}|{style_value}"

    h = 0
    for char in content:
        h = _to_int32((h << 5) - h + ord(char))
    return f"{abs(h):08x}"[:8]


# =============================================================================
# Compilation
# =============================================================================


def compile_icon(
    archetype_id: str,
    params: Mapping[str, Any],
    dna: IconDNA,
    style: IconStyle | str = IconStyle.OUTLINE,
    *,
    clock: Clock | None = None,
) -> CompiledIcon:
    """Compile one archetype against a DNA profile.

    Args:
        archetype_id: Registered archetype id, e.g. "search"
        params: A complete parameter set for the archetype
        dna: A validated DNA profile
        style: "outline" or "filled"
        clock: Time source for metadata.compiled_at

    Returns:
        The compiled icon, ready for compiled_icon_to_svg()

    Raises:
        UnknownArchetypeError: If archetype_id is not registered
        ParameterValidationError: If params violate the archetype's schema
    """
    compiler = get_archetype_compiler(archetype_id)
    if compiler is None:
        raise UnknownArchetypeError(archetype_id)

    errors = validate_archetype_params(archetype_id, params)
    if errors:
        logger.debug("Rejected %s parameters: %s", archetype_id, errors)
        raise ParameterValidationError(archetype_id, errors)

    style = IconStyle(style)
    paths = compiler(params, dna, style)
    size = format_number(dna.view_box_size)
    parameters = dict(params)

    icon = CompiledIcon(
        id=generate_icon_id(archetype_id, parameters, style),
        archetype_id=archetype_id,
        parameters=parameters,
        style=style,
        view_box=f"0 0 {size} {size}",
        paths=tuple(paths),
        metadata=IconMetadata(
            dna_id=dna.id,
            archetype_id=archetype_id,
            style=style,
            parameters=parameters,
            compiled_at=to_iso8601((clock or utc_now)()),
        ),
    )
    logger.debug(
        "Compiled %s (%s) with DNA %s: %d paths, id %s",
        archetype_id,
        style.value,
        dna.id,
        len(icon.paths),
        icon.id,
    )
    return icon


# =============================================================================
# Serialization
# =============================================================================


def _attr(name: str, value: Any) -> str:
    if isinstance(value, (int, float)):
        value = format_number(value)
    return f'{name}="{html.escape(str(value), quote=True)}"'


def _path_element(path: SVGPath) -> str:
    attrs = [_attr("d", path.d)]

    # Unset paint is omitted; explicit "none" and 0 are kept
    if path.fill is not None:
        attrs.append(_attr("fill", path.fill))
    if path.stroke is not None:
        attrs.append(_attr("stroke", path.stroke))
    if path.stroke_width is not None:
        attrs.append(_attr("stroke-width", path.stroke_width))

    if path.stroke_linecap:
        attrs.append(_attr("stroke-linecap", path.stroke_linecap))
    if path.stroke_linejoin:
        attrs.append(_attr("stroke-linejoin", path.stroke_linejoin))
    if path.fill_rule:
        attrs.append(_attr("fill-rule", path.fill_rule))
    if path.vector_effect:
        attrs.append(_attr("vector-effect", path.vector_effect))

    return f"  <path {' '.join(attrs)} />"


def _metadata_json(icon: CompiledIcon) -> str:
    data = icon.metadata.model_dump(mode="json", by_alias=True)
    text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
    # "--" may not appear inside an XML comment
    return text.replace("--", "-\\u002d")


def compiled_icon_to_svg(icon: CompiledIcon) -> str:
    """Render a compiled icon as SVG markup."""
    lines = [
        f'<svg viewBox="{html.escape(icon.view_box)}" xmlns="{SVG_NAMESPACE}">',
        f"<!-- Icon DNA: {_metadata_json(icon)} -->",
    ]
    lines.extend(_path_element(path) for path in icon.paths)
    lines.append("</svg>")
    return "\n".join(lines)
