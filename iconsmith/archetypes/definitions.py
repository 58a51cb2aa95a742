"""Archetype registry and parameter validation.

ARCHETYPES is the closed, read-only set of icon templates. Each definition
lists its parameters in display order with bounds, step and default; the
defaults map is derived from those parameter defaults.
"""

import math
from types import MappingProxyType
from typing import Any, Mapping

from ..core.models.archetype import Archetype, ArchetypeParameter, ParamValue
from ..geometry.path import format_number


def _number(
    id: str,
    name: str,
    description: str,
    *,
    min: float,
    max: float,
    default: float,
    step: float,
    unit: str | None = "px",
) -> ArchetypeParameter:
    return ArchetypeParameter(
        id=id,
        name=name,
        description=description,
        type="number",
        min=min,
        max=max,
        default=default,
        step=step,
        unit=unit,
    )


def _archetype(
    id: str,
    name: str,
    category: str,
    description: str,
    parameters: list[ArchetypeParameter],
) -> Archetype:
    return Archetype(
        id=id,
        name=name,
        category=category,
        description=description,
        parameters=tuple(parameters),
        defaults={p.id: p.default for p in parameters},
        version=1,
    )


_ARROW_PARAMETERS = [
    _number("arrowWidth", "Arrow Width", "Width of the arrow head",
            min=2, max=6, default=4, step=0.5),
    _number("arrowLength", "Arrow Length", "Length of the arrow shaft",
            min=4, max=10, default=8, step=1),
    _number("lineWidth", "Line Width", "Width of the bottom line",
            min=6, max=14, default=10, step=1),
]

_DEFINITIONS = [
    _archetype("home", "Home", "navigation", "House icon for home/dashboard navigation", [
        _number("roofHeight", "Roof Height", "Height of the roof point above the house body",
                min=2, max=8, default=4, step=0.5),
        _number("doorWidth", "Door Width", "Width of the door opening",
                min=2, max=6, default=3, step=0.5),
        _number("windowSize", "Window Size", "Size of the window squares",
                min=1, max=3, default=2, step=0.5),
    ]),
    _archetype("search", "Search", "action", "Magnifying glass for search functionality", [
        _number("lensRadius", "Lens Radius", "Radius of the circular lens",
                min=3, max=8, default=5, step=0.5),
        _number("handleLength", "Handle Length", "Length of the search handle",
                min=3, max=8, default=5, step=0.5),
        _number("handleAngle", "Handle Angle", "Angle of the handle (0=vertical, 45=diagonal)",
                min=0, max=45, default=45, step=5, unit="degrees"),
    ]),
    _archetype("settings", "Settings", "action", "Gear icon for settings/configuration", [
        _number("toothCount", "Tooth Count", "Number of gear teeth",
                min=6, max=12, default=8, step=1, unit=None),
        _number("toothDepth", "Tooth Depth", "Depth of the gear teeth",
                min=1, max=4, default=2, step=0.5),
        _number("centerRadius", "Center Radius", "Radius of the center hole",
                min=1, max=4, default=2, step=0.5),
    ]),
    _archetype("profile", "Profile", "action", "User profile/account icon", [
        _number("headRadius", "Head Radius", "Radius of the head circle",
                min=2, max=5, default=3.5, step=0.5),
        _number("shoulderWidth", "Shoulder Width", "Width of the shoulders",
                min=6, max=16, default=12, step=1),
        _number("bodyHeight", "Body Height", "Height of the body portion",
                min=6, max=12, default=8, step=1),
    ]),
    _archetype("trash", "Trash", "action", "Trash/delete icon", [
        _number("handleWidth", "Handle Width", "Width of the trash can handle",
                min=2, max=6, default=4, step=0.5),
        _number("canWidth", "Can Width", "Width of the trash can body",
                min=8, max=16, default=12, step=1),
        _number("lineCount", "Line Count", "Number of trash lines inside the can",
                min=2, max=5, default=3, step=1, unit=None),
    ]),
    _archetype("download", "Download", "action", "Download arrow icon", _ARROW_PARAMETERS),
    _archetype("upload", "Upload", "action", "Upload arrow icon", _ARROW_PARAMETERS),
    _archetype("edit", "Edit", "action", "Pencil/edit icon", [
        _number("pencilLength", "Pencil Length", "Length of the pencil shaft",
                min=8, max=14, default=12, step=1),
        _number("tipLength", "Tip Length", "Length of the sharp tip",
                min=3, max=6, default=4, step=0.5),
        _number("tipAngle", "Tip Angle", "Angle of the tip point",
                min=30, max=60, default=45, step=5, unit="degrees"),
    ]),
    _archetype("add", "Add", "action", "Plus/add icon", [
        _number("lineLength", "Line Length", "Length of the plus lines",
                min=6, max=14, default=12, step=1),
        _number("lineWidth", "Line Width", "Width/thickness of the lines",
                min=1, max=3, default=2, step=0.5),
        _number("centerGap", "Center Gap", "Gap at the center where lines cross",
                min=0, max=4, default=0, step=0.5),
    ]),
    _archetype("remove", "Remove", "action", "Minus/remove icon", [
        _number("lineLength", "Line Length", "Length of the minus line",
                min=6, max=14, default=12, step=1),
        _number("lineWidth", "Line Width", "Thickness of the line",
                min=1, max=3, default=2, step=0.5),
    ]),
    _archetype("play", "Play", "action", "Play button icon", [
        _number("triangleWidth", "Triangle Width", "Width of the play triangle",
                min=6, max=12, default=8, step=1),
        _number("triangleHeight", "Triangle Height", "Height of the play triangle",
                min=6, max=12, default=8, step=1),
    ]),
    _archetype("pause", "Pause", "action", "Pause button icon", [
        _number("barWidth", "Bar Width", "Width of each pause bar",
                min=1, max=3, default=2, step=0.5),
        _number("barHeight", "Bar Height", "Height of the pause bars",
                min=6, max=12, default=10, step=1),
        _number("barGap", "Bar Gap", "Gap between the two bars",
                min=2, max=6, default=3, step=0.5),
    ]),
    _archetype("refresh", "Refresh", "action", "Refresh/reload icon", [
        _number("circleRadius", "Circle Radius", "Radius of the circular arc",
                min=5, max=10, default=8, step=0.5),
        _number("arrowWidth", "Arrow Width", "Width of the arrow head",
                min=2, max=4, default=3, step=0.5),
        _number("arcAngle", "Arc Angle", "Angle of the circular arc",
                min=180, max=315, default=270, step=15, unit="degrees"),
    ]),
    _archetype("share", "Share", "action", "Share icon", [
        _number("dotRadius", "Dot Radius", "Radius of the connection dots",
                min=1, max=3, default=2, step=0.5),
        _number("lineWidth", "Line Width", "Width of the connecting lines",
                min=0.5, max=2, default=1, step=0.5),
    ]),
    _archetype("info", "Info", "status", "Information/help icon", [
        _number("circleRadius", "Circle Radius", "Radius of the info circle",
                min=8, max=12, default=10, step=0.5),
        _number("dotRadius", "Dot Radius", "Radius of the top dot",
                min=1, max=2, default=1.5, step=0.5),
        _number("textHeight", "Text Height", 'Height of the "i" character',
                min=4, max=8, default=6, step=1),
    ]),
    _archetype("warning", "Warning", "status", "Warning/alert icon", [
        _number("triangleHeight", "Triangle Height", "Height of the warning triangle",
                min=10, max=16, default=14, step=1),
        _number("dotRadius", "Dot Radius", "Radius of the warning dot",
                min=1, max=2, default=1.5, step=0.5),
        _number("exclamationHeight", "Exclamation Height", "Height of the exclamation mark",
                min=5, max=9, default=7, step=1),
    ]),
]

ARCHETYPES: Mapping[str, Archetype] = MappingProxyType({a.id: a for a in _DEFINITIONS})


def get_archetype(archetype_id: str) -> Archetype | None:
    return ARCHETYPES.get(archetype_id)


def has_archetype(archetype_id: str) -> bool:
    return archetype_id in ARCHETYPES


def get_all_archetype_ids() -> list[str]:
    return list(ARCHETYPES)


def get_all_archetypes() -> list[Archetype]:
    return list(ARCHETYPES.values())


def _matches_type(value: Any, param_type: str) -> bool:
    if param_type == "boolean":
        return isinstance(value, bool)
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_archetype_params(
    archetype_id: str,
    params: Mapping[str, Any],
) -> list[str]:
    """Check caller-supplied values against an archetype's parameter schema.

    Every declared parameter is checked in order: presence of the key, then
    type, then (for numbers) finiteness and the lower and upper bound
    independently. An explicit None is a type error, not a missing value.
    Keys the archetype does not declare are ignored.

    Returns:
        All violations found; an empty list means the parameters are valid.
    """
    archetype = get_archetype(archetype_id)
    if archetype is None:
        return [f'Archetype "{archetype_id}" not found']

    errors: list[str] = []
    for param in archetype.parameters:
        if param.id not in params:
            errors.append(f'Parameter "{param.id}" is required')
            continue

        value = params[param.id]
        if not _matches_type(value, param.type):
            errors.append(f'Parameter "{param.id}" must be of type {param.type}')
            continue

        if param.type != "number":
            continue
        if not math.isfinite(value):
            errors.append(f'Parameter "{param.id}" must be a finite number')
            continue
        if param.min is not None and value < param.min:
            errors.append(f'Parameter "{param.id}" must be >= {format_number(param.min)}')
        if param.max is not None and value > param.max:
            errors.append(f'Parameter "{param.id}" must be <= {format_number(param.max)}')

    return errors


def resolve_params(
    archetype_id: str,
    overrides: Mapping[str, ParamValue] | None = None,
) -> dict[str, ParamValue]:
    """Archetype defaults with `overrides` layered on top.

    Raises:
        KeyError: If the archetype does not exist.
    """
    archetype = get_archetype(archetype_id)
    if archetype is None:
        raise KeyError(archetype_id)
    return {**archetype.defaults, **(overrides or {})}
