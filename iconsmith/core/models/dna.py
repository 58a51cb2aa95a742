"""Icon DNA models and validation.

A DNA profile is the shared rule set every icon in a set obeys:
- Geometry: grid size, viewBox size, live-area inset, stroke width/cap/join
- Quantization: allowed corner radii and line angles
- Legibility: minimum gap between features, minimum feature size
- Colour: currentColor, or a fixed primary colour

Profiles are immutable. create_dna() is the constructor; revise_dna()
derives a new profile with a bumped version. Validation stops at the first
violation and names the offending field.
"""

import logging
import math
from datetime import datetime
from enum import Enum
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml
from pydantic import BaseModel, ConfigDict, Field

from ...utils.clock import Clock, is_iso8601, to_iso8601, utc_now

logger = logging.getLogger(__name__)


class DNAValidationError(ValueError):
    """A DNA profile violates the schema.

    Attributes:
        field: Name of the first offending field
    """

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(message)


# =============================================================================
# Enumerations
# =============================================================================


class LineCap(str, Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"


class LineJoin(str, Enum):
    MITER = "miter"
    ROUND = "round"
    BEVEL = "bevel"


class ColorMode(str, Enum):
    CURRENT_COLOR = "currentColor"
    FIXED = "fixed"


# =============================================================================
# DNA profile
# =============================================================================


class IconDNA(BaseModel):
    """Validated, immutable DNA profile."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Profile id, e.g. 'corporate-sharp'")
    name: str
    description: str | None = None

    grid_size: float = Field(description="Base unit all coordinates snap to")
    view_box_size: float = Field(description="Side of the square viewBox")
    live_area_inset: float = Field(description="Padding between viewBox and live area")
    stroke_width: float
    stroke_line_cap: LineCap
    stroke_line_join: LineJoin

    allowed_radii: tuple[float, ...] = Field(description="Permitted corner radii")
    allowed_angles: tuple[float, ...] = Field(description="Permitted line angles (degrees)")

    minimum_gap: float
    minimum_feature_size: float

    color_mode: ColorMode
    primary_color: str | None = Field(
        default=None, description="CSS colour, required when color_mode is 'fixed'"
    )

    version: int = 1
    created_at: str
    updated_at: str

    @classmethod
    def from_yaml(cls, path: Path | str) -> "IconDNA":
        """Load and validate a profile from a YAML file."""
        path = Path(path)

        with open(path) as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise DNAValidationError("dna", f"{path} does not contain a DNA mapping")

        # Unquoted timestamps load as datetime objects
        for key in ("created_at", "updated_at"):
            if isinstance(data.get(key), datetime):
                data[key] = to_iso8601(data[key])
        return validate_dna(data)

    def to_yaml_str(self) -> str:
        """Render the profile as YAML (for display)."""
        return yaml.dump(
            self.model_dump(mode="json"),
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )


DEFAULT_DNA_VALUES: Mapping[str, Any] = MappingProxyType(
    {
        "description": None,
        "grid_size": 1,
        "view_box_size": 24,
        "live_area_inset": 2,
        "stroke_width": 1.5,
        "stroke_line_cap": LineCap.ROUND.value,
        "stroke_line_join": LineJoin.ROUND.value,
        "allowed_radii": (0, 2, 4),
        "allowed_angles": (0, 45, 90),
        "minimum_gap": 1,
        "minimum_feature_size": 2,
        "color_mode": ColorMode.CURRENT_COLOR.value,
        "primary_color": None,
    }
)

# Fields set by the constructor itself and never taken from overrides
_PROTECTED_FIELDS = frozenset({"id", "name", "version", "created_at", "updated_at"})


# =============================================================================
# Validation
# =============================================================================


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_finite_number(value: Any) -> bool:
    return _is_number(value) and math.isfinite(value)


def _require_positive(data: Mapping[str, Any], field: str) -> None:
    value = data.get(field)
    if not _is_finite_number(value) or value <= 0:
        raise DNAValidationError(field, f"DNA.{field} must be a positive number")


def _require_non_negative(data: Mapping[str, Any], field: str) -> None:
    value = data.get(field)
    if not _is_finite_number(value) or value < 0:
        raise DNAValidationError(field, f"DNA.{field} must be a non-negative number")


def _require_number_list(data: Mapping[str, Any], field: str) -> None:
    value = data.get(field)
    if not isinstance(value, (list, tuple)) or not all(_is_number(v) for v in value):
        raise DNAValidationError(field, f"DNA.{field} must be an array of numbers")


def _require_choice(data: Mapping[str, Any], field: str, enum: type[Enum]) -> None:
    valid = [member.value for member in enum]
    if data.get(field) not in valid:
        raise DNAValidationError(field, f"DNA.{field} must be one of: {', '.join(valid)}")


def _require_timestamp(data: Mapping[str, Any], field: str) -> None:
    value = data.get(field)
    if not isinstance(value, str) or not is_iso8601(value):
        raise DNAValidationError(field, f"DNA.{field} must be a valid ISO 8601 timestamp")


def validate_dna(dna: IconDNA | Mapping[str, Any]) -> IconDNA:
    """Validate a DNA profile and return it as an IconDNA.

    Checks run in a fixed order and the first violation is raised; errors
    are not aggregated.

    Args:
        dna: A mapping of DNA fields, or an existing IconDNA

    Returns:
        The validated, immutable profile

    Raises:
        DNAValidationError: On the first violated rule
    """
    if isinstance(dna, IconDNA):
        data: Mapping[str, Any] = dna.model_dump()
    elif isinstance(dna, Mapping):
        data = dna
    else:
        raise DNAValidationError("dna", "DNA must be an object")

    for field in ("id", "name"):
        value = data.get(field)
        if not isinstance(value, str) or not value:
            raise DNAValidationError(field, f"DNA.{field} must be a non-empty string")

    _require_positive(data, "grid_size")
    _require_positive(data, "view_box_size")
    _require_non_negative(data, "live_area_inset")
    _require_positive(data, "stroke_width")
    _require_non_negative(data, "minimum_gap")
    _require_positive(data, "minimum_feature_size")

    _require_number_list(data, "allowed_radii")
    _require_number_list(data, "allowed_angles")

    _require_choice(data, "stroke_line_cap", LineCap)
    _require_choice(data, "stroke_line_join", LineJoin)
    _require_choice(data, "color_mode", ColorMode)

    if data.get("color_mode") == ColorMode.FIXED and not isinstance(
        data.get("primary_color"), str
    ):
        raise DNAValidationError(
            "primary_color", 'DNA.primary_color is required when color_mode is "fixed"'
        )

    _require_timestamp(data, "created_at")
    _require_timestamp(data, "updated_at")

    if isinstance(dna, IconDNA):
        return dna
    return IconDNA.model_validate(dict(data))


# =============================================================================
# Construction
# =============================================================================


def _check_overrides(overrides: Mapping[str, Any]) -> None:
    for key in overrides:
        if key in _PROTECTED_FIELDS:
            raise DNAValidationError(key, f"DNA.{key} cannot be overridden")
        if key not in DEFAULT_DNA_VALUES:
            raise DNAValidationError(key, f"Unknown DNA field: {key}")


def create_dna(
    id: str,
    name: str,
    overrides: Mapping[str, Any] | None = None,
    *,
    clock: Clock | None = None,
) -> IconDNA:
    """Create a DNA profile with defaults filled in.

    Version is always 1 and both timestamps are stamped with the same
    instant.

    Args:
        id: Profile id
        name: Human-readable name
        overrides: Values replacing the defaults, keyed by field name
        clock: Time source; defaults to the current UTC instant

    Raises:
        DNAValidationError: If an override is unknown/protected or the
            resulting profile is invalid
    """
    overrides = overrides or {}
    _check_overrides(overrides)

    now = to_iso8601((clock or utc_now)())
    data: dict[str, Any] = {
        "id": id,
        "name": name,
        **DEFAULT_DNA_VALUES,
        **overrides,
        "version": 1,
        "created_at": now,
        "updated_at": now,
    }

    dna = validate_dna(data)
    logger.debug("Created DNA profile %s (%s)", dna.id, dna.name)
    return dna


def revise_dna(
    dna: IconDNA,
    changes: Mapping[str, Any],
    *,
    clock: Clock | None = None,
) -> IconDNA:
    """Derive a new profile from `dna` with `changes` applied.

    The original profile is left untouched. The revision keeps id, name and
    created_at, increments version and re-stamps updated_at.

    Raises:
        DNAValidationError: If a change is unknown/protected or the revised
            profile is invalid
    """
    _check_overrides(changes)

    data = dna.model_dump()
    data.update(changes)
    data["version"] = dna.version + 1
    data["updated_at"] = to_iso8601((clock or utc_now)())

    revised = validate_dna(data)
    logger.debug("Revised DNA profile %s to version %d", revised.id, revised.version)
    return revised


def resolve_ink(dna: IconDNA) -> str:
    """Colour that archetype fills and strokes are painted with."""
    if dna.color_mode == ColorMode.FIXED and dna.primary_color:
        return dna.primary_color
    return ColorMode.CURRENT_COLOR.value
