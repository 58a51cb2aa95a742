"""Archetype schema models.

An archetype is a named icon template ("search", "home", ...) with a fixed,
ordered list of parameters. The parameter definitions double as the schema
UIs build their controls from.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

ParamValue = bool | int | float


class ArchetypeParameter(BaseModel):
    """One tunable aspect of an archetype's geometry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Parameter key, e.g. 'lensRadius'")
    name: str
    description: str
    type: Literal["number", "boolean"]
    min: float | None = None
    max: float | None = None
    default: ParamValue
    step: float | None = Field(default=None, description="Slider step size")
    unit: str | None = Field(default=None, description="e.g. 'px', 'degrees'")


class Archetype(BaseModel):
    """A complete archetype definition."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Lowercase id, e.g. 'trash'")
    name: str
    category: str = Field(description="'navigation', 'action' or 'status'")
    description: str
    parameters: tuple[ArchetypeParameter, ...]
    defaults: dict[str, ParamValue]
    version: int = 1

    def get_parameter(self, param_id: str) -> ArchetypeParameter | None:
        for param in self.parameters:
            if param.id == param_id:
                return param
        return None
