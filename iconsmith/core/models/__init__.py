"""All Pydantic models for iconsmith, organized by domain.

- dna.py: DNA profiles, their validation and construction
- archetype.py: Archetype and parameter schemas
- icon.py: Path descriptors and compiled icons
"""

from .dna import (
    DEFAULT_DNA_VALUES,
    ColorMode,
    DNAValidationError,
    IconDNA,
    LineCap,
    LineJoin,
    create_dna,
    resolve_ink,
    revise_dna,
    validate_dna,
)
from .archetype import (
    Archetype,
    ArchetypeParameter,
    ParamValue,
)
from .icon import (
    CompiledIcon,
    IconMetadata,
    IconStyle,
    SVGPath,
)

__all__ = [
    # DNA
    "DEFAULT_DNA_VALUES",
    "ColorMode",
    "DNAValidationError",
    "IconDNA",
    "LineCap",
    "LineJoin",
    "create_dna",
    "resolve_ink",
    "revise_dna",
    "validate_dna",
    # Archetypes
    "Archetype",
    "ArchetypeParameter",
    "ParamValue",
    # Icons
    "CompiledIcon",
    "IconMetadata",
    "IconStyle",
    "SVGPath",
]
