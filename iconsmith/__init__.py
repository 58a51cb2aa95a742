"""iconsmith: compile icon archetypes into deterministic SVG under a DNA profile.

Typical use:
    from iconsmith import compile_icon, compiled_icon_to_svg, create_dna

    dna = create_dna("brand", "Brand")
    icon = compile_icon("search", {"lensRadius": 6, "handleLength": 5, "handleAngle": 45}, dna)
    svg = compiled_icon_to_svg(icon)
"""

__version__ = "0.1.0"

from .archetypes import (  # noqa: E402
    ARCHETYPE_COMPILERS,
    ARCHETYPES,
    ArchetypeKind,
    get_all_archetype_ids,
    get_all_archetypes,
    get_archetype,
    get_archetype_compiler,
    has_archetype,
    resolve_params,
    validate_archetype_params,
)
from .compiler import (  # noqa: E402
    ParameterValidationError,
    UnknownArchetypeError,
    compile_icon,
    compiled_icon_to_svg,
    generate_icon_id,
)
from .core.models import (  # noqa: E402
    Archetype,
    ArchetypeParameter,
    ColorMode,
    CompiledIcon,
    DNAValidationError,
    IconDNA,
    IconMetadata,
    IconStyle,
    LineCap,
    LineJoin,
    SVGPath,
    create_dna,
    revise_dna,
    validate_dna,
)

__all__ = [
    "__version__",
    # Registry
    "ARCHETYPES",
    "ARCHETYPE_COMPILERS",
    "ArchetypeKind",
    "get_all_archetype_ids",
    "get_all_archetypes",
    "get_archetype",
    "get_archetype_compiler",
    "has_archetype",
    "resolve_params",
    "validate_archetype_params",
    # Compiler
    "ParameterValidationError",
    "UnknownArchetypeError",
    "compile_icon",
    "compiled_icon_to_svg",
    "generate_icon_id",
    # Models
    "Archetype",
    "ArchetypeParameter",
    "ColorMode",
    "CompiledIcon",
    "DNAValidationError",
    "IconDNA",
    "IconMetadata",
    "IconStyle",
    "LineCap",
    "LineJoin",
    "SVGPath",
    "create_dna",
    "revise_dna",
    "validate_dna",
]
