"""Archetype registry and compiler dispatch.

ARCHETYPE_COMPILERS maps every ArchetypeKind to its compiler. The table is
read-only and checked at import against both the enum and the archetype
registry, so a missing compiler fails loudly rather than at compile time.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from .add import compile_add_icon
from .base import ArchetypeCompiler
from .definitions import (
    ARCHETYPES,
    get_all_archetype_ids,
    get_all_archetypes,
    get_archetype,
    has_archetype,
    resolve_params,
    validate_archetype_params,
)
from .download import compile_download_icon
from .edit import compile_edit_icon
from .home import compile_home_icon
from .info import compile_info_icon
from .pause import compile_pause_icon
from .play import compile_play_icon
from .profile import compile_profile_icon
from .refresh import compile_refresh_icon
from .remove import compile_remove_icon
from .search import compile_search_icon
from .settings import compile_settings_icon
from .share import compile_share_icon
from .trash import compile_trash_icon
from .upload import compile_upload_icon
from .warning import compile_warning_icon


class ArchetypeKind(str, Enum):
    HOME = "home"
    SEARCH = "search"
    SETTINGS = "settings"
    PROFILE = "profile"
    TRASH = "trash"
    DOWNLOAD = "download"
    UPLOAD = "upload"
    EDIT = "edit"
    ADD = "add"
    REMOVE = "remove"
    PLAY = "play"
    PAUSE = "pause"
    REFRESH = "refresh"
    SHARE = "share"
    INFO = "info"
    WARNING = "warning"


ARCHETYPE_COMPILERS: Mapping[ArchetypeKind, ArchetypeCompiler] = MappingProxyType(
    {
        ArchetypeKind.HOME: compile_home_icon,
        ArchetypeKind.SEARCH: compile_search_icon,
        ArchetypeKind.SETTINGS: compile_settings_icon,
        ArchetypeKind.PROFILE: compile_profile_icon,
        ArchetypeKind.TRASH: compile_trash_icon,
        ArchetypeKind.DOWNLOAD: compile_download_icon,
        ArchetypeKind.UPLOAD: compile_upload_icon,
        ArchetypeKind.EDIT: compile_edit_icon,
        ArchetypeKind.ADD: compile_add_icon,
        ArchetypeKind.REMOVE: compile_remove_icon,
        ArchetypeKind.PLAY: compile_play_icon,
        ArchetypeKind.PAUSE: compile_pause_icon,
        ArchetypeKind.REFRESH: compile_refresh_icon,
        ArchetypeKind.SHARE: compile_share_icon,
        ArchetypeKind.INFO: compile_info_icon,
        ArchetypeKind.WARNING: compile_warning_icon,
    }
)


def _check_coverage() -> None:
    kinds = {kind.value for kind in ArchetypeKind}
    missing = kinds - {kind.value for kind in ARCHETYPE_COMPILERS}
    if missing:
        raise RuntimeError(f"No compiler registered for: {', '.join(sorted(missing))}")
    if kinds != set(ARCHETYPES):
        raise RuntimeError(
            "Archetype registry and ArchetypeKind disagree: "
            f"{', '.join(sorted(kinds ^ set(ARCHETYPES)))}"
        )


_check_coverage()


def get_archetype_compiler(archetype_id: str) -> ArchetypeCompiler | None:
    """Compiler for `archetype_id`, or None if there is no such archetype."""
    try:
        kind = ArchetypeKind(archetype_id)
    except ValueError:
        return None
    return ARCHETYPE_COMPILERS[kind]


__all__ = [
    "ARCHETYPES",
    "ARCHETYPE_COMPILERS",
    "ArchetypeCompiler",
    "ArchetypeKind",
    "get_all_archetype_ids",
    "get_all_archetypes",
    "get_archetype",
    "get_archetype_compiler",
    "has_archetype",
    "resolve_params",
    "validate_archetype_params",
    # Compilers
    "compile_add_icon",
    "compile_download_icon",
    "compile_edit_icon",
    "compile_home_icon",
    "compile_info_icon",
    "compile_pause_icon",
    "compile_play_icon",
    "compile_profile_icon",
    "compile_refresh_icon",
    "compile_remove_icon",
    "compile_search_icon",
    "compile_settings_icon",
    "compile_share_icon",
    "compile_trash_icon",
    "compile_upload_icon",
    "compile_warning_icon",
]
