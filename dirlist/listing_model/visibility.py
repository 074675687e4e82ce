"""Hidden-entry policy for the ``-a`` / ``-A`` visibility flags."""

from __future__ import annotations

from collections.abc import Iterable

from .types import DirectoryEntry

DOT_ENTRY_NAMES = frozenset({".", ".."})


def is_visible_name(name: str, show_all: bool, show_almost_all: bool) -> bool:
    """Return whether ``name`` survives the visibility flags.

    ``show_almost_all`` is checked before ``show_all`` so that combining both
    behaves like ``-A`` alone.
    """
    if not show_all and not show_almost_all:
        return not name.startswith(".")
    if show_almost_all:
        return name not in DOT_ENTRY_NAMES
    return True


def filter_visible_names(names: Iterable[str], show_all: bool, show_almost_all: bool) -> list[str]:
    """Return visible names in input order without touching ``names``."""
    return [name for name in names if is_visible_name(name, show_all, show_almost_all)]


def filter_visible_entries(
    entries: Iterable[DirectoryEntry],
    show_all: bool,
    show_almost_all: bool,
) -> Iterable[DirectoryEntry]:
    """Lazily yield entries whose names are visible, preserving order."""
    for entry in entries:
        if is_visible_name(entry.name, show_all, show_almost_all):
            yield entry


__all__ = [
    "DOT_ENTRY_NAMES",
    "is_visible_name",
    "filter_visible_names",
    "filter_visible_entries",
]
