"""Per-entry text records for minimal and long listing formats.

Rendering is stateless: each call fetches metadata fresh and returns a
``RenderedRecord`` or a ``RenderFailure`` instead of raising.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path

from ..listing_model import DirectoryEntry, EntryKind, EntryMetadata, read_entry_metadata

MINIMAL_SEPARATOR = "   "
FIELD_SEPARATOR = "  "
GENERIC_FAILURE_MESSAGE = "Error retrieving file info"
MTIME_SLICE = slice(4, 16)
_TRIPLET_LETTERS = ("r", "w", "x")


@dataclass(frozen=True)
class RenderedRecord:
    text: str


@dataclass(frozen=True)
class RenderFailure:
    """Metadata for one entry could not be read; ``message`` is user-facing."""

    name: str
    message: str

    @property
    def text(self) -> str:
        return self.message + "\n"


RenderResult = RenderedRecord | RenderFailure


def format_permissions(metadata: EntryMetadata) -> str:
    """Return the 10-char type+rwx string, e.g. ``drwxr-xr-x``."""
    chars = ["d" if metadata.kind is EntryKind.DIRECTORY else "-"]
    for triplet in metadata.permissions.triplets():
        for letter, is_set in zip(_TRIPLET_LETTERS, triplet):
            chars.append(letter if is_set else "-")
    return "".join(chars)


def format_mtime(modified_at: float) -> str:
    """Return the ``Mmm dd hh:mm`` slice of the ``ctime`` form of a timestamp."""
    return time.ctime(modified_at)[MTIME_SLICE]


def render_long_record(metadata: EntryMetadata) -> str:
    fields = (
        format_permissions(metadata),
        str(metadata.link_count),
        metadata.owner_name,
        metadata.group_name,
        str(metadata.size),
        format_mtime(metadata.modified_at),
    )
    return "".join(field + FIELD_SEPARATOR for field in fields) + metadata.name + "\n"


def render_minimal_record(name: str) -> str:
    """Return ``name`` plus the three-space separator and no line break."""
    return name + MINIMAL_SEPARATOR


def _failure_message(exc: Exception) -> str:
    if isinstance(exc, OSError) and exc.strerror:
        return exc.strerror
    return GENERIC_FAILURE_MESSAGE


def render_long_path(path: Path | str, name: str, platform_errors: bool = True) -> RenderResult:
    """Stat ``path`` and render it as a long record labeled ``name``.

    With ``platform_errors`` a failed stat reports the OS error description;
    otherwise every failure reports ``GENERIC_FAILURE_MESSAGE``.
    """
    try:
        metadata = read_entry_metadata(path, name)
    except (OSError, ValueError) as exc:
        message = _failure_message(exc) if platform_errors else GENERIC_FAILURE_MESSAGE
        return RenderFailure(name=name, message=message)
    return RenderedRecord(render_long_record(metadata))


def render_entry(entry: DirectoryEntry, long_format: bool) -> RenderResult:
    """Render one enumerated entry in the requested format.

    Child entries that cannot be stat'ed always report the generic message.
    """
    if not long_format:
        return RenderedRecord(render_minimal_record(entry.name))
    return render_long_path(entry.path, entry.name, platform_errors=False)


__all__ = [
    "MINIMAL_SEPARATOR",
    "FIELD_SEPARATOR",
    "GENERIC_FAILURE_MESSAGE",
    "RenderedRecord",
    "RenderFailure",
    "RenderResult",
    "format_permissions",
    "format_mtime",
    "render_long_record",
    "render_minimal_record",
    "render_long_path",
    "render_entry",
]
