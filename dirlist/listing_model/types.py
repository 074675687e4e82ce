"""Domain datatypes for enumerated directory entries and their metadata."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(Enum):
    """Coarse filesystem object kind used for the leading type character."""

    DIRECTORY = "directory"
    REGULAR = "regular"
    OTHER = "other"


@dataclass(frozen=True)
class PermissionBits:
    """The nine owner/group/other read/write/execute bits."""

    owner_read: bool = False
    owner_write: bool = False
    owner_execute: bool = False
    group_read: bool = False
    group_write: bool = False
    group_execute: bool = False
    other_read: bool = False
    other_write: bool = False
    other_execute: bool = False

    def triplets(self) -> tuple[tuple[bool, bool, bool], ...]:
        """Return bits grouped as ``(owner, group, other)`` rwx triplets."""
        return (
            (self.owner_read, self.owner_write, self.owner_execute),
            (self.group_read, self.group_write, self.group_execute),
            (self.other_read, self.other_write, self.other_execute),
        )


@dataclass(frozen=True)
class DirectoryEntry:
    """One enumerated name plus the path used to fetch its metadata."""

    name: str
    path: Path


@dataclass(frozen=True)
class EntryMetadata:
    """Read-only attribute snapshot of one filesystem object at render time."""

    name: str
    kind: EntryKind
    permissions: PermissionBits
    link_count: int
    owner_id: int
    group_id: int
    owner_name: str
    group_name: str
    size: int
    modified_at: float


__all__ = [
    "EntryKind",
    "PermissionBits",
    "DirectoryEntry",
    "EntryMetadata",
]
