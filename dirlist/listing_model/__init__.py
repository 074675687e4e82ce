"""Domain model for directory entries, metadata snapshots, and visibility.

This package contains the non-rendering listing primitives:
- entry and metadata datatypes
- directory enumeration and stat helpers
- owner/group identity resolution
- the hidden-entry visibility policy
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, EntryMetadata, PermissionBits
from .fs import (
    UNKNOWN_IDENTITY,
    enumerate_directory,
    metadata_from_stat,
    read_entry_metadata,
    resolve_group_name,
    resolve_owner_name,
)
from .visibility import filter_visible_entries, filter_visible_names, is_visible_name

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "EntryMetadata",
    "PermissionBits",
    "UNKNOWN_IDENTITY",
    "enumerate_directory",
    "metadata_from_stat",
    "read_entry_metadata",
    "resolve_owner_name",
    "resolve_group_name",
    "filter_visible_names",
    "filter_visible_entries",
    "is_visible_name",
]
