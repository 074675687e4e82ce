"""Filesystem enumeration, stat snapshots, and owner/group name resolution."""

from __future__ import annotations

import grp
import os
import pwd
import stat
from collections.abc import Iterator
from pathlib import Path

from .types import DirectoryEntry, EntryKind, EntryMetadata, PermissionBits

UNKNOWN_IDENTITY = "unknown"
SELF_NAME = "."
PARENT_NAME = ".."


def resolve_owner_name(uid: int) -> str:
    """Return the user name for ``uid`` or ``unknown`` when it has none."""
    try:
        return pwd.getpwuid(uid).pw_name
    except (KeyError, OverflowError):
        return UNKNOWN_IDENTITY


def resolve_group_name(gid: int) -> str:
    """Return the group name for ``gid`` or ``unknown`` when it has none."""
    try:
        return grp.getgrgid(gid).gr_name
    except (KeyError, OverflowError):
        return UNKNOWN_IDENTITY


def entry_kind_for_mode(mode: int) -> EntryKind:
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.REGULAR
    return EntryKind.OTHER


def permission_bits_for_mode(mode: int) -> PermissionBits:
    """Decode the nine rwx bits of ``mode``; special bits are ignored."""
    return PermissionBits(
        owner_read=bool(mode & stat.S_IRUSR),
        owner_write=bool(mode & stat.S_IWUSR),
        owner_execute=bool(mode & stat.S_IXUSR),
        group_read=bool(mode & stat.S_IRGRP),
        group_write=bool(mode & stat.S_IWGRP),
        group_execute=bool(mode & stat.S_IXGRP),
        other_read=bool(mode & stat.S_IROTH),
        other_write=bool(mode & stat.S_IWOTH),
        other_execute=bool(mode & stat.S_IXOTH),
    )


def metadata_from_stat(name: str, st: os.stat_result) -> EntryMetadata:
    """Build an ``EntryMetadata`` snapshot from a stat result."""
    return EntryMetadata(
        name=name,
        kind=entry_kind_for_mode(st.st_mode),
        permissions=permission_bits_for_mode(st.st_mode),
        link_count=int(st.st_nlink),
        owner_id=int(st.st_uid),
        group_id=int(st.st_gid),
        owner_name=resolve_owner_name(st.st_uid),
        group_name=resolve_group_name(st.st_gid),
        size=int(st.st_size),
        modified_at=float(st.st_mtime),
    )


def read_entry_metadata(path: Path | str, name: str) -> EntryMetadata:
    """Stat ``path`` (following symlinks) and label the snapshot ``name``.

    Raises ``OSError`` when the object cannot be stat'ed. Nothing is cached:
    every call hits the filesystem.
    """
    return metadata_from_stat(name, os.stat(path))


def enumerate_directory(directory: Path | str) -> Iterator[DirectoryEntry]:
    """Yield ``.``, ``..``, then every child of ``directory`` in platform order.

    ``os.scandir`` omits the two synthetic entries, so they are emitted first
    the way ``readdir`` reports them. The directory is opened before the first
    yield; ``OSError`` from opening propagates to the caller. ``directory`` is
    passed through unnormalized, so an empty string fails like ``opendir("")``.
    """
    base = os.fspath(directory)
    scanner = os.scandir(base)
    return _iter_entries(base, scanner)


def _iter_entries(base: str, scanner: Iterator[os.DirEntry[str]]) -> Iterator[DirectoryEntry]:
    with scanner as entries:
        yield DirectoryEntry(name=SELF_NAME, path=Path(os.path.join(base, SELF_NAME)))
        yield DirectoryEntry(name=PARENT_NAME, path=Path(os.path.join(base, PARENT_NAME)))
        for child in entries:
            yield DirectoryEntry(name=child.name, path=Path(child.path))


__all__ = [
    "UNKNOWN_IDENTITY",
    "resolve_owner_name",
    "resolve_group_name",
    "entry_kind_for_mode",
    "permission_bits_for_mode",
    "metadata_from_stat",
    "read_entry_metadata",
    "enumerate_directory",
]
