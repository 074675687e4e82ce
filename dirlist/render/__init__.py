"""Text rendering for listing entries.

Exposes minimal and long record builders plus the result types the
listing controller consumes.
"""

from __future__ import annotations

from .entry import (
    FIELD_SEPARATOR,
    GENERIC_FAILURE_MESSAGE,
    MINIMAL_SEPARATOR,
    RenderFailure,
    RenderResult,
    RenderedRecord,
    format_mtime,
    format_permissions,
    render_entry,
    render_long_path,
    render_long_record,
    render_minimal_record,
)

__all__ = [
    "FIELD_SEPARATOR",
    "GENERIC_FAILURE_MESSAGE",
    "MINIMAL_SEPARATOR",
    "RenderFailure",
    "RenderResult",
    "RenderedRecord",
    "format_mtime",
    "format_permissions",
    "render_entry",
    "render_long_path",
    "render_long_record",
    "render_minimal_record",
]
