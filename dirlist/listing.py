"""Listing controller: enumerate, filter, render, and collect output text.

The controller only appends to the caller's buffer; flushing it belongs to
the CLI.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .listing_model import enumerate_directory, filter_visible_entries
from .options import ListingOptions
from .render import RenderFailure, render_entry, render_long_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingResult:
    """Outcome of one listing run.

    ``ok`` is ``False`` only for fatal failures (the target could not be
    opened for enumeration); ``error`` then holds the user-facing line.
    Entry-level failures are counted but keep ``ok`` true.
    """

    ok: bool
    entries_rendered: int = 0
    entry_failures: int = 0
    error: str | None = None


def list_directory_itself(options: ListingOptions, out: list[str]) -> ListingResult:
    """Render ``options.target`` as a single entry without enumerating it."""
    if not options.long_format:
        out.append(options.target + "\n")
        return ListingResult(ok=True, entries_rendered=1)

    result = render_long_path(options.target, options.target)
    out.append(result.text)
    if isinstance(result, RenderFailure):
        logger.debug("stat failed for %s: %s", options.target, result.message)
        return ListingResult(ok=True, entry_failures=1)
    return ListingResult(ok=True, entries_rendered=1)


def list_directory_children(options: ListingOptions, out: list[str]) -> ListingResult:
    """Render every visible child of ``options.target`` in enumeration order."""
    try:
        entries = enumerate_directory(options.target)
    except OSError as exc:
        message = exc.strerror or str(exc)
        logger.debug("cannot open %s: %s", options.target, message)
        return ListingResult(ok=False, error=message)

    rendered = 0
    failures = 0
    for entry in filter_visible_entries(entries, options.show_all, options.show_almost_all):
        result = render_entry(entry, options.long_format)
        out.append(result.text)
        if isinstance(result, RenderFailure):
            failures += 1
            logger.debug("stat failed for %s: %s", entry.path, result.message)
        else:
            rendered += 1

    if not options.long_format:
        out.append("\n")
    return ListingResult(ok=True, entries_rendered=rendered, entry_failures=failures)


def run_listing(options: ListingOptions, out: list[str]) -> ListingResult:
    """Dispatch to directory-itself or children mode according to ``options``."""
    if options.directory_itself:
        return list_directory_itself(options, out)
    return list_directory_children(options, out)


__all__ = [
    "ListingResult",
    "list_directory_itself",
    "list_directory_children",
    "run_listing",
]
