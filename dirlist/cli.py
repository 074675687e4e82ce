"""Command-line front door for dirlist.

Scans argv flag clusters into ``ListingOptions``, runs the listing into an
output buffer, and flushes that buffer to stdout exactly once.
"""

from __future__ import annotations

import logging
import os
import sys

from .listing import run_listing
from .options import parse_options
from .runtime.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Run one listing and exit non-zero when the target cannot be opened.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    A fatal failure is raised as ``SystemExit`` carrying the platform error
    description after any buffered output has been written.
    """
    configure_logging()
    options = parse_options(sys.argv[1:] if argv is None else list(argv))
    logger.debug("listing options: %s", options)

    out: list[str] = []
    result = run_listing(options, out)
    write_output("".join(out))

    if not result.ok:
        raise SystemExit(result.error)


def write_output(text: str) -> None:
    """Flush ``text`` to stdout, keeping undecodable file-name bytes intact.

    Names that are not valid in the filesystem encoding arrive as surrogate
    escapes; they are written back as their original bytes through the
    binary buffer. Text-only streams without a buffer receive ``text`` as is.
    """
    buffer = getattr(sys.stdout, "buffer", None)
    if buffer is None:
        sys.stdout.write(text)
        sys.stdout.flush()
        return
    sys.stdout.flush()
    buffer.write(os.fsencode(text))
    buffer.flush()


if __name__ == "__main__":
    main()
