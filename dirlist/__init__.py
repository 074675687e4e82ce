"""ls-style directory lister supporting the ``-a``, ``-A``, ``-l`` and ``-d`` flags.

``main`` runs one listing from argv. The visibility filter lives in
``dirlist.listing_model`` and the record formatting in ``dirlist.render``.
"""

from __future__ import annotations


def main(argv: list[str] | None = None) -> None:
    """Run one listing; the CLI module is imported on first call."""
    from .cli import main as _main

    _main(argv)


__all__ = ["main"]
