"""Immutable listing configuration shared by the filter, renderer and controller."""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_TARGET = "."


@dataclass(frozen=True)
class ListingOptions:
    """Which entries to show, how to format them, and what to list.

    ``target`` is kept verbatim because directory-itself mode prints it as
    the entry name.
    """

    target: str = DEFAULT_TARGET
    show_all: bool = False
    show_almost_all: bool = False
    long_format: bool = False
    directory_itself: bool = False


_FLAG_FIELDS = {
    "a": "show_all",
    "A": "show_almost_all",
    "l": "long_format",
    "d": "directory_itself",
}


def parse_options(argv: list[str]) -> ListingOptions:
    """Scan argv (without the program name) into ``ListingOptions``.

    Tokens starting with ``-`` are flag clusters; unknown characters in a
    cluster are ignored. Any other token names the target and the last one
    wins.
    """
    flags: dict[str, bool] = {}
    target = DEFAULT_TARGET
    for token in argv:
        if token.startswith("-"):
            for char in token[1:]:
                field = _FLAG_FIELDS.get(char)
                if field is not None:
                    flags[field] = True
        else:
            target = token
    return ListingOptions(target=target, **flags)


__all__ = ["DEFAULT_TARGET", "ListingOptions", "parse_options"]
