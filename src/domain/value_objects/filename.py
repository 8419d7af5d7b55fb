from __future__ import annotations

import re

_EXTENSION = re.compile(r"\.[^.]*$")
_SPECIAL_CHARS = re.compile(r"[`~!@#$%^&*()_|+=?;:'\",.<>{}\[\]\\/]")
_REPEATED_WHITESPACE = re.compile(r"\s\s+")
_WHITESPACE = re.compile(r"\s")


def normalize_filename(filename: str) -> str:
    """Turn a user supplied filename into a fragment usable inside a public id.

    May return an empty string when the name is made only of special characters.
    """
    without_extension = _EXTENSION.sub("", filename)
    cleaned = _SPECIAL_CHARS.sub("", without_extension)
    collapsed = _REPEATED_WHITESPACE.sub(" ", cleaned)
    return _WHITESPACE.sub("-", collapsed)
