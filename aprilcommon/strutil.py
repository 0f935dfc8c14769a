"""Small string helpers: splitting, trimming, searching and replacing.

Whitespace means the ASCII whitespace characters (space, tab, newline,
vertical tab, form feed and carriage return), and case conversion touches
only the ASCII letters.
"""

from __future__ import annotations

import os
import re
import string
from typing import Iterable

__all__ = [
    "sprintf",
    "concat",
    "diff_index",
    "split",
    "split_spaces",
    "strcaseeq",
    "trim",
    "lstrip",
    "rstrip",
    "ends_with",
    "starts_with",
    "starts_with_any",
    "matches_any",
    "substring",
    "index_of",
    "contains",
    "last_index_of",
    "to_lower",
    "to_upper",
    "replace",
    "replace_many",
    "expand_envs",
]

_WHITESPACE = " \t\n\v\f\r"
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_ENV_REFERENCE = re.compile(r"\$([A-Za-z0-9_]*)")


def sprintf(fmt: str, *args: object) -> str:
    """``fmt`` formatted printf-style with ``args``."""
    return fmt % args


def concat(*args: str) -> str:
    """All arguments joined together."""
    return "".join(args)


def diff_index(a: str, b: str) -> int:
    """The index of the first character at which ``a`` and ``b`` differ.

    If one is a prefix of the other, the length of the shorter is returned.
    """
    for i, (x, y) in enumerate(zip(a, b)):
        if x != y:
            return i
    return min(len(a), len(b))


def split(s: str, delim: str) -> list[str]:
    """Split ``s`` at each ``delim``, dropping empty pieces.

    A string made only of delimiters gives an empty list. An empty
    delimiter never matches, so the whole string is one piece.
    """
    if not delim:
        return [s] if s else []
    return [part for part in s.split(delim) if part]


def split_spaces(s: str) -> list[str]:
    """Split ``s`` on runs of one or more spaces."""
    return [part for part in s.split(" ") if part]


def strcaseeq(a: str, b: str) -> bool:
    """True if ``a`` and ``b`` are equal ignoring ASCII letter case."""
    return a.translate(_TO_LOWER) == b.translate(_TO_LOWER)


def trim(s: str) -> str:
    """``s`` without leading and trailing whitespace."""
    return s.strip(_WHITESPACE)


def lstrip(s: str) -> str:
    """``s`` without leading whitespace."""
    return s.lstrip(_WHITESPACE)


def rstrip(s: str) -> str:
    """``s`` without trailing whitespace."""
    return s.rstrip(_WHITESPACE)


def ends_with(haystack: str, needle: str) -> bool:
    """True if ``haystack`` ends with ``needle``; an empty needle always matches."""
    return haystack.endswith(needle)


def starts_with(haystack: str, needle: str) -> bool:
    """True if ``haystack`` starts with ``needle``; an empty needle always matches."""
    return haystack.startswith(needle)


def starts_with_any(haystack: str, needles: Iterable[str]) -> bool:
    """True if ``haystack`` starts with any of ``needles``."""
    return any(haystack.startswith(needle) for needle in needles)


def matches_any(haystack: str, needles: Iterable[str]) -> bool:
    """True if ``haystack`` equals any of ``needles``."""
    return any(haystack == needle for needle in needles)


def substring(s: str, start: int, end: int = -1) -> str:
    """Characters ``start`` up to (not including) ``end`` of ``s``.

    A negative ``end`` means the end of the string.
    """
    if start < 0 or start > len(s):
        raise ValueError(f"start index {start} out of range for length {len(s)}")
    if end < 0:
        end = len(s)
    elif end < start or end > len(s):
        raise ValueError(
            f"end index {end} out of range for start {start} and length {len(s)}"
        )
    return s[start:end]


def index_of(haystack: str, needle: str) -> int:
    """The index of the first ``needle`` in ``haystack``, or -1."""
    return haystack.find(needle)


def contains(haystack: str, needle: str) -> bool:
    """True if ``needle`` occurs in ``haystack``."""
    return index_of(haystack, needle) >= 0


def last_index_of(haystack: str, needle: str) -> int:
    """The index of the last ``needle`` in ``haystack``, or -1."""
    return haystack.rfind(needle)


def to_lower(s: str) -> str:
    """``s`` with ASCII upper-case letters made lower case."""
    return s.translate(_TO_LOWER)


def to_upper(s: str) -> str:
    """``s`` with ASCII lower-case letters made upper case."""
    return s.translate(_TO_UPPER)


def replace(haystack: str, needle: str, replacement: str) -> str:
    """Every ``needle`` in ``haystack`` replaced by ``replacement``.

    An empty needle matches only an empty haystack.
    """
    if not needle:
        return replacement if not haystack else haystack
    return haystack.replace(needle, replacement)


def replace_many(haystack: str, *args: str) -> str:
    """Apply :func:`replace` for each (needle, replacement) pair in turn."""
    if len(args) % 2:
        raise ValueError("replace_many needs needle/replacement pairs")
    for needle, replacement in zip(args[::2], args[1::2]):
        haystack = replace(haystack, needle, replacement)
    return haystack


def expand_envs(s: str) -> str:
    """Replace each ``$NAME`` with the environment variable's value.

    Names consist of ASCII letters, digits and underscores; unset variables
    expand to nothing.
    """

    def _lookup(match: re.Match[str]) -> str:
        name = match.group(1)
        return os.environ.get(name, "") if name else ""

    return _ENV_REFERENCE.sub(_lookup, s)