"""First-occurrence access to keyword lists.

Keyword lists may repeat a key. Lookups return the first occurrence and
removal drops only that occurrence, so every input pair can be consumed by at
most one spec entry.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .contracts import KeywordList, KeywordPair


def fetch_first(kwds: Sequence[KeywordPair], key: str) -> tuple[bool, Any]:
    """Look up the first occurrence of ``key``.

    Returns
    -------
    tuple[bool, Any]
        ``(True, value)`` when found, ``(False, None)`` otherwise.
    """

    for candidate, value in kwds:
        if candidate == key:
            return True, value
    return False, None


def get_first(kwds: Sequence[KeywordPair], key: str, default: Any = None) -> Any:
    """Return the first value stored under ``key`` or ``default``."""

    found, value = fetch_first(kwds, key)
    return value if found else default


def pop_first(kwds: Sequence[KeywordPair], key: str) -> tuple[bool, Any, KeywordList]:
    """Remove the first occurrence of ``key``.

    Parameters
    ----------
    kwds : Sequence[tuple[str, Any]]
        Keyword list. It is not modified.
    key : str
        Keyword to remove.

    Returns
    -------
    tuple[bool, Any, list[tuple[str, Any]]]
        Whether ``key`` was found, its value (``None`` if absent) and the
        remaining pairs in their original order.
    """

    for index, (candidate, value) in enumerate(kwds):
        if candidate == key:
            return True, value, [*kwds[:index], *kwds[index + 1 :]]
    return False, None, list(kwds)


def format_keyword_list(kwds: Sequence[KeywordPair]) -> str:
    """Render pairs as ``[a: 1, b: 'x']`` preserving order."""

    return "[" + ", ".join(f"{key}: {value!r}" for key, value in kwds) + "]"


__all__ = ["fetch_first", "format_keyword_list", "get_first", "pop_first"]
