"""Core value types and keyword-list helpers."""

from .contracts import (
    KeywordCheckError,
    KeywordCheckResult,
    KeywordList,
    KeywordPair,
    NO_DEFAULT,
    SpecEntry,
    SpecItem,
    coerce_keyword_list,
    coerce_spec,
)
from .keyword_list import fetch_first, format_keyword_list, get_first, pop_first

__all__ = [
    "KeywordCheckError",
    "KeywordCheckResult",
    "KeywordList",
    "KeywordPair",
    "NO_DEFAULT",
    "SpecEntry",
    "SpecItem",
    "coerce_keyword_list",
    "coerce_spec",
    "fetch_first",
    "format_keyword_list",
    "get_first",
    "pop_first",
]
