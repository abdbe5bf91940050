"""Top-level package for ``kwds_check``.

Validate and normalize keyword lists against a spec of expected keys:

1. bare names in the spec are required keys,
2. ``(key, default)`` pairs are optional keys,
3. :func:`~kwds_check.checker.check_keywords` returns a
   :class:`~kwds_check.core.contracts.KeywordCheckResult`,
4. :func:`~kwds_check.checker.check_keywords_or_fail` raises
   :class:`~kwds_check.core.contracts.KeywordCheckError` instead.

Notes
-----
Pass ``{"ignore_errors": True}`` as options to tolerate missing and
unexpected keys.
"""

from .checker import check_keywords, check_keywords_or_fail
from .core.contracts import KeywordCheckError, KeywordCheckResult, SpecEntry
from .core.keyword_list import fetch_first, format_keyword_list, get_first, pop_first
from .options import CheckOptions, check_options_from_config

__all__ = [
    "CheckOptions",
    "KeywordCheckError",
    "KeywordCheckResult",
    "SpecEntry",
    "check_keywords",
    "check_keywords_or_fail",
    "check_options_from_config",
    "fetch_first",
    "format_keyword_list",
    "get_first",
    "pop_first",
]
