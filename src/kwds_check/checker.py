"""Validate keyword lists against a spec of expected keys.

Strict matching consumes input pairs in spec order and reports the first
problem it meets: a missing required key as soon as it is reached, otherwise
the pairs left over once the spec is exhausted. Lenient matching never fails.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
import logging
from typing import Any

from kwds_check.core.contracts import (
    KeywordCheckResult,
    KeywordList,
    SpecEntry,
    SpecItem,
    coerce_keyword_list,
    coerce_spec,
)
from kwds_check.core.keyword_list import format_keyword_list, get_first, pop_first
from kwds_check.options import CheckOptions, coerce_check_options

LOG = logging.getLogger(__name__)


def check_keywords(
    kwds: Mapping[str, Any] | Iterable[Sequence[Any]],
    spec: Iterable[SpecItem | SpecEntry],
    options: CheckOptions | Mapping[str, Any] | None = None,
) -> KeywordCheckResult:
    """Check keywords against a spec without raising on mismatches.

    Parameters
    ----------
    kwds : Mapping[str, Any] | Iterable[Sequence[Any]]
        Caller-supplied ``(key, value)`` pairs. Keys may repeat.
    spec : Iterable[str | tuple[str, Any] | SpecEntry]
        Expected keys. A bare name is required, a ``(key, default)`` pair is
        optional.
    options : CheckOptions | Mapping[str, Any] | None, optional
        ``{"ignore_errors": True}`` selects lenient matching.

    Returns
    -------
    KeywordCheckResult
        Normalized mapping, or one of the reports ``"missing key <k>"`` and
        ``"spurious [<k>: <v>, ...]"``.

    Raises
    ------
    ValueError
        If ``kwds``, ``spec`` or ``options`` are malformed.

    Examples
    --------
    >>> check_keywords([("a", 1)], ["a", ("b", 2)]).values
    {'a': 1, 'b': 2}
    >>> check_keywords([("a", 1), ("b", 1)], ["a"]).error
    'spurious [b: 1]'
    """

    pairs = coerce_keyword_list(kwds)
    entries = coerce_spec(spec)
    if coerce_check_options(options).ignore_errors:
        return _check_lenient(entries, pairs)
    return _check_strict(entries, pairs)


def check_keywords_or_fail(
    kwds: Mapping[str, Any] | Iterable[Sequence[Any]],
    spec: Iterable[SpecItem | SpecEntry],
    options: CheckOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Like :func:`check_keywords` but return the mapping directly.

    Raises
    ------
    KeywordCheckError
        With the error report as message when the check fails.
    """

    return check_keywords(kwds, spec, options).unwrap()


def _check_lenient(entries: Sequence[SpecEntry], pairs: KeywordList) -> KeywordCheckResult:
    """Resolve every spec entry independently; leftovers are dropped."""

    values: dict[str, Any] = {}
    for entry in entries:
        values[entry.key] = get_first(pairs, entry.key, entry.fallback)
    return KeywordCheckResult.ok(values)


def _check_strict(entries: Sequence[SpecEntry], pairs: KeywordList) -> KeywordCheckResult:
    """Consume ``pairs`` in spec order, failing on the first problem."""

    values: dict[str, Any] = {}
    rest = pairs
    for entry in entries:
        found, value, rest = pop_first(rest, entry.key)
        if found:
            values[entry.key] = value
        elif entry.has_default:
            values[entry.key] = entry.default
        else:
            LOG.debug("keyword check failed: missing key %s", entry.key)
            return KeywordCheckResult.failure(f"missing key {entry.key}")

    if rest:
        error = f"spurious {format_keyword_list(rest)}"
        LOG.debug("keyword check failed: %s", error)
        return KeywordCheckResult.failure(error)
    return KeywordCheckResult.ok(values)


__all__ = ["check_keywords", "check_keywords_or_fail"]
