"""Value types shared by the keyword checker.

Callers describe expected keywords with a *spec*: a sequence whose entries are
either a bare key name (required) or a ``(key, default)`` pair (optional).
Inputs are keyword lists, i.e. ordered ``(key, value)`` pairs that may repeat
keys, or plain mappings.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

KeywordPair = tuple[str, Any]
KeywordList = list[KeywordPair]
SpecItem = Union[str, tuple[str, Any]]


class KeywordCheckError(ValueError):
    """Raised by :func:`~kwds_check.checker.check_keywords_or_fail` on failure."""


class _NoDefault:
    """Marker type for required spec entries."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True, slots=True)
class SpecEntry:
    """One expected keyword.

    Parameters
    ----------
    key : str
        Keyword name.
    default : Any, optional
        Value used when ``key`` is absent. Leaving it as ``NO_DEFAULT`` marks
        a required keyword; any other value, ``None`` included, makes the
        keyword optional.
    """

    key: str
    default: Any = NO_DEFAULT

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT

    @property
    def fallback(self) -> Any:
        """Value used by lenient matching when ``key`` is absent."""

        return self.default if self.has_default else None


@dataclass(frozen=True, slots=True)
class KeywordCheckResult:
    """Outcome of one keyword check.

    Parameters
    ----------
    is_ok : bool
        ``True`` when the keywords matched the spec.
    values : dict[str, Any] | None
        Normalized mapping on success, ``None`` on failure.
    error : str | None
        Error report on failure, ``None`` on success.
    """

    is_ok: bool
    values: dict[str, Any] | None = None
    error: str | None = None

    @classmethod
    def ok(cls, values: Mapping[str, Any]) -> KeywordCheckResult:
        return cls(is_ok=True, values=dict(values))

    @classmethod
    def failure(cls, error: str) -> KeywordCheckResult:
        return cls(is_ok=False, error=error)

    def unwrap(self) -> dict[str, Any]:
        """Return the normalized mapping or raise :class:`KeywordCheckError`."""

        if not self.is_ok:
            raise KeywordCheckError(self.error)
        return dict(self.values or {})


def coerce_keyword_list(kwds: Mapping[str, Any] | Iterable[Sequence[Any]]) -> KeywordList:
    """Coerce caller input into a list of ``(key, value)`` pairs.

    Parameters
    ----------
    kwds : Mapping[str, Any] | Iterable[Sequence[Any]]
        Keyword list or mapping. Mappings contribute their items in iteration
        order.

    Returns
    -------
    list[tuple[str, Any]]
        Fresh keyword list.

    Raises
    ------
    ValueError
        If an entry is not a two-item pair or its key is not a string.
    """

    items = kwds.items() if isinstance(kwds, Mapping) else kwds
    pairs: KeywordList = []
    for index, item in enumerate(items):
        if isinstance(item, (str, bytes)) or not isinstance(item, Sequence) or len(item) != 2:
            raise ValueError(f"keywords[{index}] must be a (key, value) pair, got {item!r}")
        key, value = item
        pairs.append((_coerce_key(key, field_name=f"keywords[{index}]"), value))
    return pairs


def coerce_spec(spec: Iterable[SpecItem | SpecEntry]) -> tuple[SpecEntry, ...]:
    """Parse spec items into :class:`SpecEntry` values.

    Parameters
    ----------
    spec : Iterable[str | tuple[str, Any] | SpecEntry]
        Bare key names, ``(key, default)`` pairs, or already parsed entries.

    Returns
    -------
    tuple[SpecEntry, ...]
        Parsed entries in the given order.

    Raises
    ------
    ValueError
        If an entry is neither a key name nor a two-item pair.
    """

    entries: list[SpecEntry] = []
    for index, item in enumerate(spec):
        field_name = f"spec[{index}]"
        if isinstance(item, SpecEntry):
            entries.append(item)
        elif isinstance(item, tuple):
            if len(item) != 2:
                raise ValueError(f"{field_name} must be a key name or a (key, default) pair, got {item!r}")
            key, default = item
            entries.append(SpecEntry(_coerce_key(key, field_name=field_name), default))
        else:
            entries.append(SpecEntry(_coerce_key(item, field_name=field_name)))
    return tuple(entries)


def _coerce_key(raw: Any, *, field_name: str) -> str:
    """Return ``raw`` if it is a usable keyword name."""

    if not isinstance(raw, str):
        raise ValueError(f"{field_name} key must be a string, got {raw!r}")
    return raw


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
]
