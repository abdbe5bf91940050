"""Tests for first-occurrence keyword-list helpers."""

from __future__ import annotations

from kwds_check.core import fetch_first, format_keyword_list, get_first, pop_first


def test_fetch_first_reports_presence_and_value() -> None:
    """Lookup should distinguish a stored ``None`` from absence."""

    pairs = [("a", None), ("b", 2)]

    assert fetch_first(pairs, "a") == (True, None)
    assert fetch_first(pairs, "c") == (False, None)


def test_get_first_returns_first_occurrence_or_default() -> None:
    """Lookup should use scan order and fall back to the default."""

    pairs = [("a", 1), ("b", 2), ("a", 3)]

    assert get_first(pairs, "a") == 1
    assert get_first(pairs, "z") is None
    assert get_first(pairs, "z", 0) == 0


def test_pop_first_removes_only_one_occurrence() -> None:
    """Removal should drop the first match and keep the rest in order."""

    pairs = [("a", 1), ("b", 2), ("a", 3)]

    found, value, rest = pop_first(pairs, "a")

    assert found is True
    assert value == 1
    assert rest == [("b", 2), ("a", 3)]
    assert pairs == [("a", 1), ("b", 2), ("a", 3)]


def test_pop_first_missing_key_returns_copy() -> None:
    """Removing an absent key should leave the pairs unchanged."""

    pairs = (("a", 1),)

    found, value, rest = pop_first(pairs, "b")

    assert (found, value) == (False, None)
    assert rest == [("a", 1)]


def test_format_keyword_list_renders_pairs_in_order() -> None:
    """Rendering should list ``key: repr(value)`` pairs in brackets."""

    assert format_keyword_list([]) == "[]"
    assert format_keyword_list([("b", 1)]) == "[b: 1]"
    assert format_keyword_list([("z", "x"), ("a", [1, 2])]) == "[z: 'x', a: [1, 2]]"
