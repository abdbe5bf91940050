"""Tests for keyword-check options parsing."""

from __future__ import annotations

import pytest

from kwds_check import CheckOptions, check_options_from_config
from kwds_check.options import coerce_check_options


def test_check_options_from_config_defaults_to_strict() -> None:
    """An empty mapping should produce strict options."""

    assert check_options_from_config({}) == CheckOptions(ignore_errors=False)
    assert check_options_from_config({"ignore_errors": True}).ignore_errors is True


def test_check_options_from_config_ignores_unrecognized_keys() -> None:
    """Options other than ``ignore_errors`` should be ignored."""

    assert check_options_from_config({"ignore_errors": False, "strict": True}) == CheckOptions()
    assert check_options_from_config({"trace": True}) == CheckOptions()


def test_check_options_from_config_uses_truthiness_of_flag() -> None:
    """Any truthy ``ignore_errors`` value should select lenient matching."""

    assert check_options_from_config({"ignore_errors": 1}).ignore_errors is True
    assert check_options_from_config({"ignore_errors": "yes"}).ignore_errors is True
    assert check_options_from_config({"ignore_errors": None}).ignore_errors is False
    assert check_options_from_config({"ignore_errors": 0}).ignore_errors is False


def test_check_options_from_config_requires_mapping() -> None:
    """Non-mapping options should be rejected."""

    with pytest.raises(ValueError, match="options must be a mapping"):
        check_options_from_config([("ignore_errors", True)])  # type: ignore[arg-type]


def test_coerce_check_options_accepts_supported_forms() -> None:
    """``None``, dataclasses and mappings should all be accepted."""

    lenient = CheckOptions(ignore_errors=True)

    assert coerce_check_options(None) == CheckOptions()
    assert coerce_check_options(lenient) is lenient
    assert coerce_check_options({"ignore_errors": True}) == lenient
