"""Per-call options for keyword checks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class CheckOptions:
    """Options accepted by the keyword checker.

    Parameters
    ----------
    ignore_errors : bool, optional
        Use lenient matching: missing keys resolve to their default (or
        ``None``) and unexpected keys are dropped.
    """

    ignore_errors: bool = False


def check_options_from_config(options_cfg: Mapping[str, Any]) -> CheckOptions:
    """Parse an options mapping into :class:`CheckOptions`.

    Parameters
    ----------
    options_cfg : Mapping[str, Any]
        Mapping read for the key ``ignore_errors``. Any truthy value enables
        lenient matching; other keys are ignored.

    Returns
    -------
    CheckOptions
        Parsed options.

    Raises
    ------
    ValueError
        If ``options_cfg`` is not a mapping.
    """

    if not isinstance(options_cfg, Mapping):
        raise ValueError("options must be a mapping")
    return CheckOptions(ignore_errors=bool(options_cfg.get("ignore_errors", False)))


def coerce_check_options(options: CheckOptions | Mapping[str, Any] | None) -> CheckOptions:
    """Return :class:`CheckOptions` for ``None``, a dataclass or a mapping."""

    if options is None:
        return CheckOptions()
    if isinstance(options, CheckOptions):
        return options
    return check_options_from_config(options)


__all__ = ["CheckOptions", "check_options_from_config", "coerce_check_options"]
