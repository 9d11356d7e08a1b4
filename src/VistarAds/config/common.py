from __future__ import annotations

"""Typed accessors over flat string parameter maps.

Every accessor looks up ``key`` in ``params`` and converts the raw string to
the requested type. Missing keys and malformed values both resolve to the
caller-supplied default, so none of these functions raise.
"""

import math
from typing import Mapping, Sequence

from VistarAds.utils.log import log

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_LITERALS = frozenset({"1", "t", "true", "yes", "y", "on"})
_FALSE_LITERALS = frozenset({"0", "f", "false", "no", "n", "off"})


def parse_str(params: Mapping[str, str], key: str, default: str) -> str:
    """Return the raw value for ``key`` or ``default`` when absent."""
    return params.get(key, default)


def parse_array(params: Mapping[str, str], key: str, default: Sequence[str]) -> Sequence[str]:
    """Parse a comma separated list.

    Pieces are stripped and blank pieces are dropped. A value made only of
    commas and whitespace counts as absent.

    Args:
        params: Parameter map.
        key: Dotted parameter key.
        default: Returned when the key is absent or has no usable items.

    Returns:
        Items in their original order, or ``default``.
    """
    value = params.get(key)
    if value is None:
        return default
    items = [piece.strip() for piece in value.split(",")]
    items = [item for item in items if item]
    if not items:
        log.debug("%s has no items, using default %s", key, default)
        return default
    return items


def parse_int(params: Mapping[str, str], key: str, default: int) -> int:
    """Parse a base-10 signed 64-bit integer, falling back to ``default``."""
    value = params.get(key)
    if value is None:
        return default
    text = value.strip()
    # int() also accepts "1_000"; a plain decimal literal is required here
    digits = text[1:] if text[:1] in "+-" else text
    if not digits.isdigit() or not digits.isascii():
        log.debug("%s=%r is not an integer, using default %s", key, value, default)
        return default
    parsed = int(text)
    if parsed < _INT64_MIN or parsed > _INT64_MAX:
        log.debug("%s=%r is out of range, using default %s", key, value, default)
        return default
    return parsed


def parse_float(params: Mapping[str, str], key: str, default: float) -> float:
    """Parse a finite float, falling back to ``default``.

    ``nan``, ``inf`` and values that overflow to infinity are rejected since
    they cannot be sent in a JSON request body.
    """
    value = params.get(key)
    if value is None:
        return default
    if "_" in value:
        log.debug("%s=%r is not a number, using default %s", key, value, default)
        return default
    try:
        parsed = float(value)
    except ValueError:
        log.debug("%s=%r is not a number, using default %s", key, value, default)
        return default
    if not math.isfinite(parsed):
        log.debug("%s=%r is not finite, using default %s", key, value, default)
        return default
    return parsed


def parse_bool(params: Mapping[str, str], key: str, default: bool) -> bool:
    """Parse a boolean literal.

    Unrecognized strings return ``default`` rather than ``False``.
    """
    value = params.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_LITERALS:
        return True
    if normalized in _FALSE_LITERALS:
        return False
    log.debug("%s=%r is not a boolean, using default %s", key, value, default)
    return default
