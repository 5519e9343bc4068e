"""Strict text-to-value parsers, one per coercion target.

Every parser takes a present raw value and either returns the typed value
or raises ``ValueError``. None of them fall back to a default, round,
truncate, or strip surrounding whitespace.

INVARIANT: parsers never see an absent value. The accessor short-circuits
absent input to ``None`` before dispatching here.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

INT_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

BOOL_LITERALS: dict[str, bool] = {
    "true": True,
    "false": False,
}


def parse_int(raw: str) -> int:
    """Parse a strict integer literal: optional sign, then ASCII digits only.

    Python's ``int()`` alone would accept ``" 12 "``, ``"1_000"`` and
    non-ASCII digits, so the text is matched first.
    """
    if INT_PATTERN.fullmatch(raw) is None:
        msg = f"not an integer literal: {raw!r}"
        raise ValueError(msg)
    return int(raw)


def parse_float(raw: str) -> float:
    """Parse a decimal real-number literal with an optional exponent.

    ``nan``, ``inf`` and their spellings are rejected, and so is a literal
    too large to represent, which ``float()`` would turn into infinity.
    """
    if FLOAT_PATTERN.fullmatch(raw) is None:
        msg = f"not a numeric literal: {raw!r}"
        raise ValueError(msg)
    value = float(raw)
    if math.isinf(value):
        msg = f"out of range for a float: {raw!r}"
        raise ValueError(msg)
    return value


def parse_bool(raw: str) -> bool:
    """Accept exactly ``"true"`` or ``"false"`` (case-sensitive)."""
    try:
        return BOOL_LITERALS[raw]
    except KeyError:
        msg = f"expected 'true' or 'false', got {raw!r}"
        raise ValueError(msg) from None


def _reject_constant(name: str) -> Any:
    msg = f"non-standard JSON constant: {name}"
    raise ValueError(msg)


def parse_json(raw: str) -> Any:
    """Parse RFC 8259 JSON. ``NaN`` and ``Infinity`` are not JSON and fail.

    ``json.JSONDecodeError`` is a ``ValueError`` subclass, so callers only
    need to handle one exception type. Nesting deep enough to exhaust the
    decoder's recursion limit is reported the same way.
    """
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except RecursionError as exc:
        msg = "JSON nesting too deep"
        raise ValueError(msg) from exc


def parse_list(raw: str, separator: str = ",") -> list[str]:
    """Split on *separator*, strip each item, and drop empty items."""
    return [item.strip() for item in raw.split(separator) if item.strip()]
