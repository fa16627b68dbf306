"""Parsing of documented default values according to the field kind."""

from __future__ import annotations

import json
import math
from typing import Any

from .type_kinds import (
    FLOAT_KINDS,
    SIGNED_INT_KINDS,
    UNSIGNED_INT_KINDS,
    Kind,
    kind_of,
    unwrap_optional,
)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_UINT64_MAX = 2**64 - 1
_TRUE_LITERALS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_LITERALS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_default(field_type: Any, raw: Any) -> Any:
    """Convert a documented default to the field's kind.

    Non-string values are returned unchanged. Raises ValueError when a string
    cannot be parsed for the kind, or when the value is not a finite number.
    """
    if isinstance(raw, float) and not math.isfinite(raw):
        raise ValueError(f"value out of range: {raw}")
    if not isinstance(raw, str):
        return raw
    kind = kind_of(unwrap_optional(field_type))
    if kind in SIGNED_INT_KINDS:
        value = int(raw, 10)
        if not _INT64_MIN <= value <= _INT64_MAX:
            raise ValueError(f"value out of range: {raw}")
        return value
    if kind in UNSIGNED_INT_KINDS:
        value = int(raw, 10)
        if not 0 <= value <= _UINT64_MAX:
            raise ValueError(f"value out of range: {raw}")
        return value
    if kind in FLOAT_KINDS:
        return _finite_float(raw)
    if kind is Kind.STRING:
        return raw
    if kind is Kind.BOOL:
        if raw in _TRUE_LITERALS:
            return True
        if raw in _FALSE_LITERALS:
            return False
        raise ValueError(f"invalid boolean: {raw}")
    try:
        return json.loads(raw, parse_float=_finite_float, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid literal: {raw}") from exc


def _finite_float(raw: str) -> float:
    number = float(raw)
    if not math.isfinite(number):
        raise ValueError(f"value out of range: {raw}")
    return number


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-finite number: {name}")

