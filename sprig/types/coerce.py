"""Coercions between sprig values and Python scalars.

Builtins never inspect value tags themselves; they ask for the scalar they
need and let these helpers either convert or raise UnexpectedType:

    value      -> float        -> str                -> bool
    Num(n)        n               decimal text          n != 0.0
    Str(s)        float(s)        s                     "true"/"1", "false"/"0"/""
    Bool(b)       1.0 / 0.0       "true" / "false"      b

Lists, identifiers, lambdas and builtins coerce to nothing.
"""

from __future__ import annotations

import math

import numpy as np

from sprig import Expression
from sprig.types.errors import UnexpectedType

_TRUE_STRINGS = ("true", "1")
_FALSE_STRINGS = ("false", "0", "")


def format_number(n: float) -> str:
    """Shortest round-tripping decimal text, never in exponent notation (6.0 -> "6")."""
    if math.isnan(n):
        return "NaN"
    return np.format_float_positional(np.float64(n), trim="-")


def parse_number(text: str) -> float:
    """Parse float text, rejecting Python-only spellings such as digit separators."""
    if "_" in text or not text.isascii():
        raise ValueError(f"could not convert string to float: {text!r}")
    return float(text)


def to_number(value: Expression) -> float:
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return parse_number(value.strip())
        except ValueError:
            raise UnexpectedType()
    raise UnexpectedType()


def to_string(value: Expression) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(float(value))
    if isinstance(value, str):
        return value
    raise UnexpectedType()


def to_bool(value: Expression) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0.0
    if isinstance(value, str):
        text = value.strip()
        if text in _TRUE_STRINGS:
            return True
        if text in _FALSE_STRINGS:
            return False
    raise UnexpectedType()
