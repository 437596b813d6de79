"""Text validators used by typed column bindings.

A validator receives the text of a present value and returns whether the
target column type can accept it.  Absent values never reach a validator.

Numeric validators share one textual rule: an optional sign, ASCII digits,
no whitespace, no underscores, no special values such as ``nan``.
"""
from __future__ import annotations

import math
import re
from collections.abc import Callable
from datetime import datetime

#: ``(text) -> accepted``
Validator = Callable[[str], bool]

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_integer(text: str) -> bool:
    """Accept a signed 64-bit integer written as sign plus ASCII digits.

    Surrounding whitespace, underscores and decimal points are rejected,
    which is stricter than ``int()``.  Out-of-range values are rejected too.
    """
    if _INTEGER_RE.fullmatch(text) is None:
        return False
    return INT64_MIN <= int(text) <= INT64_MAX


def is_float(text: str) -> bool:
    """Accept decimal or exponent notation that parses to a finite float."""
    if _FLOAT_RE.fullmatch(text) is None:
        return False
    return math.isfinite(float(text))


def is_timestamp(text: str) -> bool:
    """Accept ISO-8601 dates and datetimes."""
    try:
        datetime.fromisoformat(text)
    except ValueError:
        return False
    return True


def validator_name(validator: Validator) -> str:
    return getattr(validator, "__name__", type(validator).__name__)
