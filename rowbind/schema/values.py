"""Nullable text values and the accessor factories that produce them.

Every bound value travels as text plus a presence flag, regardless of the
source type.  Typing is deferred to the validators in
:mod:`rowbind.schema.validators` and, ultimately, to the database.

Accessors are zero-argument callables evaluated lazily at render time, so a
record field changed after binding is still picked up::

    tm.int_col("id", from_int(message.id))
    tm.string_col("title", from_string(message.title))
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any


@dataclass(frozen=True)
class NullableValue:
    """A column value as text, or absent (SQL NULL).

    Attributes:
        text: The textual value; ``""`` when absent.
        present: ``False`` stands in for SQL NULL.
    """

    text: str = ""
    present: bool = False

    @classmethod
    def of(cls, text: str) -> NullableValue:
        return cls(text=text, present=True)

    def as_param(self) -> str | None:
        """Return the text, or ``None`` when absent."""
        return self.text if self.present else None


#: The shared absent value.
ABSENT = NullableValue()

#: A zero-argument callable producing the current value of a field.
Accessor = Callable[[], NullableValue]


def from_value(value: Any, formatter: Callable[[Any], str] = str) -> Accessor:
    """Return an accessor rendering ``value`` with ``formatter``.

    Args:
        value: Source value; ``None`` means absent.
        formatter: Converts a non-``None`` value to text.

    Returns:
        An accessor closing over ``value``.
    """

    def accessor() -> NullableValue:
        if value is None:
            return ABSENT
        return NullableValue.of(formatter(value))

    return accessor


def from_string(value: str | None) -> Accessor:
    return from_value(value)


def from_int(value: int | None) -> Accessor:
    """Return an accessor rendering ``value`` with ``str``.

    No conversion happens here; pair it with ``int_col`` so a non-integer
    source is caught by the validator rather than truncated.
    """
    return from_value(value)


def from_float(value: float | None) -> Accessor:
    return from_value(value, repr)


def from_datetime(value: datetime | date | None) -> Accessor:
    """Return an accessor rendering a date or datetime as ISO-8601 text."""
    return from_value(value, lambda v: v.isoformat())


def from_getter(getter: Callable[[], Any], formatter: Callable[[Any], str] = str) -> Accessor:
    """Return an accessor that reads its source through ``getter`` on each call.

    Unlike the ``from_*`` factories, which capture the value at bind time,
    this re-reads the field every time the accessor is evaluated.
    """

    def accessor() -> NullableValue:
        return from_value(getter(), formatter)()

    return accessor
