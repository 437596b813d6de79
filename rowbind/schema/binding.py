"""Ordered column bindings.

A :class:`BindingSet` is the ordered ``name -> accessor`` collection for one
record.  Insertion order fixes the SQL column order; re-binding a name
replaces its accessor in place (last write wins).  Bindings are never
removed.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from rowbind.errors import BindingValidationError
from rowbind.schema.validators import Validator, validator_name
from rowbind.schema.values import ABSENT, Accessor, NullableValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnBinding:
    """A column name paired with the accessor that yields its value.

    Attributes:
        name: Column name in the target table.
        accessor: Zero-argument callable producing the current value.
    """

    name: str
    accessor: Accessor

    def value(self) -> NullableValue:
        return self.accessor()


class BindingSet:
    """Append-only, insertion-ordered collection of :class:`ColumnBinding`."""

    def __init__(self) -> None:
        self._bindings: dict[str, ColumnBinding] = {}

    def add(self, binding: ColumnBinding) -> None:
        self._bindings[binding.name] = binding

    def __iter__(self) -> Iterator[ColumnBinding]:
        return iter(self._bindings.values())

    def __len__(self) -> int:
        return len(self._bindings)

    def __contains__(self, name: object) -> bool:
        return name in self._bindings

    @property
    def names(self) -> list[str]:
        """Returns all bound column names in binding order."""
        return list(self._bindings)

    def evaluate(self) -> list[tuple[str, NullableValue]]:
        """Evaluate every accessor once, in binding order."""
        return [(b.name, b.value()) for b in self]


def validated(
    column: str,
    accessor: Accessor,
    validator: Validator,
    strict: bool = True,
) -> Accessor:
    """Wrap ``accessor`` so its text is checked by ``validator`` on evaluation.

    Args:
        column: Column name, used in errors and log records.
        accessor: The accessor to wrap.
        validator: Predicate over the present text.
        strict: When ``True`` a rejected value raises
            :class:`~rowbind.errors.BindingValidationError`; when ``False``
            it is treated as absent.

    Returns:
        The wrapped accessor.
    """

    def checked() -> NullableValue:
        value = accessor()
        if not value.present or validator(value.text):
            return value
        name = validator_name(validator)
        if strict:
            raise BindingValidationError(column, value.text, name)
        logger.warning(
            "Column %r failed %s validation; binding NULL instead", column, name
        )
        return ABSENT

    return checked
