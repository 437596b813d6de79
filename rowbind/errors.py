"""Custom exception hierarchy for rowbind.

All public errors inherit from RowBindError so callers can catch the base
class for any rowbind-specific failure.  Exceptions raised by a caller's
row callback are never wrapped.
"""
from __future__ import annotations


class RowBindError(Exception):
    """Base exception for all rowbind errors."""


class ConfigError(RowBindError):
    """Raised when a MapperConfig cannot be constructed.

    Args:
        message: Human-readable description.
        field: The offending configuration field, when known.
    """

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class BindingValidationError(RowBindError):
    """Raised when a typed column rejects the text its accessor produced.

    Only raised in strict mode; lenient mode turns the value into NULL.

    Args:
        column: The bound column name.
        value: The text that failed validation.
        validator: Name of the validator that rejected it.
    """

    def __init__(self, column: str, value: str, validator: str) -> None:
        super().__init__(
            f"Value {value!r} for column '{column}' failed validation ({validator})."
        )
        self.column = column
        self.value = value
        self.validator = validator


class SchemaError(RowBindError):
    """Raised when a binding or lookup does not match the table schema.

    Args:
        message: Human-readable description.
        table: The target table.
        column: The unknown column name, if a column was at fault.
    """

    def __init__(self, message: str, table: str, column: str | None = None) -> None:
        super().__init__(message)
        self.table = table
        self.column = column


class CompilationError(RowBindError):
    """Raised when a statement cannot be rendered.

    Args:
        message: Human-readable description.
        statement: The statement kind being rendered (``'INSERT'``/``'SELECT'``).
    """

    def __init__(self, message: str, statement: str | None = None) -> None:
        super().__init__(message)
        self.statement = statement


class EmptyFilterError(CompilationError):
    """Raised when a SELECT has no present column to filter on."""

    def __init__(self, table: str) -> None:
        super().__init__(
            f"Cannot render SELECT on '{table}': no bound column has a value. "
            "Set empty_filter='match_all' to select every row.",
            statement="SELECT",
        )
        self.table = table


class ExecutionError(RowBindError):
    """Raised when the database driver fails to execute or fetch.

    The driver exception is chained as ``__cause__``.

    Args:
        message: Human-readable description.
        sql: The SQL text that was being executed.
    """

    def __init__(self, message: str, sql: str) -> None:
        super().__init__(message)
        self.sql = sql
