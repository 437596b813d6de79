"""Compiler abstractions: CompiledSQL and the SQLCompiler ABC.

The Template Method pattern (GoF) is used:
- ``SQLCompiler`` defines the dialect-specific steps (placeholder style,
  identifier quoting) plus shared list rendering.
- ``SQLiteCompiler``, ``PostgresCompiler`` and ``MySQLCompiler`` override the
  dialect-specific steps.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class CompiledSQL:
    """A rendered statement ready for ``cursor.execute(sql, params)``.

    Attributes:
        sql: The SQL string with positional placeholders.
        params: One value per placeholder, in order.  ``None`` binds SQL NULL.
        dialect: The target dialect the placeholders were rendered for.
        columns: Column names in the order they appear in the statement's
            column list.
    """

    sql: str
    params: list[str | None]
    dialect: str
    columns: list[str] = field(default_factory=list)


class SQLCompiler(ABC):
    """Abstract base for dialect-specific SQL compilers.

    Subclasses implement the dialect-specific methods; the
    :class:`~rowbind.compile.builder.StatementBuilder` uses this interface
    via the Strategy / Template Method patterns.
    """

    @abstractmethod
    def param_placeholder(self, position: int) -> str:
        """Return the SQL placeholder for a positional parameter.

        Args:
            position: 1-based parameter position, for numbered styles
                such as ``$1``.  Unnumbered styles ignore it.

        Returns:
            Dialect-specific placeholder string.
        """

    @abstractmethod
    def quote_identifier(self, name: str) -> str:
        """Return a properly-quoted SQL identifier.

        Args:
            name: Unquoted identifier (table or column name).

        Returns:
            Quoted identifier.
        """

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Return the canonical dialect name."""

    def column_list(self, names: Iterable[str]) -> str:
        return ", ".join(self.quote_identifier(n) for n in names)

    def placeholder_list(self, count: int, start: int = 1) -> list[str]:
        return [self.param_placeholder(i) for i in range(start, start + count)]
