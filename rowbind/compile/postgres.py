"""PostgreSQL dialect compiler."""

from __future__ import annotations

from rowbind.compile.base import SQLCompiler


class PostgresCompiler(SQLCompiler):
    """Renders PostgreSQL-flavoured parameterized SQL.

    Parameter style: ``%s`` (format) – compatible with ``psycopg2`` and
    ``psycopg`` positional execution.  Drivers using numbered ``$n``
    placeholders need their own compiler registered with
    :class:`~rowbind.compile.registry.CompilerFactory`.
    """

    @property
    def dialect_name(self) -> str:
        return "postgres"

    def param_placeholder(self, position: int) -> str:
        return "%s"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'
