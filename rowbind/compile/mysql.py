"""MySQL dialect compiler."""

from __future__ import annotations

from rowbind.compile.base import SQLCompiler


class MySQLCompiler(SQLCompiler):
    """Renders MySQL-flavoured parameterized SQL.

    Parameter style: ``%s`` (format) – compatible with ``PyMySQL`` and
    ``mysql-connector-python`` positional execution.

    Identifiers are quoted with backticks (`` ` ``) rather than double-quotes.
    """

    @property
    def dialect_name(self) -> str:
        return "mysql"

    def param_placeholder(self, position: int) -> str:
        return "%s"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace("`", "``")
        return f"`{escaped}`"
