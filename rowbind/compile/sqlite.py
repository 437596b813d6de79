"""SQLite dialect compiler."""
from __future__ import annotations

from rowbind.compile.base import SQLCompiler


class SQLiteCompiler(SQLCompiler):
    """Renders SQLite-flavoured parameterized SQL.

    Parameter style: ``?`` (qmark) – compatible with Python's built-in
    ``sqlite3`` positional execution (``cursor.execute(sql, list)``).
    """

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def param_placeholder(self, position: int) -> str:
        return "?"

    def quote_identifier(self, name: str) -> str:
        escaped = name.replace('"', '""')
        return f'"{escaped}"'
