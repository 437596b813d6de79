"""Test fixtures: sample DDL and the ``Message`` record used throughout."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Literal

from rowbind import MapperConfig, TableMap, from_int, from_string

_FIXTURES_DIR = Path(__file__).parent

TABLE_NAME = "messages"


def load_ddl(target: Literal["sqlite", "postgres"] = "sqlite") -> str:
    """Return the sample DDL SQL string for the given backend.

    Args:
        target: ``'sqlite'`` (default) or ``'postgres'``.

    Returns:
        DDL string ready to execute against the target backend.
    """
    filename = f"ddl_{target}.sql"
    return (_FIXTURES_DIR / filename).read_text()


@dataclass
class Message:
    """A record with every field nullable."""

    id: int | None = None
    title: str | None = None
    body: str | None = None

    def to_table_map(self, conn: Any, **overrides: Any) -> TableMap:
        tm = TableMap(conn, MapperConfig.for_table(TABLE_NAME, **overrides))
        tm.int_col("id", from_int(self.id))
        tm.string_col("title", from_string(self.title))
        tm.string_col("body", from_string(self.body))
        return tm
