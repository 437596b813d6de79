"""Utilities for building a TableSchema from external sources.

SQLAlchemy converter
--------------------
:func:`table_schema_from_sqlalchemy` reflects one table of a live database
engine and returns a :class:`~rowbind.schema.table.TableSchema`.

Install the optional dependency before using this module::

    pip install "rowbind[sqlalchemy]"

Example::

    from sqlalchemy import create_engine
    from rowbind.schema.converters import table_schema_from_sqlalchemy

    engine = create_engine("sqlite:///messages.db")
    schema = table_schema_from_sqlalchemy(engine, "messages")
    tm = TableMap(conn, MapperConfig.for_table("messages"), schema=schema)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rowbind.errors import SchemaError
from rowbind.schema.table import ColumnInfo, TableSchema

if TYPE_CHECKING:
    from sqlalchemy import Engine, Table


def table_schema_from_sqlalchemy(
    engine: Engine,
    table_name: str,
    *,
    schema: str | None = None,
) -> TableSchema:
    """Build a :class:`TableSchema` by reflecting ``table_name``.

    Args:
        engine: A connected :class:`sqlalchemy.engine.Engine` instance.
        table_name: The table to reflect.
        schema: Optional database schema name (e.g. ``"public"`` for
            PostgreSQL).  Passed directly to
            :meth:`sqlalchemy.schema.MetaData.reflect`.

    Returns:
        A populated :class:`TableSchema`.

    Raises:
        ImportError: If ``sqlalchemy`` is not installed.
        SchemaError: If the table does not exist.
    """
    try:
        from sqlalchemy import MetaData as _MetaData
        from sqlalchemy import inspect as _inspect
    except ImportError as exc:
        raise ImportError(
            "SQLAlchemy is required for table_schema_from_sqlalchemy(). "
            'Install it with: pip install "rowbind[sqlalchemy]"'
        ) from exc

    metadata = _MetaData()
    with engine.connect() as conn:
        if not _inspect(conn).has_table(table_name, schema=schema):
            raise SchemaError(f"Table '{table_name}' does not exist.", table=table_name)
        metadata.reflect(bind=conn, only=[table_name], schema=schema)

    key = f"{schema}.{table_name}" if schema else table_name
    return _table_to_schema(metadata.tables[key])


def _table_to_schema(table: Table) -> TableSchema:
    """Convert a reflected :class:`~sqlalchemy.schema.Table`."""
    return TableSchema(
        name=table.name,
        columns=[
            ColumnInfo(
                name=col.name,
                type=str(col.type),
                # Unset nullability (None) counts as nullable.
                nullable=col.nullable is not False,
            )
            for col in table.columns
        ],
    )
