"""rowbind – explicit record-to-row binding for DB-API connections.

Bind Columns. Don't Reflect Them.

Public API
----------
``TableMap``
    Ordered column bindings for one record; renders and runs INSERT
    (``create``) and equality-filtered SELECT (``find``) statements.

``MapperConfig``
    Table name, dialect target, and NULL / validation behaviour.

Accessors (``from_string``, ``from_int``, ...) turn record fields into
nullable text; validators (``is_integer``, ...) back the typed ``*_col``
binding helpers.

Extensibility
-------------
New placeholder dialects can be registered via::

    from rowbind.compile.registry import CompilerFactory

    @CompilerFactory.register("asyncpg")
    class DollarCompiler(PostgresCompiler):
        def param_placeholder(self, position: int) -> str:
            return f"${position}"

After registration any ``MapperConfig`` with ``target="asyncpg"`` uses it.
"""

from __future__ import annotations

import logging

from rowbind.compile.base import CompiledSQL, SQLCompiler
from rowbind.compile.builder import StatementBuilder
from rowbind.compile.mysql import MySQLCompiler
from rowbind.compile.postgres import PostgresCompiler
from rowbind.compile.registry import CompilerFactory
from rowbind.compile.sqlite import SQLiteCompiler
from rowbind.errors import (
    BindingValidationError,
    CompilationError,
    ConfigError,
    EmptyFilterError,
    ExecutionError,
    RowBindError,
    SchemaError,
)
from rowbind.mapper import TableMap, WriteResult
from rowbind.schema.config import MapperConfig
from rowbind.schema.converters import table_schema_from_sqlalchemy
from rowbind.schema.table import ColumnInfo, TableSchema
from rowbind.schema.validators import is_float, is_integer, is_timestamp
from rowbind.schema.values import (
    ABSENT,
    NullableValue,
    from_datetime,
    from_float,
    from_getter,
    from_int,
    from_string,
    from_value,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# ---------------------------------------------------------------------------
# Register built-in compilers with CompilerFactory
# ---------------------------------------------------------------------------

CompilerFactory.register_class("sqlite", SQLiteCompiler)
CompilerFactory.register_class("postgres", PostgresCompiler)
CompilerFactory.register_class("mysql", MySQLCompiler)

__all__ = [
    # Mapping
    "TableMap",
    "WriteResult",
    "MapperConfig",
    # Values and accessors
    "ABSENT",
    "NullableValue",
    "from_datetime",
    "from_float",
    "from_getter",
    "from_int",
    "from_string",
    "from_value",
    # Validators
    "is_float",
    "is_integer",
    "is_timestamp",
    # Table schema
    "ColumnInfo",
    "TableSchema",
    "table_schema_from_sqlalchemy",
    # Compilation
    "CompiledSQL",
    "CompilerFactory",
    "SQLCompiler",
    "StatementBuilder",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
    # Errors
    "RowBindError",
    "ConfigError",
    "BindingValidationError",
    "SchemaError",
    "CompilationError",
    "EmptyFilterError",
    "ExecutionError",
]
