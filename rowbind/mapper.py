"""The table map: bindings for one record, tied to one table and connection.

A :class:`TableMap` is built fresh for each record, populated by the caller,
consumed by one :meth:`~TableMap.create` or :meth:`~TableMap.find` call, and
discarded::

    @dataclass
    class Message:
        id: int | None = None
        title: str | None = None
        body: str | None = None

        def to_table_map(self, conn) -> TableMap:
            tm = TableMap(conn, MapperConfig.for_table("messages"))
            tm.int_col("id", from_int(self.id))
            tm.string_col("title", from_string(self.title))
            tm.string_col("body", from_string(self.body))
            return tm

    Message(id=1, title="My Title", body="My Body").to_table_map(conn).create()

    found = []
    Message(id=1).to_table_map(conn).find(
        lambda row: found.append(Message(*row))
    )

Any DB-API 2.0 connection works; placeholders follow ``config.target``.
"""
from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rowbind.compile.base import CompiledSQL, SQLCompiler
from rowbind.compile.builder import StatementBuilder
from rowbind.compile.context import CompilationContext
from rowbind.compile.registry import CompilerFactory
from rowbind.errors import ExecutionError, SchemaError
from rowbind.schema.binding import BindingSet, ColumnBinding, validated
from rowbind.schema.config import MapperConfig
from rowbind.schema.table import TableSchema
from rowbind.schema.validators import Validator, is_float, is_integer, is_timestamp
from rowbind.schema.values import Accessor

logger = logging.getLogger(__name__)

#: Receives one driver row per call; raising aborts :meth:`TableMap.find`.
RowCallback = Callable[[Any], None]


class Cursor(Protocol):
    rowcount: int

    def execute(self, sql: str, params: Sequence[Any], /) -> Any: ...

    def fetchone(self) -> Any: ...

    def close(self) -> None: ...


class Connection(Protocol):
    def cursor(self) -> Cursor: ...

    def commit(self) -> None: ...


@dataclass(frozen=True)
class WriteResult:
    """Outcome of :meth:`TableMap.create`.

    Attributes:
        rowcount: Rows affected, as reported by the driver (``-1`` if unknown).
        lastrowid: Driver-reported id of the inserted row, if any.
    """

    rowcount: int
    lastrowid: Any = None


class TableMap:
    """Ordered column bindings for one record plus the statements built from them.

    Args:
        connection: A DB-API 2.0 connection, owned by the caller.
        config: Table name, dialect target and NULL handling.
        schema: Optional table description; bindings to columns it does
            not declare raise :class:`~rowbind.errors.SchemaError`.
        compiler: Explicit compiler, overriding ``config.target``.

    Raises:
        CompilationError: If ``config.target`` is not registered.
        SchemaError: If ``schema`` describes a different table.
    """

    def __init__(
        self,
        connection: Connection,
        config: MapperConfig,
        *,
        schema: TableSchema | None = None,
        compiler: SQLCompiler | None = None,
    ) -> None:
        if schema is not None and schema.name != config.table:
            raise SchemaError(
                f"Schema describes table '{schema.name}' but the mapper targets "
                f"'{config.table}'.",
                table=config.table,
            )
        self._connection = connection
        self._config = config
        self._schema = schema
        self._bindings = BindingSet()
        self._ctx = CompilationContext(
            compiler=compiler or CompilerFactory.create(config.target),
            config=config,
        )

    @property
    def config(self) -> MapperConfig:
        return self._config

    @property
    def columns(self) -> list[str]:
        """Bound column names in binding order."""
        return self._bindings.names

    # ------------------------------------------------------------------
    # Binding
    # ------------------------------------------------------------------

    def bind(self, name: str, accessor: Accessor) -> None:
        """Bind ``name`` to ``accessor``.

        Re-binding an existing name replaces its accessor and keeps its
        original position.

        Raises:
            SchemaError: If a schema is attached and lacks ``name``.
        """
        if self._schema is not None:
            self._schema.check_column(name)
        self._bindings.add(ColumnBinding(name=name, accessor=accessor))

    def bind_typed(self, name: str, accessor: Accessor, validator: Validator) -> None:
        """Bind ``name`` to ``accessor`` checked by ``validator``.

        With ``strict_validation`` a rejected value raises
        :class:`~rowbind.errors.BindingValidationError` when the statement
        is rendered; otherwise it is bound as absent.
        """
        self.bind(
            name,
            validated(name, accessor, validator, strict=self._config.strict_validation),
        )

    def string_col(self, name: str, accessor: Accessor) -> None:
        self.bind(name, accessor)

    def int_col(self, name: str, accessor: Accessor) -> None:
        self.bind_typed(name, accessor, is_integer)

    def float_col(self, name: str, accessor: Accessor) -> None:
        self.bind_typed(name, accessor, is_float)

    def timestamp_col(self, name: str, accessor: Accessor) -> None:
        self.bind_typed(name, accessor, is_timestamp)

    def as_dict(self) -> dict[str, str | None]:
        """Evaluate every binding; absent values map to ``None``."""
        return {name: value.as_param() for name, value in self._bindings.evaluate()}

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def render_insert(self) -> CompiledSQL:
        return StatementBuilder(self._ctx, self._bindings).render_insert()

    def render_select(self) -> CompiledSQL:
        return StatementBuilder(self._ctx, self._bindings).render_select()

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    def execute(self, sql: str, params: Sequence[str | None] = ()) -> Cursor:
        """Execute ``sql`` on a fresh cursor and return the cursor.

        The caller owns the returned cursor and must close it.

        Raises:
            ExecutionError: If the driver rejects the statement.  The cursor
                is closed before raising.
        """
        cursor = self._connection.cursor()
        try:
            cursor.execute(sql, list(params))
        except Exception as exc:
            cursor.close()
            raise ExecutionError(
                f"Statement failed on table '{self._config.table}': {exc}", sql=sql
            ) from exc
        return cursor

    def create(self) -> WriteResult:
        """Insert the bound record.

        Commits afterwards when ``config.commit_on_create`` is set.

        Raises:
            BindingValidationError: If a strict typed column rejects its value.
            CompilationError: If nothing is bound.
            ExecutionError: If the insert or the commit fails.
        """
        compiled = self.render_insert()
        logger.debug(
            "Inserting into %s: %s", self._config.table, dict(zip(compiled.columns, compiled.params))
        )
        cursor = self.execute(compiled.sql, compiled.params)
        try:
            if self._config.commit_on_create:
                self._commit(compiled.sql)
            return WriteResult(
                rowcount=cursor.rowcount,
                lastrowid=getattr(cursor, "lastrowid", None),
            )
        finally:
            cursor.close()

    def find(self, on_row: RowCallback) -> int:
        """Select rows matching the present bindings and feed them to ``on_row``.

        ``on_row`` is called once per row, in cursor order.  An exception
        raised by it stops iteration and propagates unchanged.  The cursor
        is closed on every exit path.

        Args:
            on_row: Receives each driver row (whatever the driver's row type
                is, columns in binding order).

        Returns:
            The number of rows passed to ``on_row``.

        Raises:
            EmptyFilterError: If no binding is present and
                ``config.empty_filter`` is ``"error"``.
            ExecutionError: If the query or a fetch fails.
        """
        compiled = self.render_select()
        cursor = self.execute(compiled.sql, compiled.params)
        count = 0
        try:
            for row in _fetch_rows(cursor, compiled.sql):
                on_row(row)
                count += 1
        finally:
            cursor.close()
        logger.debug("Delivered %d row(s) from %s", count, self._config.table)
        return count

    def _commit(self, sql: str) -> None:
        try:
            self._connection.commit()
        except Exception as exc:
            raise ExecutionError(f"Commit failed on table '{self._config.table}': {exc}", sql=sql) from exc

    def __repr__(self) -> str:
        return f"TableMap(table={self._config.table!r}, columns={self.columns!r})"


def _fetch_rows(cursor: Cursor, sql: str) -> Iterator[Any]:
    """Yield rows one at a time, wrapping driver fetch failures."""
    while True:
        try:
            row = cursor.fetchone()
        except Exception as exc:
            raise ExecutionError(f"Fetching rows failed: {exc}", sql=sql) from exc
        if row is None:
            return
        yield row
