"""Binding set → INSERT / SELECT rendering.

``StatementBuilder`` evaluates each accessor exactly once per render call,
so the rendered column list and the params always agree.  Nothing is cached
between calls.
"""

from __future__ import annotations

import logging

from rowbind.compile.base import CompiledSQL
from rowbind.compile.context import CompilationContext
from rowbind.errors import CompilationError, EmptyFilterError
from rowbind.schema.binding import BindingSet
from rowbind.schema.values import NullableValue

logger = logging.getLogger(__name__)

#: Text bound for absent values under ``null_style="literal"``.
NULL_LITERAL = "NULL"


class StatementBuilder:
    """Renders parameterized statements for one binding set.

    Args:
        ctx: Compiler and mapper configuration.
        bindings: The ordered column bindings to render.
    """

    def __init__(self, ctx: CompilationContext, bindings: BindingSet) -> None:
        self._ctx = ctx
        self._bindings = bindings

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def render_insert(self) -> CompiledSQL:
        """Render ``INSERT INTO t (cols) VALUES (placeholders)``.

        Every bound column is included.  Absent values bind ``None``, or the
        text ``"NULL"`` when the config asks for ``null_style="literal"``.

        Raises:
            CompilationError: If nothing is bound.
        """
        values = self._evaluate("INSERT")
        columns = [name for name, _ in values]
        params = [self._insert_param(v) for _, v in values]
        compiler = self._ctx.compiler

        sql = (
            f"INSERT INTO {self._ctx.table_sql} ({compiler.column_list(columns)}) "
            f"VALUES ({', '.join(compiler.placeholder_list(len(columns)))})"
        )
        return self._compiled(sql, params, columns)

    def render_select(self) -> CompiledSQL:
        """Render ``SELECT cols FROM t WHERE c1 = p1 AND ...``.

        All bound columns are selected; only present ones become equality
        predicates, so an absent field matches any value.

        Raises:
            CompilationError: If nothing is bound.
            EmptyFilterError: If no column is present and the config's
                ``empty_filter`` is ``"error"``.
        """
        values = self._evaluate("SELECT")
        columns = [name for name, _ in values]
        filters = [(name, v.text) for name, v in values if v.present]
        compiler = self._ctx.compiler

        sql = f"SELECT {compiler.column_list(columns)} FROM {self._ctx.table_sql}"
        if not filters:
            if self._ctx.config.empty_filter == "error":
                raise EmptyFilterError(self._ctx.config.table)
            return self._compiled(sql, [], columns)

        placeholders = compiler.placeholder_list(len(filters))
        predicates = [
            f"{compiler.quote_identifier(name)} = {ph}"
            for (name, _), ph in zip(filters, placeholders)
        ]
        sql += f" WHERE {' AND '.join(predicates)}"
        return self._compiled(sql, [text for _, text in filters], columns)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _evaluate(self, statement: str) -> list[tuple[str, NullableValue]]:
        if not len(self._bindings):
            raise CompilationError(
                f"No columns bound for table '{self._ctx.config.table}'.",
                statement=statement,
            )
        return self._bindings.evaluate()

    def _insert_param(self, value: NullableValue) -> str | None:
        if value.present:
            return value.text
        if self._ctx.config.null_style == "literal":
            return NULL_LITERAL
        return None

    def _compiled(self, sql: str, params: list[str | None], columns: list[str]) -> CompiledSQL:
        logger.debug("Rendered %s with %d param(s)", sql, len(params))
        return CompiledSQL(
            sql=sql,
            params=params,
            dialect=self._ctx.compiler.dialect_name,
            columns=columns,
        )
