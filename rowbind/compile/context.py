"""Compilation context value object.

Packages the ``(compiler, config)`` pair that every render call needs into
a single immutable object.
"""
from __future__ import annotations

from dataclasses import dataclass

from rowbind.compile.base import SQLCompiler
from rowbind.schema.config import MapperConfig


@dataclass(frozen=True)
class CompilationContext:
    """Immutable context for rendering statements against one table.

    Attributes:
        compiler: Dialect-specific SQL compiler instance.
        config: Table name and NULL / empty-filter handling.
    """

    compiler: SQLCompiler
    config: MapperConfig

    @property
    def table_sql(self) -> str:
        return self.compiler.quote_identifier(self.config.table)
