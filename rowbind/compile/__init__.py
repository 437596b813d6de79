"""rowbind compilation layer: binding set → parameterized SQL."""
from rowbind.compile.base import CompiledSQL, SQLCompiler
from rowbind.compile.builder import StatementBuilder
from rowbind.compile.mysql import MySQLCompiler
from rowbind.compile.postgres import PostgresCompiler
from rowbind.compile.registry import CompilerFactory
from rowbind.compile.sqlite import SQLiteCompiler

__all__ = [
    "CompiledSQL",
    "CompilerFactory",
    "SQLCompiler",
    "StatementBuilder",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
]
