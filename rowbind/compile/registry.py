"""Compiler registry (Open/Closed Principle).

``CompilerFactory`` maps dialect target names to
:class:`~rowbind.compile.base.SQLCompiler` implementations, so supporting a
new driver's placeholder style needs no change to the builder or mapper.

Usage::

    from rowbind.compile.registry import CompilerFactory

    @CompilerFactory.register("asyncpg")
    class DollarCompiler(PostgresCompiler):
        def param_placeholder(self, position: int) -> str:
            return f"${position}"

    config = MapperConfig.for_table("messages", target="asyncpg")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from rowbind.compile.base import SQLCompiler
from rowbind.errors import CompilationError


class CompilerFactory:
    """Registry mapping dialect target names to :class:`SQLCompiler` classes.

    Callers register a compiler class once; :class:`~rowbind.mapper.TableMap`
    creates instances on demand via :meth:`create`.
    """

    _compilers: ClassVar[dict[str, type[SQLCompiler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLCompiler]], type[SQLCompiler]]:
        """Decorator that registers a compiler class under ``name``.

        Args:
            name: The dialect target name (e.g. ``"postgres"``).

        Returns:
            A decorator that registers and returns the compiler class.
        """

        def decorator(compiler_cls: type[SQLCompiler]) -> type[SQLCompiler]:
            cls._compilers[name] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, compiler_cls: type[SQLCompiler]) -> None:
        """Register a compiler class without using the decorator form."""
        cls._compilers[name] = compiler_cls

    @classmethod
    def unregister(cls, name: str) -> None:
        cls._compilers.pop(name, None)

    @classmethod
    def create(cls, name: str) -> SQLCompiler:
        """Instantiate the compiler registered for ``name``.

        Args:
            name: The dialect target name.

        Returns:
            A fresh :class:`SQLCompiler` instance.

        Raises:
            CompilationError: If no compiler is registered for ``name``.
        """
        compiler_cls = cls._compilers.get(name)
        if compiler_cls is None:
            registered = sorted(cls._compilers)
            raise CompilationError(
                f"Unsupported dialect target: '{name}'. Registered targets: {registered}."
            )
        return compiler_cls()

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect target names."""
        return sorted(cls._compilers)
