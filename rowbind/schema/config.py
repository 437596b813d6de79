"""Pydantic model for per-table mapper configuration.

The table name and the placeholder dialect are passed explicitly at
construction rather than being module constants::

    config = MapperConfig.for_table("messages", target="postgres")

Behaviour switches
------------------
``null_style``
    ``"bound"`` binds Python ``None`` for absent values so the driver writes
    SQL NULL.  ``"literal"`` binds the text ``"NULL"`` instead, which stores
    a four-character string; kept only for compatibility with data written
    that way.
``empty_filter``
    What :meth:`~rowbind.mapper.TableMap.find` does when no bound column has
    a value: ``"error"`` raises
    :class:`~rowbind.errors.EmptyFilterError`, ``"match_all"`` selects every
    row.
``strict_validation``
    ``True`` raises :class:`~rowbind.errors.BindingValidationError` when a
    typed column rejects its value; ``False`` silently binds NULL.
"""
from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as _PydanticValidationError

from rowbind.errors import ConfigError

NullStyle = Literal["bound", "literal"]
EmptyFilter = Literal["error", "match_all"]


class MapperConfig(BaseModel):
    """Configuration for one :class:`~rowbind.mapper.TableMap`.

    Attributes:
        table: Target table name.
        target: Dialect target registered with
            :class:`~rowbind.compile.registry.CompilerFactory`.
        null_style: How absent values are bound in INSERT.
        empty_filter: How a SELECT with no present column is handled.
        strict_validation: Whether typed-column rejections raise.
        commit_on_create: Call ``connection.commit()`` after each INSERT.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    table: str = Field(min_length=1)
    target: str = "sqlite"
    null_style: NullStyle = "bound"
    empty_filter: EmptyFilter = "error"
    strict_validation: bool = True
    commit_on_create: bool = True

    @classmethod
    def for_table(cls, table: str, **overrides: Any) -> MapperConfig:
        """Build a config for ``table``, converting pydantic errors.

        Raises:
            ConfigError: If any field is invalid.
        """
        try:
            return cls(table=table, **overrides)
        except _PydanticValidationError as exc:
            first = exc.errors()[0]
            loc = ".".join(str(p) for p in first.get("loc", ()))
            raise ConfigError(f"Invalid mapper config: {exc}", field=loc or None) from exc
