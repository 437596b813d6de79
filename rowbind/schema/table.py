"""Pydantic models describing the target table.

A :class:`TableSchema` is optional.  When attached to a
:class:`~rowbind.mapper.TableMap`, every binding is checked against it so a
misspelled column fails at bind time instead of inside the driver.  It is
produced by the caller, by hand or via
:func:`~rowbind.schema.converters.table_schema_from_sqlalchemy`.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from rowbind.errors import SchemaError


class ColumnInfo(BaseModel):
    """Metadata for a single column.

    Attributes:
        name: Column name.
        type: SQL type string (e.g. ``'TEXT'``, ``'INTEGER'``).
        nullable: Whether the column can be NULL.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    type: str = ""
    nullable: bool = True


class TableSchema(BaseModel):
    """Columns of one table.

    Attributes:
        name: Table name.
        columns: Ordered list of column metadata.
    """

    model_config = ConfigDict(extra="forbid")

    name: str
    columns: list[ColumnInfo]

    @property
    def column_names(self) -> list[str]:
        """Returns all column names for this table."""
        return [c.name for c in self.columns]

    def get_column(self, name: str) -> ColumnInfo | None:
        """Returns the ColumnInfo for ``name``, or ``None``."""
        for col in self.columns:
            if col.name == name:
                return col
        return None

    def check_column(self, name: str) -> ColumnInfo:
        """Return the ColumnInfo for ``name``.

        Raises:
            SchemaError: If the table has no such column.
        """
        col = self.get_column(name)
        if col is None:
            raise SchemaError(
                f"Column '{name}' does not exist on table '{self.name}'. "
                f"Known columns: {self.column_names}.",
                table=self.name,
                column=name,
            )
        return col
