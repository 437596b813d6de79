"""rowbind schema layer: values, validators, bindings, and configuration models."""
from rowbind.schema.binding import BindingSet, ColumnBinding, validated
from rowbind.schema.config import MapperConfig
from rowbind.schema.table import ColumnInfo, TableSchema
from rowbind.schema.validators import is_float, is_integer, is_timestamp
from rowbind.schema.values import (
    ABSENT,
    Accessor,
    NullableValue,
    from_datetime,
    from_float,
    from_getter,
    from_int,
    from_string,
    from_value,
)

__all__ = [
    "ABSENT",
    "Accessor",
    "BindingSet",
    "ColumnBinding",
    "ColumnInfo",
    "MapperConfig",
    "NullableValue",
    "TableSchema",
    "from_datetime",
    "from_float",
    "from_getter",
    "from_int",
    "from_string",
    "from_value",
    "is_float",
    "is_integer",
    "is_timestamp",
    "validated",
]
