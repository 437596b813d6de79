"""Unit tests for BindingSet, validated accessors, and TableMap binding."""
from __future__ import annotations

import logging

import pytest

from rowbind import (
    BindingValidationError,
    ColumnInfo,
    MapperConfig,
    SchemaError,
    TableMap,
    TableSchema,
    from_int,
    from_string,
)
from rowbind.schema.binding import BindingSet, ColumnBinding, validated
from rowbind.schema.validators import is_integer
from rowbind.schema.values import ABSENT

SCHEMA = TableSchema(
    name="messages",
    columns=[
        ColumnInfo(name="id", type="INTEGER"),
        ColumnInfo(name="title", type="TEXT"),
        ColumnInfo(name="body", type="TEXT"),
    ],
)


def _tm(**overrides) -> TableMap:
    return TableMap(object(), MapperConfig.for_table("messages", **overrides))


def test_binding_order_is_insertion_order():
    bs = BindingSet()
    for name in ("body", "id", "title"):
        bs.add(ColumnBinding(name, from_string(name)))
    assert bs.names == ["body", "id", "title"]
    assert len(bs) == 3
    assert "id" in bs


def test_rebinding_replaces_accessor_in_place():
    bs = BindingSet()
    bs.add(ColumnBinding("id", from_string("1")))
    bs.add(ColumnBinding("title", from_string("t")))
    bs.add(ColumnBinding("id", from_string("2")))
    assert bs.names == ["id", "title"]
    assert [(n, v.text) for n, v in bs.evaluate()] == [("id", "2"), ("title", "t")]


def test_accessors_are_evaluated_lazily():
    calls = []

    def accessor():
        calls.append(1)
        return ABSENT

    tm = _tm()
    tm.bind("id", accessor)
    assert calls == []
    tm.as_dict()
    assert calls == [1]


def test_validated_passes_valid_text_unchanged():
    checked = validated("id", from_string("42"), is_integer)
    assert checked().text == "42"
    assert checked().present


def test_validated_keeps_absent_values_absent():
    assert validated("id", from_string(None), is_integer, strict=True)() == ABSENT
    assert validated("id", from_string(None), is_integer, strict=False)() == ABSENT


def test_validated_strict_raises():
    checked = validated("id", from_string("seven"), is_integer, strict=True)
    with pytest.raises(BindingValidationError) as exc_info:
        checked()
    err = exc_info.value
    assert err.column == "id"
    assert err.value == "seven"
    assert err.validator == "is_integer"


def test_validated_lenient_downgrades_and_warns(caplog):
    checked = validated("id", from_string("seven"), is_integer, strict=False)
    with caplog.at_level(logging.WARNING, logger="rowbind.schema.binding"):
        assert checked() == ABSENT
    assert "failed is_integer validation" in caplog.text
    assert "seven" not in caplog.text


def test_int_col_uses_config_strictness():
    strict = _tm()
    strict.int_col("id", from_string("abc"))
    with pytest.raises(BindingValidationError):
        strict.as_dict()

    lenient = _tm(strict_validation=False)
    lenient.int_col("id", from_string("abc"))
    assert lenient.as_dict() == {"id": None}


@pytest.mark.parametrize("source", [3.7, "abc", 99999999999999999999])
def test_int_col_rejects_non_integer_sources_in_strict_mode(source):
    tm = _tm()
    tm.int_col("id", from_int(source))
    with pytest.raises(BindingValidationError) as exc_info:
        tm.render_insert()
    assert exc_info.value.value == str(source)


@pytest.mark.parametrize("source", [3.7, "abc", 99999999999999999999])
def test_int_col_drops_non_integer_sources_in_lenient_mode(source):
    tm = _tm(strict_validation=False)
    tm.int_col("id", from_int(source))
    assert tm.render_insert().params == [None]


def test_int_col_out_of_range_text_dropped_in_lenient_mode():
    tm = _tm(strict_validation=False)
    tm.int_col("id", from_string("99999999999999999999"))
    tm.string_col("title", from_string("t"))
    assert tm.render_insert().params == [None, "t"]
    assert tm.render_select().params == ["t"]


def test_typed_helpers():
    tm = _tm(strict_validation=False)
    tm.int_col("id", from_int(3))
    tm.float_col("score", from_string("x"))
    tm.timestamp_col("sent_at", from_string("2024-01-01T00:00:00"))
    tm.string_col("title", from_string("anything"))
    assert tm.as_dict() == {
        "id": "3",
        "score": None,
        "sent_at": "2024-01-01T00:00:00",
        "title": "anything",
    }
    assert tm.columns == ["id", "score", "sent_at", "title"]


def test_schema_rejects_unknown_column():
    tm = TableMap(object(), MapperConfig.for_table("messages"), schema=SCHEMA)
    tm.string_col("title", from_string("ok"))
    with pytest.raises(SchemaError) as exc_info:
        tm.string_col("titel", from_string("typo"))
    assert exc_info.value.column == "titel"
    assert exc_info.value.table == "messages"
    assert tm.columns == ["title"]


def test_schema_for_another_table_rejected():
    with pytest.raises(SchemaError, match="Schema describes table 'messages'") as exc_info:
        TableMap(object(), MapperConfig.for_table("authors"), schema=SCHEMA)
    assert exc_info.value.table == "authors"


def test_repr_lists_columns():
    tm = _tm()
    tm.int_col("id", from_int(1))
    assert repr(tm) == "TableMap(table='messages', columns=['id'])"
