import uuid
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal

import pytest

from seaquery.convert import (
    ValueTuple,
    from_value_tuple,
    into_value_tuple,
    value_to_json,
)
from seaquery.value import Value, ValueKind, ValueTypeError, null_value

K = ValueKind


def test_into_value_tuple_one():
    assert into_value_tuple(1) == ValueTuple((Value(K.INT, 1),))
    assert into_value_tuple("b") == ValueTuple((Value(K.STRING, "b"),))


def test_into_value_tuple_two():
    assert into_value_tuple((1, "b")) == ValueTuple(
        (Value(K.INT, 1), Value(K.STRING, "b"))
    )


def test_into_value_tuple_three():
    assert into_value_tuple((1, 2.4, "b")) == ValueTuple(
        (Value(K.INT, 1), Value(K.DOUBLE, 2.4), Value(K.STRING, "b"))
    )


def test_into_value_tuple_six_with_explicit_kinds():
    values = (
        Value(K.INT, 1),
        Value(K.DOUBLE, 2.4),
        "b",
        Value(K.TINY_UNSIGNED, 123),
        Value(K.SMALL_UNSIGNED, 456),
        Value(K.UNSIGNED, 789),
    )
    result = into_value_tuple(values)
    assert list(result) == [
        Value(K.INT, 1),
        Value(K.DOUBLE, 2.4),
        Value(K.STRING, "b"),
        Value(K.TINY_UNSIGNED, 123),
        Value(K.SMALL_UNSIGNED, 456),
        Value(K.UNSIGNED, 789),
    ]


def test_into_value_tuple_passes_through():
    vt = ValueTuple((Value(K.INT, 1),))
    assert into_value_tuple(vt) is vt


def test_value_tuple_too_long():
    with pytest.raises(ValueError):
        into_value_tuple((1, 2, 3, 4, 5, 6, 7))


def test_value_tuple_empty():
    with pytest.raises(ValueError):
        into_value_tuple(())


@pytest.mark.parametrize(
    "raw, expected",
    [
        (1, [Value(K.INT, 1)]),
        ((1, 2.4), [Value(K.INT, 1), Value(K.DOUBLE, 2.4)]),
        (
            (1, 2.4, "b"),
            [Value(K.INT, 1), Value(K.DOUBLE, 2.4), Value(K.STRING, "b")],
        ),
    ],
)
def test_value_tuple_iter(raw, expected):
    it = iter(into_value_tuple(raw))
    for value in expected:
        assert next(it) == value
    with pytest.raises(StopIteration):
        next(it)


def test_from_value_tuple_single():
    assert from_value_tuple(1, K.INT) == 1
    assert from_value_tuple("b", K.STRING) == "b"


@pytest.mark.parametrize(
    "val, kinds",
    [
        ((1, "b"), (K.INT, K.STRING)),
        ((1, 2.4, "b"), (K.INT, K.DOUBLE, K.STRING)),
        ((1, 2.4, "b", 123), (K.INT, K.DOUBLE, K.STRING, K.TINY_UNSIGNED)),
        (
            (1, 2.4, "b", 123, 456),
            (K.INT, K.DOUBLE, K.STRING, K.TINY_UNSIGNED, K.SMALL_UNSIGNED),
        ),
        (
            (1, 2.4, "b", 123, 456, 789),
            (
                K.INT,
                K.DOUBLE,
                K.STRING,
                K.TINY_UNSIGNED,
                K.SMALL_UNSIGNED,
                K.UNSIGNED,
            ),
        ),
    ],
)
def test_from_value_tuple_round_trip(val, kinds):
    assert from_value_tuple(val, kinds) == val


def test_from_value_tuple_of_value_tuple():
    vt = into_value_tuple((1, "b"))
    assert from_value_tuple(vt, (K.INT, K.STRING)) == (1, "b")


def test_from_value_tuple_arity_mismatch():
    with pytest.raises(ValueError):
        from_value_tuple((1, 2), K.INT)
    with pytest.raises(ValueError):
        from_value_tuple(into_value_tuple(1), (K.INT, K.INT))


def test_from_value_tuple_kind_mismatch():
    with pytest.raises(ValueTypeError):
        from_value_tuple(into_value_tuple("b"), K.INT)


def test_json_scalars():
    assert value_to_json(Value(K.BOOL, True)) is True
    assert value_to_json(Value(K.BIG_INT, 8589934592)) == 8589934592
    assert value_to_json(Value(K.DOUBLE, 2.5)) == 2.5
    assert value_to_json(Value(K.STRING, "hello")) == "hello"
    assert value_to_json(Value(K.BYTES, b"abc")) == "abc"


def test_json_nulls():
    assert value_to_json(null_value(K.INT)) is None
    assert value_to_json(null_value(K.STRING)) is None
    assert value_to_json(null_value(K.UUID)) is None


def test_json_passthrough():
    doc = {"a": 25.0, "b": "hello"}
    assert value_to_json(Value(K.JSON, doc)) == doc


def test_json_uuid_and_decimal():
    nil = uuid.UUID(int=0)
    assert value_to_json(Value(K.UUID, nil)) == "00000000-0000-0000-0000-000000000000"
    assert value_to_json(Value(K.DECIMAL, Decimal("2.02"))) == 2.02


def test_json_temporal():
    assert value_to_json(Value(K.DATE, date(2020, 1, 1))) == "'2020-01-01'"
    assert value_to_json(Value(K.TIME, time(2, 2, 2))) == "'02:02:02'"
    assert (
        value_to_json(Value(K.DATE_TIME, datetime(1970, 1, 1)))
        == "'1970-01-01 00:00:00'"
    )
    tz = timezone(timedelta(hours=8))
    assert (
        value_to_json(Value(K.DATE_TIME_WITH_TIME_ZONE, datetime(2020, 1, 1, 2, 2, 2, tzinfo=tz)))
        == "'2020-01-01 02:02:02 +08:00'"
    )


def test_json_array():
    assert value_to_json(Value(K.ARRAY, [1, 2, 3])) == [1, 2, 3]


def test_json_invalid_bytes():
    with pytest.raises(UnicodeDecodeError):
        value_to_json(Value(K.BYTES, b"\xff"))