"""Grouping values into small tuples and converting values to JSON data."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Any, Iterator

from seaquery.value import Value, ValueKind, to_value

_MAX_ARITY = 6

_INTEGER_KINDS = frozenset(
    {
        ValueKind.TINY_INT,
        ValueKind.SMALL_INT,
        ValueKind.INT,
        ValueKind.BIG_INT,
        ValueKind.TINY_UNSIGNED,
        ValueKind.SMALL_UNSIGNED,
        ValueKind.UNSIGNED,
        ValueKind.BIG_UNSIGNED,
    }
)

_TEMPORAL_KINDS = frozenset(
    {
        ValueKind.DATE,
        ValueKind.TIME,
        ValueKind.DATE_TIME,
        ValueKind.DATE_TIME_WITH_TIME_ZONE,
    }
)


@dataclass(frozen=True)
class ValueTuple:
    """One to six values taken together, such as a composite key."""

    values: tuple[Value, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if not 1 <= len(values) <= _MAX_ARITY:
            raise ValueError(
                f"a value tuple holds 1 to {_MAX_ARITY} values, not {len(values)}"
            )
        if not all(isinstance(v, Value) for v in values):
            raise TypeError("a value tuple holds Value objects only")
        object.__setattr__(self, "values", values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> Value:
        return self.values[index]


def into_value_tuple(x: Any) -> ValueTuple:
    """Turn a single value or a Python tuple of up to six values into a ValueTuple."""
    if isinstance(x, ValueTuple):
        return x
    if isinstance(x, tuple):
        return ValueTuple(tuple(to_value(item) for item in x))
    return ValueTuple((to_value(x),))


def from_value_tuple(values: Any, kinds: ValueKind | tuple[ValueKind, ...]) -> Any:
    """Extract Python values of the given kinds.

    A single kind yields a single value; a tuple of kinds yields a tuple of the
    same length.  Raw Python objects are stored as the requested kinds first.
    """
    single = isinstance(kinds, ValueKind)
    kind_list = (kinds,) if single else tuple(kinds)

    if isinstance(values, ValueTuple):
        held = values
    else:
        raw = values if isinstance(values, tuple) else (values,)
        if len(raw) != len(kind_list):
            raise ValueError(
                f"expected a tuple of {len(kind_list)} values, got {len(raw)}"
            )
        held = ValueTuple(tuple(to_value(x, k) for x, k in zip(raw, kind_list)))

    if len(held) != len(kind_list):
        raise ValueError(
            f"expected a tuple of {len(kind_list)} values, got {len(held)}"
        )
    result = tuple(v.unwrap(k) for v, k in zip(held, kind_list))
    return result[0] if single else result


def _format_offset(dt: datetime) -> str:
    total = int(dt.utcoffset().total_seconds())
    sign = "-" if total < 0 else "+"
    hours, rest = divmod(abs(total), 3600)
    return f"{sign}{hours:02d}:{rest // 60:02d}"


def _temporal_literal(value: Value) -> str:
    inner = value.inner
    if inner is None:
        return "NULL"
    if value.kind is ValueKind.DATE:
        assert isinstance(inner, date)
        text = inner.strftime("%Y-%m-%d")
    elif value.kind is ValueKind.TIME:
        assert isinstance(inner, time)
        text = inner.strftime("%H:%M:%S")
    elif value.kind is ValueKind.DATE_TIME:
        text = inner.strftime("%Y-%m-%d %H:%M:%S")
    else:
        text = f"{inner.strftime('%Y-%m-%d %H:%M:%S')} {_format_offset(inner)}"
    return f"'{text}'"


def value_to_json(value: Value) -> Any:
    """Convert a value to plain JSON-compatible Python data."""
    kind = value.kind
    if kind in _TEMPORAL_KINDS:
        return _temporal_literal(value)
    inner = value.inner
    if inner is None:
        return None
    if kind is ValueKind.BOOL or kind in _INTEGER_KINDS:
        return inner
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        return float(inner)
    if kind is ValueKind.STRING:
        return inner
    if kind is ValueKind.BYTES:
        return inner.decode("utf-8")
    if kind is ValueKind.JSON:
        return inner
    if kind in (ValueKind.DECIMAL, ValueKind.BIG_DECIMAL):
        return float(inner)
    if kind is ValueKind.UUID:
        return str(inner)
    if kind is ValueKind.ARRAY:
        return [value_to_json(item) for item in inner]
    raise TypeError(f"cannot convert {kind.name} to JSON")