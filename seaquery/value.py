"""Typed SQL values and string-literal escaping."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Iterable, Iterator


class ValueKind(Enum):
    """The SQL type carried by a :class:`Value`."""

    BOOL = "bool"
    TINY_INT = "tiny_int"
    SMALL_INT = "small_int"
    INT = "int"
    BIG_INT = "big_int"
    TINY_UNSIGNED = "tiny_unsigned"
    SMALL_UNSIGNED = "small_unsigned"
    UNSIGNED = "unsigned"
    BIG_UNSIGNED = "big_unsigned"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"
    BYTES = "bytes"
    JSON = "json"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "date_time"
    DATE_TIME_WITH_TIME_ZONE = "date_time_with_time_zone"
    UUID = "uuid"
    DECIMAL = "decimal"
    BIG_DECIMAL = "big_decimal"
    ARRAY = "array"


_INT_RANGES = {
    ValueKind.TINY_INT: (-(2**7), 2**7 - 1),
    ValueKind.SMALL_INT: (-(2**15), 2**15 - 1),
    ValueKind.INT: (-(2**31), 2**31 - 1),
    ValueKind.BIG_INT: (-(2**63), 2**63 - 1),
    ValueKind.TINY_UNSIGNED: (0, 2**8 - 1),
    ValueKind.SMALL_UNSIGNED: (0, 2**16 - 1),
    ValueKind.UNSIGNED: (0, 2**32 - 1),
    ValueKind.BIG_UNSIGNED: (0, 2**64 - 1),
}

_JSON_TYPES = (dict, list, str, int, float, bool)


class ValueTypeError(TypeError):
    """Raised when a value does not hold the requested type."""

    def __init__(self, message: str = "Value type mismatch") -> None:
        super().__init__(message)


def _mismatch(kind: ValueKind, x: Any) -> TypeError:
    return TypeError(f"{type(x).__name__} cannot be stored as {kind.name}")


def _normalize(kind: ValueKind, x: Any) -> Any:
    """Check that ``x`` fits ``kind`` and return it in its stored form."""
    if x is None:
        return None
    if kind is ValueKind.BOOL:
        if not isinstance(x, bool):
            raise _mismatch(kind, x)
        return x
    if kind in _INT_RANGES:
        if isinstance(x, bool) or not isinstance(x, int):
            raise _mismatch(kind, x)
        low, high = _INT_RANGES[kind]
        if not low <= x <= high:
            raise ValueError(f"{x} is out of range for {kind.name}")
        return x
    if kind in (ValueKind.FLOAT, ValueKind.DOUBLE):
        if isinstance(x, bool) or not isinstance(x, (int, float)):
            raise _mismatch(kind, x)
        return float(x)
    if kind is ValueKind.STRING:
        if not isinstance(x, str):
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.BYTES:
        if not isinstance(x, (bytes, bytearray, memoryview)):
            raise _mismatch(kind, x)
        return bytes(x)
    if kind is ValueKind.JSON:
        if not isinstance(x, _JSON_TYPES):
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.DATE:
        if isinstance(x, datetime) or not isinstance(x, date):
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.TIME:
        if not isinstance(x, time):
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.DATE_TIME:
        if not isinstance(x, datetime) or x.tzinfo is not None:
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.DATE_TIME_WITH_TIME_ZONE:
        if not isinstance(x, datetime) or x.utcoffset() is None:
            raise _mismatch(kind, x)
        return x.replace(tzinfo=timezone(x.utcoffset()))
    if kind is ValueKind.UUID:
        if not isinstance(x, uuid.UUID):
            raise _mismatch(kind, x)
        return x
    if kind in (ValueKind.DECIMAL, ValueKind.BIG_DECIMAL):
        if not isinstance(x, Decimal):
            raise _mismatch(kind, x)
        return x
    if kind is ValueKind.ARRAY:
        if not isinstance(x, (list, tuple)):
            raise _mismatch(kind, x)
        return tuple(to_value(item) for item in x)
    raise _mismatch(kind, x)


@dataclass(frozen=True)
class Value:
    """A SQL value of a given kind; ``inner`` is None for SQL NULL."""

    kind: ValueKind
    inner: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "inner", _normalize(self.kind, self.inner))

    def is_null(self) -> bool:
        return self.inner is None

    def unwrap(self, kind: ValueKind) -> Any:
        """Return the held Python value, requiring it to be a non-null ``kind``."""
        if self.kind is not kind or self.inner is None:
            raise ValueTypeError()
        if kind is ValueKind.ARRAY:
            return [item.unwrap(item.kind) for item in self.inner]
        return self.inner


@dataclass
class Values:
    """An ordered collection of values, such as the parameters of a statement."""

    items: list[Value] = field(default_factory=list)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Value:
        return self.items[index]


def _infer_kind(x: Any) -> ValueKind:
    if isinstance(x, bool):
        return ValueKind.BOOL
    if isinstance(x, int):
        for kind in (ValueKind.INT, ValueKind.BIG_INT, ValueKind.BIG_UNSIGNED):
            low, high = _INT_RANGES[kind]
            if low <= x <= high:
                return kind
        raise ValueError(f"{x} is out of range for any integer kind")
    if isinstance(x, float):
        return ValueKind.DOUBLE
    if isinstance(x, str):
        return ValueKind.STRING
    if isinstance(x, (bytes, bytearray, memoryview)):
        return ValueKind.BYTES
    if isinstance(x, Decimal):
        return ValueKind.DECIMAL
    if isinstance(x, uuid.UUID):
        return ValueKind.UUID
    if isinstance(x, datetime):
        if x.utcoffset() is None:
            return ValueKind.DATE_TIME
        return ValueKind.DATE_TIME_WITH_TIME_ZONE
    if isinstance(x, date):
        return ValueKind.DATE
    if isinstance(x, time):
        return ValueKind.TIME
    if isinstance(x, list):
        return ValueKind.ARRAY
    if isinstance(x, dict):
        return ValueKind.JSON
    raise TypeError(f"cannot convert {type(x).__name__} to a SQL value")


def to_value(x: Any, kind: ValueKind | None = None) -> Value:
    """Convert a Python object to a :class:`Value`, inferring the kind if not given."""
    if isinstance(x, Value):
        if kind is not None and kind is not x.kind:
            raise ValueTypeError()
        return x
    if x is None:
        if kind is None:
            raise TypeError("the kind of a null value cannot be inferred")
        return null_value(kind)
    return Value(kind if kind is not None else _infer_kind(x), x)


def null_value(kind: ValueKind) -> Value:
    """Return the SQL NULL of the given kind."""
    return Value(kind, None)


_ESCAPES = (
    ("\\", "\\\\"),
    ('"', '\\"'),
    ("'", "\\'"),
    ("\0", "\\0"),
    ("\x08", "\\b"),
    ("\x09", "\\t"),
    ("\x1a", "\\z"),
    ("\n", "\\n"),
    ("\r", "\\r"),
)

_UNESCAPES = {"0": "\0", "b": "\x08", "t": "\x09", "z": "\x1a", "n": "\n", "r": "\r"}


def escape_string(string: str) -> str:
    """Escape a string for use inside a SQL string literal."""
    for raw, escaped in _ESCAPES:
        string = string.replace(raw, escaped)
    return string


def _unescaped_chars(chars: Iterable[str]) -> Iterator[str]:
    escape = False
    for c in chars:
        if escape:
            yield _UNESCAPES.get(c, c)
            escape = False
        elif c == "\\":
            escape = True
        else:
            yield c


def unescape_string(string: str) -> str:
    """Reverse :func:`escape_string`."""
    return "".join(_unescaped_chars(string))