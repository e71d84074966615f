"""Identifiers, column and table references, and the operator enumerations."""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any


class Iden(ABC):
    """A SQL identifier such as a table, column or alias name."""

    @abstractmethod
    def unquoted(self) -> str:
        """Return the identifier's plain text."""

    def quoted(self, q: str) -> str:
        """Return the text with every occurrence of the quote character doubled."""
        _check_quote(q)
        return self.unquoted().replace(q, q * 2)

    def prepare(self, q: str) -> str:
        """Return the identifier quoted with ``q`` on both sides."""
        return f"{q}{self.quoted(q)}{q}"

    def __str__(self) -> str:
        return self.unquoted()


def _check_quote(q: str) -> None:
    if len(q) != 1:
        raise ValueError(f"a quote must be a single character, not {q!r}")


@dataclass(frozen=True)
class Alias(Iden):
    """An identifier given by name."""

    name: str

    def unquoted(self) -> str:
        return self.name


@dataclass(frozen=True)
class NullAlias(Iden):
    """An identifier with empty text."""

    def unquoted(self) -> str:
        return ""


def into_iden(x: Any) -> Iden:
    """Return ``x`` as an identifier; a string becomes an :class:`Alias`."""
    if isinstance(x, Iden):
        return x
    if isinstance(x, str):
        return Alias(x)
    raise TypeError(f"{type(x).__name__} cannot be used as an identifier")


def iden_list(x: Any) -> list[Iden]:
    """Turn a single identifier or a tuple of two or three into a list of identifiers."""
    if isinstance(x, tuple):
        if len(x) not in (2, 3):
            raise ValueError(f"an identifier tuple holds 2 or 3 items, not {len(x)}")
        return [into_iden(item) for item in x]
    return [into_iden(x)]


@dataclass(frozen=True)
class ColumnRef:
    """A reference to a column, optionally qualified; ``column=None`` means ``*``."""

    column: Iden | None = None
    table: Iden | None = None
    schema: Iden | None = None

    def __post_init__(self) -> None:
        if self.schema is not None and self.table is None:
            raise ValueError("a schema-qualified column needs a table")
        if self.column is None and self.schema is not None:
            raise ValueError("an asterisk cannot be qualified by a schema")


def into_column_ref(x: Any) -> ColumnRef:
    """Build a column reference from an identifier or a (table, column) or
    (schema, table, column) tuple."""
    if isinstance(x, ColumnRef):
        return x
    if isinstance(x, tuple):
        if len(x) == 2:
            table, column = x
            return ColumnRef(column=into_iden(column), table=into_iden(table))
        if len(x) == 3:
            schema, table, column = x
            return ColumnRef(
                column=into_iden(column),
                table=into_iden(table),
                schema=into_iden(schema),
            )
        raise ValueError(f"a column tuple holds 2 or 3 items, not {len(x)}")
    return ColumnRef(column=into_iden(x))


@dataclass(frozen=True)
class TableRef:
    """A reference to a table, optionally qualified and aliased, or to an aliased subquery."""

    table: Iden | None = None
    schema: Iden | None = None
    database: Iden | None = None
    table_alias: Iden | None = None
    subquery: Any = None

    def __post_init__(self) -> None:
        if self.subquery is not None:
            if self.table is not None or self.schema is not None or self.database is not None:
                raise ValueError("a subquery reference cannot also name a table")
            if self.table_alias is None:
                raise ValueError("a subquery reference needs an alias")
            return
        if self.table is None:
            raise ValueError("a table reference needs a table or a subquery")
        if self.database is not None and self.schema is None:
            raise ValueError("a database-qualified table needs a schema")

    def alias(self, alias: Any) -> TableRef:
        """Return a copy with the alias added or replaced."""
        return dataclasses.replace(self, table_alias=into_iden(alias))


def into_table_ref(x: Any) -> TableRef:
    """Build a table reference from an identifier or a (schema, table) or
    (database, schema, table) tuple."""
    if isinstance(x, TableRef):
        return x
    if isinstance(x, tuple):
        if len(x) == 2:
            schema, table = x
            return TableRef(table=into_iden(table), schema=into_iden(schema))
        if len(x) == 3:
            database, schema, table = x
            return TableRef(
                table=into_iden(table),
                schema=into_iden(schema),
                database=into_iden(database),
            )
        raise ValueError(f"a table tuple holds 2 or 3 items, not {len(x)}")
    return TableRef(table=into_iden(x))


class UnOper(Enum):
    """Unary operator."""

    NOT = auto()


class BinOper(Enum):
    """Binary operator."""

    AND = auto()
    OR = auto()
    LIKE = auto()
    NOT_LIKE = auto()
    IS = auto()
    IS_NOT = auto()
    IN = auto()
    NOT_IN = auto()
    BETWEEN = auto()
    NOT_BETWEEN = auto()
    EQUAL = auto()
    NOT_EQUAL = auto()
    SMALLER_THAN = auto()
    GREATER_THAN = auto()
    SMALLER_THAN_OR_EQUAL = auto()
    GREATER_THAN_OR_EQUAL = auto()
    ADD = auto()
    SUB = auto()
    MUL = auto()
    DIV = auto()
    AS = auto()
    MATCHES = auto()
    CONTAINS = auto()
    CONTAINED = auto()
    CONCATENATE = auto()


@dataclass(frozen=True)
class LogicalChainOper:
    """An expression chained to a condition with AND or OR."""

    op: BinOper
    expr: Any

    def __post_init__(self) -> None:
        if self.op not in (BinOper.AND, BinOper.OR):
            raise ValueError(f"a logical chain uses AND or OR, not {self.op.name}")


class JoinType(Enum):
    """Kind of join."""

    JOIN = auto()
    INNER_JOIN = auto()
    LEFT_JOIN = auto()
    RIGHT_JOIN = auto()


class NullOrdering(Enum):
    """Where NULLs sort."""

    FIRST = auto()
    LAST = auto()


class Order(Enum):
    """Sort direction."""

    ASC = auto()
    DESC = auto()


@dataclass(frozen=True)
class OrderExpr:
    """An expression to sort by, with its direction and null placement."""

    expr: Any
    order: Order
    nulls: NullOrdering | None = None


@dataclass(frozen=True)
class JoinOn:
    """The join condition: either a condition or a list of expressions."""

    condition: Any = None
    columns: tuple[Any, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        if self.condition is not None and self.columns:
            raise ValueError("a join is on a condition or on columns, not both")


@dataclass(frozen=True)
class Keyword:
    """A SQL keyword: NULL when ``custom`` is None, otherwise a custom identifier."""

    custom: Iden | None = None

    def __str__(self) -> str:
        return "NULL" if self.custom is None else self.custom.unquoted()