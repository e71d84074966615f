# seaquery

Building blocks for composing SQL from Python:

- `seaquery.token`: a small SQL tokenizer. `tokenize()` (or iterating a
  `Tokenizer`) splits text into `Token` objects whose `kind` is a
  `TokenKind`: quoted, unquoted, space or punctuation. Quoted tokens
  can be unquoted with `Token.unquote()`. Joining the tokens' text gives
  back the input.
- `seaquery.value`: typed SQL values. A `Value` pairs a `ValueKind`
  (bool, the signed and unsigned integer widths, float, double, string,
  bytes, JSON, date, time, date-time with or without a time zone, UUID,
  decimal, array) with a Python object, or with `None` for SQL NULL.
  `to_value()` converts Python objects, inferring the kind when none is
  given; `null_value()` makes a typed NULL; `Value.unwrap()` gets the
  object back and raises `ValueTypeError` on a kind mismatch or NULL.
  `Values` is an ordered list of values. `escape_string()` and
  `unescape_string()` handle backslash escaping for SQL string literals.
- `seaquery.convert`: `ValueTuple` holds one to six values;
  `into_value_tuple()` builds one from a value or a Python tuple, and
  `from_value_tuple()` extracts Python objects of given kinds.
  `value_to_json()` turns a value into JSON-ready Python data (dates and
  times become SQL literal strings such as `'2020-01-01 02:02:02'`,
  including the single quotes).
- `seaquery.types`: identifiers (the abstract `Iden`, with `Alias` and
  `NullAlias`), `ColumnRef` and `TableRef` with the `into_iden()`,
  `iden_list()`, `into_column_ref()` and `into_table_ref()` helpers, and
  the enumerations and records `UnOper`, `BinOper`, `LogicalChainOper`,
  `JoinType`, `NullOrdering`, `Order`, `OrderExpr`, `JoinOn` and `Keyword`.

The package has no dependencies outside the standard library.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

Tokenizing SQL:

```python
from seaquery.token import tokenize

tokens = tokenize("SELECT * FROM `character`")
print([str(t) for t in tokens])
# ['SELECT', ' ', '*', ' ', 'FROM', ' ', '`character`']
print(tokens[-1].unquote())
# character
```

Values and escaping:

```python
from seaquery.value import ValueKind, to_value, escape_string, unescape_string

v = to_value(42, ValueKind.INT)
assert v.unwrap(ValueKind.INT) == 42

escaped = escape_string('a\nb"c')
assert unescape_string(escaped) == 'a\nb"c'
```

Value tuples:

```python
from seaquery.convert import into_value_tuple, from_value_tuple
from seaquery.value import ValueKind

values = into_value_tuple((1, "b"))
assert from_value_tuple(values, (ValueKind.INT, ValueKind.STRING)) == (1, "b")
```

Identifiers and references:

```python
from seaquery.types import Alias, into_column_ref, into_table_ref

print(Alias("hel`lo").prepare("`"))       # `hel``lo`
col = into_column_ref((Alias("glyph"), Alias("image")))
table = into_table_ref(Alias("font")).alias(Alias("f"))
```

Your own identifier types subclass `Iden` and implement `unquoted()`.

## What this package does not do

It provides the pieces a query builder is made of, not the builder
itself. There are no SELECT, INSERT, UPDATE, DELETE or schema statement
builders, no rendering of statements for MySQL, PostgreSQL or SQLite,
and no database connections or execution.