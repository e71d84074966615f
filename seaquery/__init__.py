"""SQL building blocks: a tokenizer, typed values, value tuples and identifiers."""

__version__ = "0.20.0"
__all__ = ["token", "value", "convert", "types"]