"""Tokenizer that splits SQL text into quoted, unquoted, space and punctuation tokens."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterator

_SPACES = frozenset(" \t\r\n")
_IDENTIFIER_EXTRA = frozenset("_$")
_DIGITS = frozenset("0123456789")
_ESCAPE_CHAR = "\\"

# Opening delimiter -> closing delimiter.
_DELIMITERS = {"`": "`", "[": "]", "'": "'", '"': '"'}
# Opening delimiters whose closing character may be doubled to escape it.
_DOUBLING_ESCAPES = frozenset("`'\"")


def _is_space(c: str) -> bool:
    return c in _SPACES


def _is_alphanumeric(c: str) -> bool:
    return c.isalpha() or c in _DIGITS


def _is_escape_for(start: str, c: str) -> bool:
    return start in _DOUBLING_ESCAPES and c == start


class TokenKind(Enum):
    """The category of a token."""

    QUOTED = "quoted"
    UNQUOTED = "unquoted"
    SPACE = "space"
    PUNCTUATION = "punctuation"


@dataclass(frozen=True)
class Token:
    """A piece of SQL text together with its category."""

    kind: TokenKind
    text: str

    def is_quoted(self) -> bool:
        return self.kind is TokenKind.QUOTED

    def is_unquoted(self) -> bool:
        return self.kind is TokenKind.UNQUOTED

    def is_space(self) -> bool:
        return self.kind is TokenKind.SPACE

    def is_punctuation(self) -> bool:
        return self.kind is TokenKind.PUNCTUATION

    def unquote(self) -> str | None:
        """Return the content of a quoted token without its delimiters, else None."""
        if not self.is_quoted():
            return None
        return Tokenizer(self.text).unquote()

    def __str__(self) -> str:
        return self.text


class Tokenizer:
    """Iterator over the tokens of a string."""

    def __init__(self, string: str) -> None:
        self._text = string
        self._pos = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        for scan in (self._space, self._unquoted, self._quoted, self._punctuation):
            token = scan()
            if token is not None:
                return token
        raise StopIteration

    def _at_end(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        return self._text[self._pos]

    def _space(self) -> Token | None:
        begin = self._pos
        while not self._at_end() and _is_space(self._peek()):
            self._pos += 1
        if self._pos == begin:
            return None
        return Token(TokenKind.SPACE, self._text[begin:self._pos])

    def _unquoted(self) -> Token | None:
        if self._at_end() or not _is_alphanumeric(self._peek()):
            return None
        begin = self._pos
        self._pos += 1
        while not self._at_end():
            c = self._peek()
            if not (_is_alphanumeric(c) or c in _IDENTIFIER_EXTRA):
                break
            self._pos += 1
        return Token(TokenKind.UNQUOTED, self._text[begin:self._pos])

    def _scan_quoted(self) -> Iterator[str]:
        """Consume a quoted string, yielding each content character unquoted."""
        if self._at_end() or self._peek() not in _DELIMITERS:
            return
        start = self._peek()
        close = _DELIMITERS[start]
        self._pos += 1
        escape = False
        while not self._at_end():
            c = self._peek()
            if not escape and c == close:
                self._pos += 1
                if self._at_end() or not _is_escape_for(start, self._peek()):
                    return
                yield c
                self._pos += 1
            else:
                escape = not escape and c == _ESCAPE_CHAR
                yield c
                self._pos += 1

    def _quoted(self) -> Token | None:
        begin = self._pos
        for _ in self._scan_quoted():
            pass
        if self._pos == begin:
            return None
        return Token(TokenKind.QUOTED, self._text[begin:self._pos])

    def _punctuation(self) -> Token | None:
        if self._at_end():
            return None
        c = self._peek()
        if _is_space(c) or _is_alphanumeric(c):
            return None
        self._pos += 1
        return Token(TokenKind.PUNCTUATION, c)

    def unquote(self) -> str:
        """Read a quoted string at the current position and return its content."""
        return "".join(self._scan_quoted())


def tokenize(string: str) -> list[Token]:
    """Split a string into tokens."""
    return list(Tokenizer(string))