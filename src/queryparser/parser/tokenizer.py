"""Quote-aware tokenizer for search query strings.

Scans a query into typed tokens: delimiters (``:``), quoted fields, bare
words, whitespace runs and a final end-of-input marker. Tokens are produced
on demand by a pull-based iterator; the scanner never raises.

Examples
--------
>>> [t.literal for t in tokenize('tag:"a b" x')]
['tag', ':', '"a b"', ' ', 'x', '']
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Callable, Iterator, Optional


class TokenKind(enum.Enum):
    EOF = "eof"
    DELIM = "delim"  # :
    FIELD = "field"  # quoted span, quotes included
    IDENT = "ident"  # run of word characters
    WS = "ws"  # run of spaces/tabs


@dataclass(frozen=True)
class Token:
    """A classified slice of the input."""

    kind: TokenKind
    literal: str
    pos: int = 0

    def __str__(self) -> str:
        if self.kind is TokenKind.EOF:
            return "EOF"
        if len(self.literal) > 10:
            return f"{self.literal[:10]!r}..."
        return repr(self.literal)


def is_whitespace(ch: str | None) -> bool:
    """Return True if *ch* is a space or a tab."""
    return ch == " " or ch == "\t"


def is_word(ch: str | None) -> bool:
    """Return True if *ch* may appear in a bare word (printable ASCII but ``:``)."""
    return ch is not None and "!" <= ch <= "~" and ch != ":"


# A state scans one token and returns the next state, or None when done.
_State = Callable[["Tokenizer"], Optional["_State"]]


class Tokenizer:
    """Single-use iterator of :class:`Token` over *text*.

    Always finishes with exactly one ``EOF`` token. Characters outside the
    recognised classes (control characters, non-ASCII outside quotes) end
    the stream early.
    """

    def __init__(self, text: str) -> None:
        self.text = text
        self._pos = 0  # cursor
        self._start = 0  # start of the token being scanned
        self._width = 0  # width of the last read, for backup()
        self._pending: list[Token] = []
        self._state: _State | None = _scan_main

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        while not self._pending:
            if self._state is None:
                raise StopIteration
            self._state = self._state(self)
            if self._state is None and not self._pending:
                # Stream cut short by an unrecognised character.
                self._emit(TokenKind.EOF)
        return self._pending.pop(0)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    def _next(self) -> str | None:
        if self._pos >= len(self.text):
            self._width = 0
            return None
        ch = self.text[self._pos]
        self._width = 1
        self._pos += 1
        return ch

    def _backup(self) -> None:
        self._pos -= self._width

    def _peek(self) -> str | None:
        ch = self._next()
        self._backup()
        return ch

    def _emit(self, kind: TokenKind) -> None:
        literal = self.text[self._start:self._pos] if kind is not TokenKind.EOF else ""
        self._pending.append(Token(kind, literal, self._start))
        self._start = self._pos


# ----------------------------------------------------------------------
# States
# ----------------------------------------------------------------------

def _scan_main(s: Tokenizer) -> _State | None:
    ch = s._next()
    if ch is None:
        s._emit(TokenKind.EOF)
        return None
    if is_whitespace(ch):
        return _scan_whitespace
    if ch == ":":
        s._emit(TokenKind.DELIM)
        return _scan_main
    if ch == '"':
        return _scan_double_quote
    if ch == "'":
        return _scan_single_quote
    if is_word(ch):
        return _scan_word
    return None


def _scan_whitespace(s: Tokenizer) -> _State:
    # One whitespace character has already been read.
    while is_whitespace(s._peek()):
        s._next()
    s._emit(TokenKind.WS)
    return _scan_main


def _scan_word(s: Tokenizer) -> _State:
    while is_word(s._peek()):
        s._next()
    s._emit(TokenKind.IDENT)
    return _scan_main


def _scan_quoted(s: Tokenizer, quote: str) -> _State:
    while True:
        ch = s._next()
        if ch == "\\":
            if s._next() is not None:
                continue
            break
        if ch is None or ch == quote:
            break
    s._emit(TokenKind.FIELD)
    return _scan_main


def _scan_double_quote(s: Tokenizer) -> _State:
    return _scan_quoted(s, '"')


def _scan_single_quote(s: Tokenizer) -> _State:
    return _scan_quoted(s, "'")


def tokenize(text: str) -> list[Token]:
    """Scan all of *text* and return its tokens, ending with ``EOF``."""
    return list(Tokenizer(text))
