"""Query parser — turn a search string into filters and residual text.

Consumes the token stream from :mod:`queryparser.parser.tokenizer` with
one-token lookahead. ``name:value`` sequences become filters; everything
else is kept as raw text. Malformed input never raises: it ends up in the
raw text instead.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from typing import Iterable

from queryparser.errors import OptionsError, StateError
from queryparser.model.query import Query, QueryBuilder
from queryparser.parser.cutset import CutFn, cutset, default_cut, strip_duplicate_ws
from queryparser.parser.tokenizer import Token, TokenKind, Tokenizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Options:
    """Parser configuration.

    Parameters
    ----------
    cut_fn : callable or None
        Returns True for characters to strip from filter values and raw
        text. ``None`` disables stripping.
    allowed : iterable of str
        Filter names to recognise, compared case-insensitively. Empty means
        every name is a filter.
    """

    cut_fn: CutFn | None = None
    allowed: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        if self.cut_fn is not None and not callable(self.cut_fn):
            raise OptionsError(f"cut_fn must be callable, got {self.cut_fn!r}")
        allowed: Iterable[object] = self.allowed or ()
        if isinstance(allowed, str):
            raise OptionsError("allowed must be a collection of names, not a string")
        names = set()
        for name in allowed:
            if not isinstance(name, str):
                raise OptionsError(f"allowed filter names must be strings, got {name!r}")
            names.add(name.lower())
        object.__setattr__(self, "allowed", frozenset(names))

    def is_allowed(self, name: str) -> bool:
        return not self.allowed or name.lower() in self.allowed


DEFAULT_OPTIONS = Options(cut_fn=default_cut)


def is_ident(text: str) -> bool:
    """Return True if *text* only holds letters, digits, ``_`` and ``-``."""
    return all(ch.isalpha() or ch.isdigit() or ch in "_-" for ch in text)


class Parser:
    """Single-use parser for one query string."""

    def __init__(self, query: str, options: Options | None = None) -> None:
        self.query = query
        self.options = options if options is not None else Options()
        self._tokens = Tokenizer(query)
        self._buf: deque[Token] = deque()
        self._parsed = False

    # ------------------------------------------------------------------
    # Token stream
    # ------------------------------------------------------------------

    def _scan(self) -> Token:
        """Return the next token, replaying pushed-back tokens first."""
        if self._buf:
            return self._buf.popleft()
        return next(self._tokens)

    def _unscan(self, token: Token) -> None:
        self._buf.append(token)

    def _accept(self, kind: TokenKind) -> bool:
        """Consume the next token if it is of *kind*, else push it back."""
        token = self._scan()
        if token.kind is kind:
            return True
        self._unscan(token)
        return False

    # ------------------------------------------------------------------
    # Grammar
    # ------------------------------------------------------------------

    def parse(self) -> Query:
        if self._parsed:
            raise StateError("Parser instances can only parse once")
        self._parsed = True

        builder = QueryBuilder()
        raw: list[str] = []

        while True:
            token = self._scan()
            if token.kind is TokenKind.EOF:
                break
            if token.kind is TokenKind.IDENT:
                self._scan_field(token, builder, raw)
            else:
                raw.append(token.literal)

        text = "".join(raw)
        if self.options.cut_fn is not None:
            text = cutset(text, self.options.cut_fn)
        query = builder.build(strip_duplicate_ws(text).strip())
        logger.debug(
            "parsed %r: filters=%s raw_len=%d",
            self.query, sorted(query.filters), len(query.raw),
        )
        return query

    def _scan_field(self, name: Token, builder: QueryBuilder, raw: list[str]) -> None:
        if not is_ident(name.literal) or not self.options.is_allowed(name.literal):
            raw.append(name.literal)
            return

        delim = self._scan()
        if delim.kind is not TokenKind.DELIM:
            self._unscan(delim)
            raw.append(name.literal)
            return

        # A value may span several tokens, e.g. "bar"baz or an unterminated quote.
        parts: list[str] = []
        while True:
            token = self._scan()
            if token.kind in (TokenKind.FIELD, TokenKind.IDENT):
                parts.append(token.literal)
                continue
            if not parts:
                # Bare "name:" with nothing usable after it.
                self._unscan(delim)
                self._unscan(token)
                raw.append(name.literal)
                return
            self._unscan(token)
            break

        self._accept(TokenKind.WS)

        value = "".join(parts)
        if self.options.cut_fn is not None:
            value = cutset(value, self.options.cut_fn)
        builder.add(name.literal, value)


def parse(query: str, options: Options | None = None) -> Query:
    """Parse *query* into a :class:`~queryparser.model.query.Query`.

    Without *options* the default cutset applies and every filter name is
    accepted.

    Examples
    --------
    >>> q = parse('hello world tag:a,b')
    >>> q.raw, q.get("tag")
    ('hello world', (('a', 'b'), True))
    """
    return Parser(query, options if options is not None else DEFAULT_OPTIONS).parse()
