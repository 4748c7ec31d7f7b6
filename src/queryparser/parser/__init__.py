"""Parser package — tokenize and parse search query strings."""

from queryparser.parser.cutset import cutset, default_cut, strip_duplicate_ws
from queryparser.parser.tokenizer import Token, TokenKind, Tokenizer, tokenize
from queryparser.parser.query_parser import (
    DEFAULT_OPTIONS,
    Options,
    Parser,
    is_ident,
    parse,
)

__all__ = [
    "cutset",
    "default_cut",
    "strip_duplicate_ws",
    "tokenize",
    "is_ident",
    "parse",
    "DEFAULT_OPTIONS",
    "Options",
    "Parser",
    "Token",
    "TokenKind",
    "Tokenizer",
]
