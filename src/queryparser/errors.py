"""Custom exception hierarchy for queryparser.

Malformed query strings never raise; these cover misuse of the library API.
"""

from __future__ import annotations


class QueryParserError(Exception):
    """Base exception for all queryparser errors."""


class OptionsError(QueryParserError, TypeError):
    """Invalid parser options (non-callable cut function, non-string names).

    Subclasses TypeError so callers catching bad-argument errors still work.
    """


class StateError(QueryParserError):
    """Operation not valid in the object's current state."""
