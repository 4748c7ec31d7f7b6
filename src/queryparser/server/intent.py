"""Intent layer — runs tool requests against the parser and formats replies."""

from __future__ import annotations

import logging

from queryparser.model.query import Query
from queryparser.parser.query_parser import DEFAULT_OPTIONS, Options, parse
from queryparser.server.formatter import format_query, format_result

logger = logging.getLogger(__name__)


class QueryIntent:
    """Core orchestration: parse query strings, format responses."""

    def __init__(self, options: Options | None = None) -> None:
        self.options = options if options is not None else DEFAULT_OPTIONS
        self.last: Query | None = None

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute_parse(self, q: str) -> str:
        """Parse *q* and return the filters and raw text, one per line."""
        logger.debug("query_parse %r", q)
        self.last = parse(q, self.options)
        return format_result(self.last)

    def execute_canonical(self, q: str) -> str:
        """Parse *q* and return its canonical string form."""
        logger.debug("query_canonical %r", q)
        self.last = parse(q, self.options)
        return format_query(self.last)

    def execute_lookup(self, name: str) -> str:
        """Return the values of *name* in the last parsed query."""
        if self.last is None:
            return "! No query parsed yet. Use query_parse first."
        values, found = self.last.get(name)
        if not found:
            return f"! No filter {name.lower()!r} in last query."
        return ", ".join(values)
