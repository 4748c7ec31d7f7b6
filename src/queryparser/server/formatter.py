"""Compact response formatting for parsed queries."""

from __future__ import annotations

from queryparser.model.query import Query


def format_query(query: Query) -> str:
    """Render *query* in canonical form.

    Filters are sorted by name, each filter's values sorted, every value
    written as ``name:"value"``; the raw text comes last.

    >>> from queryparser import parse
    >>> format_query(parse("zeta b:2,1 a:x"))
    'a:"x" b:"1" b:"2" zeta'
    """
    parts: list[str] = []
    for name in sorted(query.filters):
        for value in sorted(query.filters[name]):
            parts.append(f'{name}:"{value}"')
    if query.raw:
        parts.append(query.raw)
    return " ".join(parts).strip()


def format_result(query: Query) -> str:
    """Format a parse result, one filter per line then the raw text."""
    lines: list[str] = []
    if not query.filters:
        lines.append("No filters.")
    for name, values in query.filters.items():
        rendered = ", ".join(f'"{v}"' for v in values) or "(no values)"
        lines.append(f"{name}: {rendered}")
    lines.append(f'raw: "{query.raw}"')
    return "\n".join(lines)
