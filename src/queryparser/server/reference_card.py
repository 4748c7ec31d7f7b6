"""Query syntax reference card, used as the MCP tool description."""

from __future__ import annotations

_FILTERS_SECTION = """\
## Filters
  name:value         Single value                 tag:python
  name:a,b,c         Comma list, one value each   tag:python,go
  name:"a b"         Double-quoted, kept whole    author:"jane doe"
  name:'a b'         Single-quoted, kept whole    author:'jane doe'

  Names are case-insensitive and may hold letters, digits, _ and -.
  Repeating a name appends: tag:a tag:b -> tag = a, b"""

_RAW_SECTION = """\
## Raw text
  Everything that is not a filter is kept as free text.
  hello world tag:a  -> raw "hello world", tag = a
  A name with no value (a:) stays in the raw text."""

_CLEANUP_SECTION = """\
## Cleanup
  By default only letters, digits, spaces and _ , - . : are kept.
  Runs of spaces collapse to one; surrounding whitespace is dropped.
  Unterminated quotes never fail: a:" yields an empty filter a."""

REFERENCE_CARD = "\n\n".join(
    [
        "# Search query syntax",
        _FILTERS_SECTION,
        _RAW_SECTION,
        _CLEANUP_SECTION,
    ]
)


def build_tool_description() -> str:
    """Return the description attached to the query_parse tool."""
    return "Parse a search query into filters and raw text.\n\n" + REFERENCE_CARD
