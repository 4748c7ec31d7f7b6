"""FastMCP tool registrations for queryparser."""

from __future__ import annotations

from fastmcp import FastMCP

from queryparser.server.intent import QueryIntent
from queryparser.server.reference_card import REFERENCE_CARD, build_tool_description


def register_tools(mcp: FastMCP, intent: QueryIntent) -> None:
    """Register the query tools on the given MCP server."""

    @mcp.tool(description=build_tool_description())
    def query_parse(q: str) -> str:
        return intent.execute_parse(q)

    @mcp.tool
    def query_canonical(q: str) -> str:
        """Parse a search query and return it in canonical form:
        sorted name:"value" filters followed by the raw text."""
        return intent.execute_canonical(q)

    @mcp.tool
    def query_lookup(name: str) -> str:
        """Values of one filter from the most recently parsed query."""
        return intent.execute_lookup(name)

    @mcp.tool
    def query_help() -> str:
        """Returns the search query syntax reference card."""
        return REFERENCE_CARD
