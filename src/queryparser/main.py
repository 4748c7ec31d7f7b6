"""Search query parser exposed as an MCP server.

Wires the :class:`~queryparser.server.intent.QueryIntent` facade into a
FastMCP server. Parser options are fixed when the server is created.
"""

from __future__ import annotations

from fastmcp import FastMCP

from queryparser.parser.query_parser import Options
from queryparser.server.intent import QueryIntent
from queryparser.server.tools import register_tools


def create_server(options: Options | None = None) -> FastMCP:
    """Build a FastMCP server whose tools parse with *options*."""
    mcp = FastMCP(
        name="queryparser",
        instructions="Search query parser. Call query_help for the syntax reference.",
    )
    register_tools(mcp, QueryIntent(options))
    return mcp


mcp = create_server()


def main() -> None:
    mcp.run()


if __name__ == "__main__":
    main()
