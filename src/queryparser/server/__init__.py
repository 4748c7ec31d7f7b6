"""MCP server layer: intent dispatch, formatting and tool registration."""
