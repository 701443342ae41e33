"""MCP server exposing a built snapshot."""

from docsnap.server.mcp_server import create_mcp_server

__all__ = ["create_mcp_server"]
