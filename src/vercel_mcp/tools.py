"""MCP tool definitions for the Vercel catalog.

This module provides the definitive list of MCP tools used by both stdio and HTTP transports.
"""

from mcp.types import Tool

from .registry import REGISTRY


def get_tools() -> list[Tool]:
    """Get the list of all MCP tools, in registration order."""
    return [
        Tool(
            name=definition.name,
            description=definition.description,
            inputSchema=definition.input_schema(),
        )
        for definition in REGISTRY.values()
    ]
