"""Formatting of upstream responses into MCP text content."""
import json
from typing import Any

from mcp.types import TextContent


def format_json(data: Any) -> str:
    """Serialize an upstream payload for display."""
    if isinstance(data, str):
        return data
    return json.dumps(data, indent=2, ensure_ascii=False, default=str)


def build_output(label: str, data: Any) -> list[TextContent]:
    """Wrap a successful response as a labelled text block."""
    return [TextContent(type="text", text=f"{label}:\n{format_json(data)}")]


def format_error(message: str) -> list[TextContent]:
    """Error text as returned by the stdio transport."""
    return [TextContent(type="text", text=f"Error: {message}")]
