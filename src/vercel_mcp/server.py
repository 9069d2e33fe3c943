"""Vercel MCP stdio server - expose the Vercel API to local AI assistants."""
import asyncio
import logging
from typing import Any

from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import (
    Tool,
    TextContent,
    ImageContent,
    EmbeddedResource,
)

from . import formatters
from . import tools
from .auth import auth_context_from_token
from .config import get_settings
from .dispatch import call_tool as dispatch_call_tool
from .errors import ToolError
from .logging_config import configure_logging

logger = logging.getLogger("vercel-mcp.stdio")

app = Server("vercel-tools")


@app.list_tools()
async def list_tools() -> list[Tool]:
    """List available MCP tools for the Vercel API."""
    return tools.get_tools()


@app.call_tool()
async def call_tool(name: str, arguments: Any) -> list[TextContent | ImageContent | EmbeddedResource]:
    """Handle MCP tool calls using the token configured in the environment."""
    settings = get_settings()
    try:
        auth = auth_context_from_token(settings.vercel_access_token)
        return await dispatch_call_tool(name, arguments, auth, settings=settings)
    except ToolError as e:
        return formatters.format_error(e.message)


async def main():
    """Run the MCP server over stdio."""
    settings = get_settings()
    configure_logging(settings)
    if settings.vercel_access_token:
        logger.info("MCP Server configured with access token authentication")
    else:
        logger.warning("VERCEL_ACCESS_TOKEN is not set; tool calls will be rejected")

    async with stdio_server() as (read_stream, write_stream):
        await app.run(read_stream, write_stream, app.create_initialization_options())


def run():
    """Entry point for the vercel-mcp-stdio console script."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
