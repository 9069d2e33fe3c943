"""Tool call dispatch shared between stdio and HTTP transports.

Pipeline: registry lookup -> argument validation -> one upstream request ->
formatted content. Every failure leaves this module as a ToolError subclass.
"""
import logging
from typing import Any, Optional

import httpx
from mcp.types import TextContent

from .auth import AuthContext
from .config import Settings, get_settings
from .errors import InternalError, ToolError
from .registry import get_tool
from .upstream import create_client
from .validation import validate_arguments

logger = logging.getLogger("vercel-mcp.dispatch")


async def call_tool(
    name: str,
    arguments: Optional[Any],
    auth: AuthContext,
    settings: Optional[Settings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> list[TextContent]:
    """Run one tool call with the caller's credentials.

    The upstream client lives only for the duration of this call.

    Raises:
        NotFoundError: Unknown tool name
        ValidationError: Arguments do not match the tool schema
        UpstreamError: The Vercel API failed or was unreachable
        InternalError: Anything else
    """
    logger.info(f"Tool call: {name} with arguments: {arguments}")
    settings = settings or get_settings()

    try:
        definition = get_tool(name)
        params = validate_arguments(definition, arguments)
        async with create_client(auth, settings, transport) as client:
            return await definition.handler(params, client)
    except ToolError as e:
        logger.warning(f"Tool {name} failed: {type(e).__name__}: {e.message}")
        raise
    except Exception as e:
        logger.exception(f"Unexpected error during {name} call")
        raise InternalError() from e
