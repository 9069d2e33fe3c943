"""User tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import GetUserParams
from ..upstream import request_json

logger = logging.getLogger("vercel-mcp.handlers.users")


async def handle_get_user(params: GetUserParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(client, "GET", "/v2/user")
    logger.info("Successfully retrieved authenticated user")
    return formatters.build_output("User", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_GET_USER",
        description="Retrieves information related to the currently authenticated User",
        schema=GetUserParams,
        handler=handle_get_user,
    ),
]
