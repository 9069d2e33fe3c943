"""Project tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import ListProjectsParams, GetProjectParams
from ..upstream import path_segment, request_json

logger = logging.getLogger("vercel-mcp.handlers.projects")


async def handle_list_projects(params: ListProjectsParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(
        client,
        "GET",
        "/v10/projects",
        params={"teamId": params.teamId, "slug": params.slug},
    )
    projects = result.get("projects", []) if isinstance(result, dict) else []
    logger.info(f"Successfully listed {len(projects)} projects")
    return formatters.build_output("Projects", result)


async def handle_get_project(params: GetProjectParams, client: httpx.AsyncClient) -> list[TextContent]:
    """Get a project by ID or by name. Both forms are passed through unchanged."""
    result = await request_json(
        client,
        "GET",
        f"/v9/projects/{path_segment(params.idOrName)}",
        params={"teamId": params.teamId, "slug": params.slug},
    )
    logger.info(f"Successfully retrieved project {params.idOrName}")
    return formatters.build_output("Project", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_LIST_PROJECTS",
        description="List all projects from Vercel. Commands: 'list projects', 'show projects', "
                    "'get projects', 'list all projects', 'show my projects', 'list vercel projects'",
        schema=ListProjectsParams,
        handler=handle_list_projects,
    ),
    ToolDefinition(
        name="VERCEL_GET_PROJECT",
        description="Get a project from Vercel using either id or name",
        schema=GetProjectParams,
        handler=handle_get_project,
    ),
]
