"""Deployment tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import (
    GetDeploymentParams,
    GetDeploymentEventsParams,
    ListDeploymentFilesParams,
    GetDeploymentFileContentsParams,
    ListDeploymentsParams,
)
from ..upstream import optional_epoch_ms, path_segment, request_json

logger = logging.getLogger("vercel-mcp.handlers.deployments")


async def handle_get_deployment(params: GetDeploymentParams, client: httpx.AsyncClient) -> list[TextContent]:
    """Get a deployment by ID or hostname, including build status and regions."""
    result = await request_json(
        client,
        "GET",
        f"/v13/deployments/{path_segment(params.idOrUrl)}",
        params={
            "withGitRepoInfo": params.withGitRepoInfo,
            "teamId": params.teamId,
            "slug": params.slug,
        },
    )
    logger.info(f"Successfully retrieved deployment {params.idOrUrl}")
    return formatters.build_output("Deployment", result)


async def handle_get_deployment_events(
    params: GetDeploymentEventsParams,
    client: httpx.AsyncClient
) -> list[TextContent]:
    """Get build logs and events for a deployment.

    since/until arrive as ISO-8601 and are sent as epoch milliseconds.
    """
    result = await request_json(
        client,
        "GET",
        f"/v3/deployments/{path_segment(params.idOrUrl)}/events",
        params={
            "direction": params.direction,
            "follow": params.follow,
            "limit": params.limit,
            "name": params.name,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
            "statusCode": params.statusCode,
            "delimiter": params.delimiter,
            "builds": params.builds,
            "teamId": params.teamId,
            "slug": params.slug,
        },
    )
    count = len(result) if isinstance(result, list) else "?"
    logger.info(f"Successfully retrieved {count} events for deployment {params.idOrUrl}")
    return formatters.build_output("Deployment events", result)


async def handle_list_deployment_files(
    params: ListDeploymentFilesParams,
    client: httpx.AsyncClient
) -> list[TextContent]:
    """List the file tree of a deployment."""
    result = await request_json(
        client,
        "GET",
        f"/v6/deployments/{path_segment(params.id)}/files",
        params={"teamId": params.teamId, "slug": params.slug},
    )
    logger.info(f"Successfully listed files for deployment {params.id}")
    return formatters.build_output("Deployment files", result)


async def handle_get_deployment_file_contents(
    params: GetDeploymentFileContentsParams,
    client: httpx.AsyncClient
) -> list[TextContent]:
    result = await request_json(
        client,
        "GET",
        f"/v8/deployments/{path_segment(params.id)}/files/{path_segment(params.fileId)}",
        params={"path": params.path, "teamId": params.teamId, "slug": params.slug},
    )
    logger.info(f"Successfully retrieved file {params.fileId} from deployment {params.id}")
    return formatters.build_output("File contents", result)


async def handle_list_deployments(params: ListDeploymentsParams, client: httpx.AsyncClient) -> list[TextContent]:
    """List deployments, optionally filtered by project, target, state or time window."""
    result = await request_json(
        client,
        "GET",
        "/v6/deployments",
        params={
            "app": params.app,
            "from": optional_epoch_ms(params.from_),
            "limit": params.limit,
            "projectId": params.projectId,
            "target": params.target,
            "to": optional_epoch_ms(params.to),
            "users": params.users,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
            "state": params.state,
            "rollbackCandidate": params.rollbackCandidate,
            "teamId": params.teamId,
            "slug": params.slug,
        },
    )
    deployments = result.get("deployments", []) if isinstance(result, dict) else []
    logger.info(f"Successfully listed {len(deployments)} deployments")
    return formatters.build_output("Deployments", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_GET_DEPLOYMENT",
        description="Retrieve detailed information for a specific deployment including build status, "
                    "regions, and metadata",
        schema=GetDeploymentParams,
        handler=handle_get_deployment,
    ),
    ToolDefinition(
        name="VERCEL_GET_DEPLOYMENT_EVENTS",
        description="Retrieve build logs and events for a specific deployment to debug issues",
        schema=GetDeploymentEventsParams,
        handler=handle_get_deployment_events,
    ),
    ToolDefinition(
        name="VERCEL_LIST_DEPLOYMENT_FILES",
        description="List all files in a specific deployment to debug issues",
        schema=ListDeploymentFilesParams,
        handler=handle_list_deployment_files,
    ),
    ToolDefinition(
        name="VERCEL_GET_DEPLOYMENT_FILE_CONTENTS",
        description="Retrieve the contents of a specific file in a deployment",
        schema=GetDeploymentFileContentsParams,
        handler=handle_get_deployment_file_contents,
    ),
    ToolDefinition(
        name="VERCEL_LIST_DEPLOYMENTS",
        description="List all deployments for a specific project",
        schema=ListDeploymentsParams,
        handler=handle_list_deployments,
    ),
]
