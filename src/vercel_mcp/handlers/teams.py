"""Team and team membership tool handlers."""
import logging

import httpx
from mcp.types import TextContent

from .. import formatters
from ..definitions import ToolDefinition
from ..schemas import (
    GetTeamParams,
    ListTeamsParams,
    ListTeamMembersParams,
    InviteTeamMemberParams,
    RemoveTeamMemberParams,
)
from ..upstream import optional_epoch_ms, path_segment, request_json

logger = logging.getLogger("vercel-mcp.handlers.teams")


async def handle_get_team(params: GetTeamParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(client, "GET", f"/v2/teams/{path_segment(params.teamId)}")
    logger.info(f"Successfully retrieved team {params.teamId}")
    return formatters.build_output("Team information", result)


async def handle_list_teams(params: ListTeamsParams, client: httpx.AsyncClient) -> list[TextContent]:
    """List teams the authenticated user belongs to."""
    result = await request_json(
        client,
        "GET",
        "/v2/teams",
        params={
            "limit": params.limit,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
        },
    )
    teams = result.get("teams", []) if isinstance(result, dict) else []
    logger.info(f"Successfully listed {len(teams)} teams")
    return formatters.build_output("Teams", result)


async def handle_list_team_members(params: ListTeamMembersParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(
        client,
        "GET",
        f"/v2/teams/{path_segment(params.teamId)}/members",
        params={
            "limit": params.limit,
            "since": optional_epoch_ms(params.since),
            "until": optional_epoch_ms(params.until),
            "search": params.search,
            "role": params.role,
            "excludeProject": params.excludeProject,
            "eligibleMembersForProjectId": params.eligibleMembersForProjectId,
        },
    )
    members = result.get("members", []) if isinstance(result, dict) else []
    logger.info(f"Successfully listed {len(members)} members for team {params.teamId}")
    return formatters.build_output("Team members", result)


async def handle_invite_team_member(params: InviteTeamMemberParams, client: httpx.AsyncClient) -> list[TextContent]:
    """Invite a user to a team by email or user ID, with optional per-project roles."""
    body = params.model_dump(include={"role", "email", "uid", "projects"}, exclude_none=True)
    result = await request_json(
        client,
        "POST",
        f"/v1/teams/{path_segment(params.teamId)}/members",
        json=body,
    )
    invitee = params.email or params.uid or "user"
    logger.info(f"Successfully invited {invitee} to team {params.teamId} as {params.role}")
    return formatters.build_output("Team member invited", result)


async def handle_remove_team_member(params: RemoveTeamMemberParams, client: httpx.AsyncClient) -> list[TextContent]:
    result = await request_json(
        client,
        "DELETE",
        f"/v1/teams/{path_segment(params.teamId)}/members/{path_segment(params.uid)}",
        params={"newDefaultTeamId": params.newDefaultTeamId},
    )
    logger.info(f"Successfully removed user {params.uid} from team {params.teamId}")
    return formatters.build_output("Team member removed", result)


TOOLS = [
    ToolDefinition(
        name="VERCEL_GET_TEAM",
        description="Get information for a specific team",
        schema=GetTeamParams,
        handler=handle_get_team,
    ),
    ToolDefinition(
        name="VERCEL_LIST_TEAMS",
        description="Get a list of all teams the authenticated user is a member of",
        schema=ListTeamsParams,
        handler=handle_list_teams,
    ),
    ToolDefinition(
        name="VERCEL_LIST_TEAM_MEMBERS",
        description="Get a list of team members",
        schema=ListTeamMembersParams,
        handler=handle_list_team_members,
    ),
    ToolDefinition(
        name="VERCEL_INVITE_TEAM_MEMBER",
        description="Invite a user to join a team",
        schema=InviteTeamMemberParams,
        handler=handle_invite_team_member,
    ),
    ToolDefinition(
        name="VERCEL_REMOVE_TEAM_MEMBER",
        description="Remove a member from a team",
        schema=RemoveTeamMemberParams,
        handler=handle_remove_team_member,
    ),
]
