"""Pydantic parameter schemas for every tool.

Field names follow the upstream API (camelCase) because they are the
contract agents call with. Unknown fields are dropped during validation.
"""
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field

from .models import (
    DnsRecordType,
    DomainPriceType,
    EventDirection,
    DeploymentState,
    TeamMemberRole,
    TeamInviteRole,
    ProjectRole,
)
from .upstream import to_epoch_ms

ISO_HINT = '(ISO 8601 format, e.g., "2025-01-01T00:00:00Z" or "2025-01-01")'


def _check_timestamp(value: str) -> str:
    to_epoch_ms(value)
    return value


IsoTimestamp = Annotated[str, AfterValidator(_check_timestamp)]


class ToolParams(BaseModel):
    """Base for all tool parameter models."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, use_enum_values=True)


class TeamScopedParams(ToolParams):
    """Parameters for requests that may act on behalf of a team."""

    teamId: Optional[str] = Field(None, description="The Team identifier to perform the request on behalf of")
    slug: Optional[str] = Field(None, description="The Team slug to perform the request on behalf of")


# Deployment Schemas

class GetDeploymentParams(TeamScopedParams):
    idOrUrl: str = Field(..., description="The unique identifier or hostname of the deployment")
    withGitRepoInfo: Optional[str] = Field(None, description="Whether to add gitRepo information")


class GetDeploymentEventsParams(TeamScopedParams):
    idOrUrl: str = Field(..., description="The unique identifier or hostname of the deployment")
    direction: Optional[EventDirection] = Field(None, description="Order of the returned events based on timestamp")
    follow: Optional[int] = Field(None, description="Return live events as they happen (1 to enable)")
    limit: Optional[int] = Field(None, description="Maximum number of events to return (-1 for all)")
    name: Optional[str] = Field(None, description="Deployment build ID")
    since: Optional[IsoTimestamp] = Field(None, description=f"Timestamp to start pulling logs from {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Timestamp to pull logs until {ISO_HINT}")
    statusCode: Optional[str] = Field(None, description="HTTP status code range to filter events by (e.g. '5xx')")
    delimiter: Optional[int] = Field(None, description="Delimiter option")
    builds: Optional[int] = Field(None, description="Builds option")


class ListDeploymentFilesParams(TeamScopedParams):
    id: str = Field(..., description="The unique deployment identifier")


class GetDeploymentFileContentsParams(TeamScopedParams):
    id: str = Field(..., description="The unique deployment identifier")
    fileId: str = Field(..., description="The unique file identifier")
    path: Optional[str] = Field(None, description="Path to the file (only for Git deployments)")


class ListDeploymentsParams(TeamScopedParams):
    app: Optional[str] = Field(None, description="Name of the deployment")
    from_: Optional[IsoTimestamp] = Field(
        None, alias="from", description=f"Get deployments created after this timestamp {ISO_HINT}"
    )
    limit: Optional[int] = Field(None, description="Maximum number of deployments to list")
    projectId: Optional[str] = Field(None, description="Filter deployments from the given ID or name")
    target: Optional[str] = Field(None, description="Filter deployments based on the environment")
    to: Optional[IsoTimestamp] = Field(None, description=f"Get deployments created before this timestamp {ISO_HINT}")
    users: Optional[str] = Field(None, description="Filter deployments based on users who created them")
    since: Optional[IsoTimestamp] = Field(None, description=f"Get deployments created after this timestamp {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Get deployments created before this timestamp {ISO_HINT}")
    state: Optional[DeploymentState] = Field(None, description="Filter by deployment state")
    rollbackCandidate: Optional[bool] = Field(None, description="Filter deployments based on rollback candidacy")


# DNS Schemas

class CreateDnsRecordParams(TeamScopedParams):
    domain: str = Field(..., description="The domain used to create the DNS record")
    type: DnsRecordType = Field(..., description="The type of record")
    name: str = Field(..., description="The name of the DNS record")
    value: str = Field(..., description="The value of the DNS record")
    ttl: Optional[int] = Field(None, ge=60, le=2147483647, description="The Time to live (TTL) value")
    comment: Optional[str] = Field(None, max_length=500, description="A comment to add context")


class ListDnsRecordsParams(TeamScopedParams):
    domain: str = Field(..., description="The domain name")
    limit: Optional[str] = Field(None, description="Maximum number of records to list")
    since: Optional[IsoTimestamp] = Field(None, description=f"Get records created after this date {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Get records created before this date {ISO_HINT}")


# Domain Schemas

class CheckDomainAvailabilityParams(TeamScopedParams):
    name: str = Field(..., description="The name of the domain to check")


class GetDomainPriceParams(TeamScopedParams):
    name: str = Field(..., description="The name of the domain to check price for")
    type: Optional[DomainPriceType] = Field(None, description="Domain status type to check price for")


class ListDomainsParams(TeamScopedParams):
    limit: Optional[int] = Field(None, description="Maximum number of domains to list")
    since: Optional[IsoTimestamp] = Field(None, description=f"Get domains created after this date {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Get domains created before this date {ISO_HINT}")


# Project Schemas

class ListProjectsParams(TeamScopedParams):
    pass


class GetProjectParams(TeamScopedParams):
    idOrName: str = Field(..., description="The unique project identifier or project name")


# Team Schemas

class GetTeamParams(ToolParams):
    teamId: str = Field(..., description="The Team identifier")


class ListTeamsParams(ToolParams):
    limit: Optional[int] = Field(None, description="Maximum number of teams to return")
    since: Optional[IsoTimestamp] = Field(None, description=f"Include teams created after this date {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Include teams created before this date {ISO_HINT}")


class ListTeamMembersParams(ToolParams):
    teamId: str = Field(..., description="The Team identifier")
    limit: Optional[int] = Field(None, ge=1, description="Maximum number of members to return")
    since: Optional[IsoTimestamp] = Field(None, description=f"Include members added after this date {ISO_HINT}")
    until: Optional[IsoTimestamp] = Field(None, description=f"Include members added before this date {ISO_HINT}")
    search: Optional[str] = Field(None, description="Search by name, username, or email")
    role: Optional[TeamMemberRole] = Field(None, description="Filter by role")
    excludeProject: Optional[str] = Field(None, description="Exclude members from specific project")
    eligibleMembersForProjectId: Optional[str] = Field(None, description="Include members eligible for project")


class ProjectRoleAssignment(ToolParams):
    projectId: str = Field(..., description="The project identifier")
    role: ProjectRole = Field(..., description="Role within the project")


class InviteTeamMemberParams(ToolParams):
    teamId: str = Field(..., description="The Team identifier")
    role: TeamInviteRole = Field(..., description="The role to assign")
    email: Optional[EmailStr] = Field(None, description="The email address to invite")
    uid: Optional[str] = Field(None, description="The user ID to invite")
    projects: Optional[list[ProjectRoleAssignment]] = Field(None, description="Project-specific roles")


class RemoveTeamMemberParams(ToolParams):
    teamId: str = Field(..., description="The Team identifier")
    uid: str = Field(..., description="The user ID to remove")
    newDefaultTeamId: Optional[str] = Field(None, description="New default team ID for the removed user")


# User Schemas

class GetUserParams(ToolParams):
    pass
