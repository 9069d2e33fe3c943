"""Tests for tool handlers through the dispatcher."""
import json

import pytest

from vercel_mcp.dispatch import call_tool
from vercel_mcp.errors import InternalError, NotFoundError, UpstreamError, ValidationError
from vercel_mcp.registry import REGISTRY

TOOLS_WITH_REQUIRED_FIELDS = [
    (name, {field for field, info in definition.schema.model_fields.items() if info.is_required()})
    for name, definition in REGISTRY.items()
    if any(info.is_required() for info in definition.schema.model_fields.values())
]


async def run(upstream, settings, auth, name, arguments):
    return await call_tool(name, arguments, auth, settings=settings, transport=upstream.transport)


class TestDispatchFailures:
    """Failures before the network never reach the upstream API."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name,required", TOOLS_WITH_REQUIRED_FIELDS)
    async def test_missing_required_parameter(self, upstream, settings, auth, name, required):
        with pytest.raises(ValidationError) as exc_info:
            await run(upstream, settings, auth, name, {})

        assert exc_info.value.field in required
        assert {failure["field"] for failure in exc_info.value.errors} == required
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_unknown_tool(self, upstream, settings, auth):
        with pytest.raises(NotFoundError):
            await run(upstream, settings, auth, "VERCEL_NOT_A_TOOL", {})
        assert upstream.requests == []

    @pytest.mark.asyncio
    async def test_upstream_404(self, upstream, settings, auth):
        upstream.respond(404, {"error": {"code": "not_found", "message": "Team not found"}})

        with pytest.raises(UpstreamError) as exc_info:
            await run(upstream, settings, auth, "VERCEL_GET_TEAM", {"teamId": "team_missing"})

        assert exc_info.value.status_code == 404
        assert "404" in exc_info.value.message
        assert "Team not found" in exc_info.value.message
        assert len(upstream.requests) == 1

    @pytest.mark.asyncio
    async def test_unexpected_failure_becomes_internal_error(self, upstream, settings, auth):
        upstream.error = RuntimeError("transport exploded")

        with pytest.raises(InternalError) as exc_info:
            await run(upstream, settings, auth, "VERCEL_GET_USER", {})

        assert exc_info.value.message == "Internal server error"
        assert "exploded" not in exc_info.value.message


class TestTeams:

    @pytest.mark.asyncio
    async def test_list_teams_with_limit(self, upstream, settings, auth):
        upstream.respond(200, {"teams": [{"id": "team_1"}], "pagination": {}})

        content = await run(upstream, settings, auth, "VERCEL_LIST_TEAMS", {"limit": 10})

        request = upstream.last
        assert request.method == "GET"
        assert request.url.path == "/v2/teams"
        assert dict(request.url.params) == {"limit": "10"}
        assert request.headers["Authorization"] == "Bearer test-token"
        assert content[0].type == "text"
        assert content[0].text.startswith("Teams:\n")
        assert json.loads(content[0].text.split("\n", 1)[1]) == {"teams": [{"id": "team_1"}], "pagination": {}}

    @pytest.mark.asyncio
    async def test_list_teams_converts_timestamps(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_TEAMS", {
            "since": "2025-01-01T00:00:00Z",
            "until": "2025-01-02",
        })

        assert dict(upstream.last.url.params) == {"since": "1735689600000", "until": "1735776000000"}

    @pytest.mark.asyncio
    async def test_get_team(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_GET_TEAM", {"teamId": "my-team"})
        assert upstream.last.url.path == "/v2/teams/my-team"

    @pytest.mark.asyncio
    async def test_list_team_members_filters(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_TEAM_MEMBERS", {
            "teamId": "team_1",
            "role": "DEVELOPER",
            "search": "alice",
        })

        request = upstream.last
        assert request.url.path == "/v2/teams/team_1/members"
        assert dict(request.url.params) == {"role": "DEVELOPER", "search": "alice"}

    @pytest.mark.asyncio
    async def test_invite_team_member(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_INVITE_TEAM_MEMBER", {
            "teamId": "team_1",
            "role": "MEMBER",
            "email": "new@example.com",
            "projects": [{"projectId": "prj_1", "role": "VIEWER"}],
        })

        request = upstream.last
        assert request.method == "POST"
        assert request.url.path == "/v1/teams/team_1/members"
        assert json.loads(request.content) == {
            "role": "MEMBER",
            "email": "new@example.com",
            "projects": [{"projectId": "prj_1", "role": "VIEWER"}],
        }

    @pytest.mark.asyncio
    async def test_remove_team_member(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_REMOVE_TEAM_MEMBER", {"teamId": "team_1", "uid": "usr_1"})

        request = upstream.last
        assert request.method == "DELETE"
        assert request.url.path == "/v1/teams/team_1/members/usr_1"
        assert request.url.query == b""


class TestDns:

    @pytest.mark.asyncio
    async def test_create_dns_record_minimal_body(self, upstream, settings, auth):
        upstream.respond(200, {"uid": "rec_1"})

        content = await run(upstream, settings, auth, "VERCEL_CREATE_DNS_RECORD", {
            "domain": "example.com",
            "type": "A",
            "name": "www",
            "value": "1.2.3.4",
        })

        request = upstream.last
        assert request.method == "POST"
        assert request.url.path == "/v2/domains/example.com/records"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {
            "domain": "example.com",
            "type": "A",
            "name": "www",
            "value": "1.2.3.4",
        }
        assert request.url.query == b""
        assert "rec_1" in content[0].text

    @pytest.mark.asyncio
    async def test_create_dns_record_team_scope_in_query(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_CREATE_DNS_RECORD", {
            "domain": "example.com",
            "type": "CNAME",
            "name": "docs",
            "value": "cname.vercel-dns.com",
            "ttl": 60,
            "teamId": "team_1",
        })

        request = upstream.last
        assert dict(request.url.params) == {"teamId": "team_1"}
        body = json.loads(request.content)
        assert body["ttl"] == 60
        assert "teamId" not in body
        assert "comment" not in body

    @pytest.mark.asyncio
    async def test_list_dns_records(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_DNS_RECORDS", {
            "domain": "example.com",
            "limit": "20",
            "since": "2025-01-01T00:00:00Z",
        })

        request = upstream.last
        assert request.url.path == "/v4/domains/example.com/records"
        assert dict(request.url.params) == {"limit": "20", "since": "1735689600000"}


class TestDeployments:

    @pytest.mark.asyncio
    async def test_get_deployment_by_hostname(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_GET_DEPLOYMENT", {"idOrUrl": "my-app-abc.vercel.app"})

        request = upstream.last
        assert request.url.path == "/v13/deployments/my-app-abc.vercel.app"
        assert request.url.query == b""

    @pytest.mark.asyncio
    async def test_list_deployments_all_time_filters(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_DEPLOYMENTS", {
            "projectId": "prj_1",
            "from": "2025-01-01T00:00:00Z",
            "to": "2025-01-01T00:00:01Z",
            "state": "READY",
            "rollbackCandidate": True,
        })

        request = upstream.last
        assert request.url.path == "/v6/deployments"
        assert dict(request.url.params) == {
            "projectId": "prj_1",
            "from": "1735689600000",
            "to": "1735689601000",
            "state": "READY",
            "rollbackCandidate": "true",
        }

    @pytest.mark.asyncio
    async def test_deployment_events(self, upstream, settings, auth):
        upstream.respond(200, [{"type": "stdout", "text": "Building..."}])

        content = await run(upstream, settings, auth, "VERCEL_GET_DEPLOYMENT_EVENTS", {
            "idOrUrl": "dpl_1",
            "direction": "backward",
            "limit": -1,
        })

        request = upstream.last
        assert request.url.path == "/v3/deployments/dpl_1/events"
        assert dict(request.url.params) == {"direction": "backward", "limit": "-1"}
        assert "Building..." in content[0].text

    @pytest.mark.asyncio
    async def test_list_deployment_files(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_DEPLOYMENT_FILES", {"id": "dpl_1", "slug": "acme"})

        request = upstream.last
        assert request.url.path == "/v6/deployments/dpl_1/files"
        assert dict(request.url.params) == {"slug": "acme"}

    @pytest.mark.asyncio
    async def test_file_contents(self, upstream, settings, auth):
        upstream.respond(200, "console.log('hi')")

        content = await run(upstream, settings, auth, "VERCEL_GET_DEPLOYMENT_FILE_CONTENTS", {
            "id": "dpl_1",
            "fileId": "file_1",
            "path": "src/index.js",
        })

        request = upstream.last
        assert request.url.path == "/v8/deployments/dpl_1/files/file_1"
        assert dict(request.url.params) == {"path": "src/index.js"}
        assert content[0].text == "File contents:\nconsole.log('hi')"


class TestDomainsProjectsUsers:

    @pytest.mark.asyncio
    async def test_check_domain_availability(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_CHECK_DOMAIN_AVAILABILITY", {"name": "example.dev"})

        request = upstream.last
        assert request.url.path == "/v4/domains/status"
        assert dict(request.url.params) == {"name": "example.dev"}

    @pytest.mark.asyncio
    async def test_domain_price(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_GET_DOMAIN_PRICE", {"name": "example.dev", "type": "renewal"})
        assert dict(upstream.last.url.params) == {"name": "example.dev", "type": "renewal"}

    @pytest.mark.asyncio
    async def test_list_domains_without_filters(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_DOMAINS", {})

        request = upstream.last
        assert request.url.path == "/v5/domains"
        assert request.url.query == b""

    @pytest.mark.asyncio
    async def test_list_projects(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_LIST_PROJECTS", {"teamId": "team_1"})

        request = upstream.last
        assert request.url.path == "/v10/projects"
        assert dict(request.url.params) == {"teamId": "team_1"}

    @pytest.mark.asyncio
    async def test_get_project_by_name(self, upstream, settings, auth):
        await run(upstream, settings, auth, "VERCEL_GET_PROJECT", {"idOrName": "my-site"})
        assert upstream.last.url.path == "/v9/projects/my-site"

    @pytest.mark.asyncio
    async def test_get_user(self, upstream, settings, auth):
        upstream.respond(200, {"user": {"username": "alice"}})

        content = await run(upstream, settings, auth, "VERCEL_GET_USER", {})

        request = upstream.last
        assert request.method == "GET"
        assert request.url.path == "/v2/user"
        assert content[0].text.startswith("User:\n")
        assert "alice" in content[0].text
