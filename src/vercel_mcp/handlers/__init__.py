"""Per-resource tool handlers.

All handlers follow a consistent pattern:
- Accept: validated parameter model and an httpx.AsyncClient bound to the request's token
- Issue exactly one upstream request through upstream.request_json
- Return: list[TextContent] built by formatters.build_output
- Log all operations for debugging
"""
from . import deployments, dns, domains, projects, teams, users

__all__ = ["deployments", "dns", "domains", "projects", "teams", "users"]
