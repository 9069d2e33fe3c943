"""Process-wide tool catalog, built once at import time."""
from types import MappingProxyType
from typing import Iterable, Mapping

from .definitions import ToolDefinition
from .errors import NotFoundError
from .handlers import deployments, dns, domains, projects, teams, users


def build_registry(*tool_lists: Iterable[ToolDefinition]) -> Mapping[str, ToolDefinition]:
    """Concatenate per-resource tool lists into a read-only name lookup."""
    catalog: dict[str, ToolDefinition] = {}
    for tools in tool_lists:
        for tool in tools:
            if tool.name in catalog:
                raise ValueError(f"Duplicate tool name: {tool.name}")
            catalog[tool.name] = tool
    return MappingProxyType(catalog)


REGISTRY = build_registry(
    deployments.TOOLS,
    dns.TOOLS,
    domains.TOOLS,
    projects.TOOLS,
    teams.TOOLS,
    users.TOOLS,
)


def get_tool(name: str) -> ToolDefinition:
    """Look up a tool by name.

    Raises:
        NotFoundError: No tool is registered under that name
    """
    tool = REGISTRY.get(name)
    if tool is None:
        raise NotFoundError(name)
    return tool
