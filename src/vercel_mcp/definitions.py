"""Tool definition record shared by the handler modules and the registry."""
from dataclasses import dataclass
from typing import Awaitable, Callable

import httpx
from mcp.types import TextContent
from pydantic import BaseModel

Handler = Callable[[BaseModel, httpx.AsyncClient], Awaitable[list[TextContent]]]


@dataclass(frozen=True)
class ToolDefinition:
    """A named, schema-validated tool mapping to one upstream operation."""

    name: str
    description: str
    schema: type[BaseModel]
    handler: Handler

    def input_schema(self) -> dict:
        """JSON schema advertised to MCP clients."""
        schema = self.schema.model_json_schema(by_alias=True)
        schema.pop("title", None)
        schema.setdefault("properties", {})
        return schema
