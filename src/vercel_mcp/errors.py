"""Error taxonomy for tool calls.

Every failure that crosses the transport boundary is one of these. Each
error knows its JSON-RPC code so transports can build the error envelope
without inspecting the exception type.
"""
from typing import Any, Optional


# JSON-RPC error codes used by the HTTP transport
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
INTERNAL_ERROR = -32603
METHOD_NOT_ALLOWED = -32000
AUTHENTICATION_REQUIRED = -32001
UPSTREAM_FAILURE = -32002
TOOL_NOT_FOUND = -32004


class ToolError(Exception):
    """Base class for errors surfaced to the calling agent."""

    code: int = INTERNAL_ERROR

    def __init__(self, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.detail = detail

    def to_error_data(self) -> dict:
        """Render as a JSON-RPC error object."""
        error = {"code": self.code, "message": self.message}
        if self.detail is not None:
            error["data"] = self.detail
        return error


class AuthenticationError(ToolError):
    """Raised when no bearer token can be resolved for the request."""

    code = AUTHENTICATION_REQUIRED


class ValidationError(ToolError):
    """Raised when tool arguments do not match the declared schema."""

    code = INVALID_PARAMS

    def __init__(
        self,
        message: str,
        field: str,
        constraint: str,
        errors: Optional[list[dict]] = None
    ):
        super().__init__(message, detail={"field": field, "constraint": constraint, "errors": errors or []})
        self.field = field
        self.constraint = constraint
        self.errors = errors or []


class NotFoundError(ToolError):
    """Raised when a tool name is not registered."""

    code = TOOL_NOT_FOUND

    def __init__(self, name: str):
        super().__init__(f"Unknown tool: {name}", detail={"tool": name})
        self.name = name


class MethodNotFoundError(ToolError):
    """JSON-RPC method other than the ones this server implements."""

    code = METHOD_NOT_FOUND


class UpstreamError(ToolError):
    """Raised when the upstream API answers non-2xx or cannot be reached."""

    code = UPSTREAM_FAILURE

    def __init__(self, status_code: Optional[int], body: Any, url: Optional[str] = None):
        if status_code is None:
            message = f"Upstream request failed: {body}"
        else:
            message = f"Upstream API returned {status_code}: {body}"
        super().__init__(message, detail={"status": status_code, "body": body})
        self.status_code = status_code
        self.body = body
        self.url = url


class InternalError(ToolError):
    """Unexpected failure. The caller only ever sees a generic message."""

    code = INTERNAL_ERROR

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
