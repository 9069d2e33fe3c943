"""Stateless MCP over HTTP.

Each POST carries one JSON-RPC message. Auth is resolved from the request
headers before anything else and lives only for that request, so concurrent
clients never share credentials or upstream connections.
"""
import logging
from typing import Any, Optional

import httpx
from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from mcp.types import (
    LATEST_PROTOCOL_VERSION,
    CallToolResult,
    Implementation,
    InitializeResult,
    ListToolsResult,
    ServerCapabilities,
    ToolsCapability,
)

from .. import __version__
from ..auth import AuthContext, resolve_auth_context
from ..config import Settings, get_settings
from ..dispatch import call_tool
from ..errors import (
    INVALID_REQUEST,
    METHOD_NOT_ALLOWED,
    MethodNotFoundError,
    PARSE_ERROR,
    AuthenticationError,
    InternalError,
    ToolError,
    ValidationError,
)
from ..tools import get_tools

logger = logging.getLogger("vercel-mcp.http")

router = APIRouter()

SERVER_NAME = "vercel-tools"


def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for upstream clients; None selects httpx's default network transport."""
    return None


def _dump(model) -> dict:
    return model.model_dump(by_alias=True, exclude_none=True, mode="json")


def _error_response(request_id: Any, error: dict, status_code: int = status.HTTP_200_OK) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"jsonrpc": "2.0", "error": error, "id": request_id},
    )


async def _handle_method(
    method: str,
    params: dict,
    auth: AuthContext,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport]
) -> dict:
    if method == "initialize":
        return _dump(InitializeResult(
            protocolVersion=LATEST_PROTOCOL_VERSION,
            capabilities=ServerCapabilities(tools=ToolsCapability(listChanged=False)),
            serverInfo=Implementation(name=SERVER_NAME, version=__version__),
        ))

    if method == "ping":
        return {}

    if method == "tools/list":
        return _dump(ListToolsResult(tools=get_tools()))

    if method == "tools/call":
        name = params.get("name")
        if not isinstance(name, str) or not name:
            raise ValidationError("Missing required parameter 'name'", field="name", constraint="missing")
        content = await call_tool(name, params.get("arguments"), auth, settings=settings, transport=transport)
        return _dump(CallToolResult(content=content, isError=False))

    raise MethodNotFoundError(f"Method not found: {method}")


@router.post("/mcp")
async def handle_mcp_request(
    request: Request,
    settings: Settings = Depends(get_settings),
    transport: Optional[httpx.AsyncBaseTransport] = Depends(get_upstream_transport),
):
    """Dispatch a single JSON-RPC message."""
    try:
        auth = resolve_auth_context(request.headers)
    except AuthenticationError as e:
        logger.warning("Rejected MCP request without access token")
        return _error_response(None, e.to_error_data(), status.HTTP_401_UNAUTHORIZED)

    try:
        message = await request.json()
    except ValueError:
        return _error_response(
            None, {"code": PARSE_ERROR, "message": "Parse error"}, status.HTTP_400_BAD_REQUEST
        )

    if (
        not isinstance(message, dict)
        or message.get("jsonrpc") != "2.0"
        or not isinstance(message.get("method"), str)
    ):
        return _error_response(
            None, {"code": INVALID_REQUEST, "message": "Invalid Request"}, status.HTTP_400_BAD_REQUEST
        )

    # Notifications get no response body
    if "id" not in message:
        logger.debug(f"Notification received: {message['method']}")
        return Response(status_code=status.HTTP_202_ACCEPTED)

    request_id = message["id"]
    method = message["method"]
    params = message.get("params") or {}
    if not isinstance(params, dict):
        return _error_response(request_id, {"code": INVALID_REQUEST, "message": "Invalid params"})

    try:
        result = await _handle_method(method, params, auth, settings, transport)
    except ToolError as e:
        return _error_response(request_id, e.to_error_data())
    except Exception:
        logger.exception(f"Error handling MCP method {method}")
        return _error_response(request_id, InternalError().to_error_data())

    return JSONResponse(content={"jsonrpc": "2.0", "id": request_id, "result": result})


@router.api_route("/mcp", methods=["GET", "DELETE", "PUT", "PATCH", "HEAD", "OPTIONS"])
async def mcp_method_not_allowed(request: Request):
    """Only POST is served. Streams, session termination and other verbs do not exist in stateless mode."""
    logger.info(f"Received {request.method} MCP request")
    return _error_response(
        None,
        {"code": METHOD_NOT_ALLOWED, "message": "Method not allowed."},
        status.HTTP_405_METHOD_NOT_ALLOWED,
    )
