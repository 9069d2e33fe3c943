"""HTTP plumbing shared by every tool handler.

Handlers never touch httpx directly beyond the client they are given:
- create_client() binds base URL, bearer token and timeout for one request
- request_json() performs a single call and maps failures to UpstreamError
- to_epoch_ms() converts ISO-8601 inputs to the millisecond integers the API expects
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Optional
from urllib.parse import quote

import httpx

from .auth import AuthContext
from .config import Settings
from .errors import UpstreamError

logger = logging.getLogger("vercel-mcp.upstream")

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_epoch_ms(value: str) -> int:
    """Convert an ISO-8601 timestamp to integer milliseconds since the epoch.

    Values without an offset (including plain dates) are taken as UTC.

    Raises:
        ValueError: The value is not a valid ISO-8601 date or datetime
    """
    text = value.strip()
    if text[-1:] == "z":
        text = text[:-1] + "Z"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError as e:
        raise ValueError(f"Invalid ISO 8601 timestamp: {value!r}") from e
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - EPOCH) // timedelta(milliseconds=1)


def optional_epoch_ms(value: Optional[str]) -> Optional[int]:
    return to_epoch_ms(value) if value is not None else None


def path_segment(value: str) -> str:
    """Escape an identifier for interpolation into a URL path."""
    return quote(value, safe="")


def create_client(
    auth: AuthContext,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None
) -> httpx.AsyncClient:
    """Create an upstream client scoped to a single request's credentials."""
    return httpx.AsyncClient(
        base_url=settings.api_base_url,
        headers={"Authorization": auth.authorization_header},
        timeout=settings.request_timeout,
        transport=transport,
    )


def _response_body(response: httpx.Response) -> Any:
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        return response.text


async def request_json(
    client: httpx.AsyncClient,
    method: str,
    path: str,
    params: Optional[dict] = None,
    json: Optional[dict] = None
) -> Any:
    """Issue one upstream request and return the decoded body.

    None-valued params are dropped so absent optionals never reach the wire.

    Raises:
        UpstreamError: Non-2xx response or transport failure
    """
    query = {key: value for key, value in (params or {}).items() if value is not None}

    try:
        response = await client.request(method, path, params=query or None, json=json)
    except httpx.RequestError as e:
        logger.error(f"Request error during {method} {path}: {type(e).__name__}: {e}")
        raise UpstreamError(None, str(e) or type(e).__name__, url=path) from e

    body = _response_body(response)
    if not response.is_success:
        logger.error(f"HTTP error during {method} {path}:")
        logger.error(f"  Status: {response.status_code}")
        logger.error(f"  URL: {response.request.url}")
        logger.error(f"  Response body: {body}")
        raise UpstreamError(response.status_code, body, url=str(response.request.url))

    logger.debug(f"{method} {path} -> {response.status_code}")
    return body
