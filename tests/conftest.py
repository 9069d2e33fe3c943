"""Shared fixtures: environment, credentials and a recording upstream."""
import os

# Settings are read at import time by the app module
os.environ.setdefault("BASE_URL", "https://api.vercel.test")
os.environ.setdefault("NODE_ENV", "test")
os.environ.pop("SENTRY_DSN", None)

import httpx
import pytest

from vercel_mcp.auth import AuthContext
from vercel_mcp.config import Settings


class UpstreamRecorder:
    """httpx mock transport that records every outbound request."""

    def __init__(self, status_code: int = 200, body=None):
        self.requests: list[httpx.Request] = []
        self.status_code = status_code
        self.body = {} if body is None else body
        self.error = None

    def respond(self, status_code: int, body=None):
        self.status_code = status_code
        self.body = {} if body is None else body

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.body, (dict, list)):
            return httpx.Response(self.status_code, json=self.body)
        return httpx.Response(self.status_code, text=self.body)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> httpx.Request:
        assert self.requests, "no upstream request was made"
        return self.requests[-1]


@pytest.fixture
def upstream():
    return UpstreamRecorder()


@pytest.fixture
def settings():
    return Settings(base_url="https://api.vercel.test", node_env="test")


@pytest.fixture
def auth():
    return AuthContext(bearer_token="test-token", source="authorization")
