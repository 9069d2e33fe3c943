"""Tests for per-request token resolution."""
import pytest

from vercel_mcp.auth import auth_context_from_token, resolve_auth_context
from vercel_mcp.errors import AUTHENTICATION_REQUIRED, AuthenticationError


class TestResolveAuthContext:

    def test_bearer_header(self):
        auth = resolve_auth_context({"Authorization": "Bearer abc123"})
        assert auth.bearer_token == "abc123"
        assert auth.source == "authorization"
        assert auth.authorization_header == "Bearer abc123"

    def test_bearer_scheme_case_insensitive(self):
        assert resolve_auth_context({"authorization": "bearer abc123"}).bearer_token == "abc123"

    def test_bearer_takes_precedence(self):
        auth = resolve_auth_context({
            "Authorization": "Bearer from-auth",
            "x-vercel-token": "from-x-header",
        })
        assert auth.bearer_token == "from-auth"

    def test_x_vercel_token(self):
        auth = resolve_auth_context({"X-Vercel-Token": "xyz"})
        assert auth.bearer_token == "xyz"
        assert auth.source == "x-vercel-token"

    def test_vercel_token(self):
        auth = resolve_auth_context({"vercel-token": "xyz"})
        assert auth.source == "vercel-token"

    def test_non_bearer_authorization_falls_through(self):
        auth = resolve_auth_context({"Authorization": "Basic dXNlcjpwYXNz", "vercel-token": "xyz"})
        assert auth.bearer_token == "xyz"

    def test_missing_token(self):
        with pytest.raises(AuthenticationError) as exc_info:
            resolve_auth_context({"Content-Type": "application/json"})
        assert exc_info.value.code == AUTHENTICATION_REQUIRED

    def test_empty_values_rejected(self):
        with pytest.raises(AuthenticationError):
            resolve_auth_context({"Authorization": "Bearer ", "x-vercel-token": "  "})

    def test_each_call_builds_a_new_context(self):
        first = resolve_auth_context({"Authorization": "Bearer one"})
        second = resolve_auth_context({"Authorization": "Bearer two"})
        assert first.bearer_token == "one"
        assert second.bearer_token == "two"


def test_configured_token():
    assert auth_context_from_token(" tok ").bearer_token == "tok"
    with pytest.raises(AuthenticationError):
        auth_context_from_token(None)
