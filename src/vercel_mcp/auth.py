"""Per-request bearer token resolution."""
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import AuthenticationError

# Provider-specific headers carrying the raw token, checked after Authorization
TOKEN_HEADERS = ("x-vercel-token", "vercel-token")

MISSING_TOKEN_MESSAGE = (
    "Access token required. Provide via Authorization header, "
    "x-vercel-token header, or vercel-token header."
)


@dataclass(frozen=True)
class AuthContext:
    """Credentials for one inbound request. Never shared between requests."""

    bearer_token: str
    source: str

    @property
    def authorization_header(self) -> str:
        return f"Bearer {self.bearer_token}"


def _bearer_token(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    scheme, _, token = value.strip().partition(" ")
    if scheme.lower() != "bearer":
        return None
    return token.strip() or None


def resolve_auth_context(headers: Mapping[str, str]) -> AuthContext:
    """Build an AuthContext from request headers.

    Precedence: ``Authorization: Bearer <token>``, then ``x-vercel-token``,
    then ``vercel-token``. Header names are matched case-insensitively.

    Raises:
        AuthenticationError: No usable token was found
    """
    normalized = {key.lower(): value for key, value in headers.items()}

    token = _bearer_token(normalized.get("authorization"))
    if token:
        return AuthContext(bearer_token=token, source="authorization")

    for header in TOKEN_HEADERS:
        value = (normalized.get(header) or "").strip()
        if value:
            return AuthContext(bearer_token=value, source=header)

    raise AuthenticationError(MISSING_TOKEN_MESSAGE)


def auth_context_from_token(token: Optional[str], source: str = "environment") -> AuthContext:
    """Wrap a configured token (stdio transport) in an AuthContext."""
    if not token or not token.strip():
        raise AuthenticationError("Access token required. Set VERCEL_ACCESS_TOKEN.")
    return AuthContext(bearer_token=token.strip(), source=source)
