"""Enumerations accepted by the Vercel API."""
import enum


class DnsRecordType(str, enum.Enum):
    """DNS record types that can be created through the API."""

    A = "A"
    AAAA = "AAAA"
    ALIAS = "ALIAS"
    CAA = "CAA"
    CNAME = "CNAME"


class DomainPriceType(str, enum.Enum):
    """Domain status type to price."""

    NEW = "new"
    RENEWAL = "renewal"
    TRANSFER = "transfer"
    REDEMPTION = "redemption"


class EventDirection(str, enum.Enum):
    """Order of deployment events by timestamp."""

    FORWARD = "forward"
    BACKWARD = "backward"


class DeploymentState(str, enum.Enum):
    """Deployment lifecycle states."""

    BUILDING = "BUILDING"
    ERROR = "ERROR"
    INITIALIZING = "INITIALIZING"
    QUEUED = "QUEUED"
    READY = "READY"
    CANCELED = "CANCELED"


class TeamMemberRole(str, enum.Enum):
    """Roles used to filter team members."""

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    DEVELOPER = "DEVELOPER"
    VIEWER = "VIEWER"
    BILLING = "BILLING"
    CONTRIBUTOR = "CONTRIBUTOR"


class TeamInviteRole(str, enum.Enum):
    """Roles that can be assigned when inviting a team member.

    Superset of TeamMemberRole: SECURITY can be granted but not filtered on.
    """

    OWNER = "OWNER"
    MEMBER = "MEMBER"
    DEVELOPER = "DEVELOPER"
    SECURITY = "SECURITY"
    BILLING = "BILLING"
    VIEWER = "VIEWER"
    CONTRIBUTOR = "CONTRIBUTOR"


class ProjectRole(str, enum.Enum):
    """Project-level role for a team member."""

    ADMIN = "ADMIN"
    MEMBER = "MEMBER"
    VIEWER = "VIEWER"
