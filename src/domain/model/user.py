from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Role(str, Enum):
    """Staff roles a user account can hold."""
    ADMIN = 'admin'
    PASTOR = 'pastor'
    STAFF = 'staff'
    VOLUNTEER = 'volunteer'


@dataclass
class User:
    """Domain model representing a staff user account."""
    id: str
    name: str
    email: str
    role: Role
    created_at: datetime
    is_active: bool = True
    phone: str | None = None
    department: str | None = None
    last_login: datetime | None = None
    password_hash: str | None = None


@dataclass(frozen=True)
class SessionClaims:
    """Identity carried by a session token.

    Derived from a User at login time and never persisted; ``expires_at`` is
    filled in when the claims are read back from a token.
    """
    user_id: str
    email: str
    role: Role
    expires_at: datetime | None = None
