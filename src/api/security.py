"""Access Gate: bearer token verification and role-based capabilities."""

import logging
from enum import Enum
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from domain.model.errors import ExpiredTokenError, InvalidTokenError
from domain.model.user import Role, SessionClaims
from services.token_service import verify_token
from utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


class Capability(str, Enum):
    PRAYER_REQUESTS_READ = 'prayer_requests.read'
    PRAYER_REQUESTS_UPDATE = 'prayer_requests.update'
    EVENTS_CREATE = 'events.create'
    CONTACT_READ = 'contact.read'
    CONTACT_UPDATE = 'contact.update'
    SERMONS_CREATE = 'sermons.create'
    USERS_CREATE = 'users.create'
    USERS_DEACTIVATE = 'users.deactivate'
    DASHBOARD_READ = 'dashboard.read'


_LEADERSHIP = frozenset({Role.ADMIN, Role.PASTOR})

# Staff and volunteer accounts hold no capability yet.
CAPABILITIES: dict[Capability, frozenset[Role]] = {
    capability: _LEADERSHIP for capability in Capability
}


def get_current_claims(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    settings: Settings = Depends(get_settings),
) -> SessionClaims:
    """Claims of the bearer token. 401 when absent, 403 when unusable."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        return verify_token(credentials.credentials, settings.require_jwt_secret())
    except ExpiredTokenError:
        logger.debug("Rejected expired token")
    except InvalidTokenError as e:
        logger.debug(f"JWT verification failed: {e}")
    raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")


def require_capability(capability: Capability):
    """Dependency factory admitting only roles granted ``capability``."""
    allowed = CAPABILITIES[capability]

    def dependency(claims: SessionClaims = Depends(get_current_claims)) -> SessionClaims:
        if claims.role not in allowed:
            logger.info(
                "Capability denied",
                extra={"userId": claims.user_id, "role": claims.role.value, "capability": capability.value},
            )
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
        return claims

    return dependency
