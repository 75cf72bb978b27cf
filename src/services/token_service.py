"""Session token issuing and verification (HS256 JWT)."""

import logging
from datetime import datetime, timedelta, timezone

from jose import ExpiredSignatureError, JWTError, jwt

from domain.model.errors import ExpiredTokenError, InvalidTokenError
from domain.model.user import Role, SessionClaims

logger = logging.getLogger(__name__)

JWT_ALGORITHM = "HS256"
SESSION_TTL = timedelta(hours=24)


def issue_token(claims: SessionClaims, secret: str, ttl: timedelta = SESSION_TTL) -> str:
    """Sign ``claims`` into a token that expires ``ttl`` from now."""
    now = datetime.now(timezone.utc)
    payload = {
        "sub": claims.user_id,
        "email": claims.email,
        "role": claims.role.value,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(payload, secret, algorithm=JWT_ALGORITHM)


def verify_token(token: str, secret: str) -> SessionClaims:
    """Check signature and expiry and return the embedded claims.

    Raises:
        ExpiredTokenError: signature is valid but ``exp`` has passed
        InvalidTokenError: bad signature, malformed token, or missing claims
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise ExpiredTokenError("Token has expired")
    except JWTError as e:
        logger.debug(f"JWT verification failed: {e}")
        raise InvalidTokenError("Invalid token")

    try:
        return SessionClaims(
            user_id=payload["sub"],
            email=payload["email"],
            role=Role(payload["role"]),
            expires_at=datetime.fromtimestamp(payload["exp"], timezone.utc),
        )
    except (KeyError, ValueError, TypeError):
        raise InvalidTokenError("Token is missing required claims")
