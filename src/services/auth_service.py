"""Auth service: user registration and authentication business logic.

Pure business logic with no HTTP dependencies.
Raises domain errors that route handlers map to HTTP status codes.
"""

import logging

from domain.model.errors import (
    AuthenticationError, DomainError, DuplicateError, NotFoundError, ValidationError,
)
from domain.model.user import Role, SessionClaims, User
from domain.model.validation import clean, normalize_email, require_fields
from port.user_repository import UserRepository
from services.password_hasher import PasswordHasher
from services.token_service import issue_token

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only accepts up to 72 bytes of input
MAX_PASSWORD_BYTES = 72


def _parse_role(role: str | None) -> Role:
    if not role:
        return Role.VOLUNTEER
    try:
        return Role(role)
    except ValueError:
        allowed = ', '.join(r.value for r in Role)
        raise ValidationError(f"role must be one of: {allowed}")


def register(
    repo: UserRepository,
    hasher: PasswordHasher,
    name: str | None,
    email: str | None,
    password: str | None,
    role: str | None = None,
    phone: str | None = None,
    department: str | None = None,
) -> User:
    """Create a staff account.

    Raises:
        MissingFieldsError: name, email or password absent
        ValidationError: password too short or too long, or unknown role
        DuplicateError: email already registered
    """
    require_fields(name=name, email=email, password=password)
    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    parsed_role = _parse_role(role)
    email = normalize_email(email)

    if repo.get_by_email(email):
        raise DuplicateError("User already exists")

    user = repo.create(
        name=clean(name),
        email=email,
        password_hash=hasher.hash(password),
        role=parsed_role,
        phone=clean(phone),
        department=clean(department),
    )
    if not user:
        # Lost a race against a concurrent insert, or the store failed
        if repo.get_by_email(email):
            raise DuplicateError("User already exists")
        raise DomainError("Failed to create user")
    return user


def authenticate(repo: UserRepository, hasher: PasswordHasher, email: str | None, password: str | None) -> User:
    """Check credentials and record the login.

    Unknown email, inactive account and wrong password are indistinguishable
    to the caller.

    Raises:
        MissingFieldsError: email or password absent
        AuthenticationError: invalid credentials
    """
    require_fields(email=email, password=password)
    user = repo.get_by_email(normalize_email(email))
    if not user or not user.is_active or not hasher.verify(password, user.password_hash):
        raise AuthenticationError("Invalid credentials")

    # Login still succeeds if the timestamp write fails
    repo.update_last_login(user.id)
    return user


def login(
    repo: UserRepository,
    hasher: PasswordHasher,
    secret: str,
    email: str | None,
    password: str | None,
) -> tuple[str, User]:
    """Authenticate and mint a session token for the user."""
    user = authenticate(repo, hasher, email, password)
    token = issue_token(SessionClaims(user_id=user.id, email=user.email, role=user.role), secret)
    logger.info("User logged in", extra={"userId": user.id, "role": user.role.value})
    return token, user


def get_user(repo: UserRepository, user_id: str) -> User:
    user = repo.get_by_id(user_id)
    if not user:
        raise NotFoundError("User not found")
    return user


def deactivate(repo: UserRepository, user_id: str) -> User:
    """Mark an account inactive; it can no longer log in."""
    get_user(repo, user_id)
    if not repo.deactivate(user_id):
        raise DomainError("Failed to deactivate user")
    logger.info("User deactivated", extra={"userId": user_id})
    return get_user(repo, user_id)
