"""Authentication routes (staff registration, login, current user)."""

import logging

from fastapi import APIRouter, Depends, status

from api.dependencies import get_password_hasher, get_settings, get_user_repo
from api.errors import to_http_exception
from api.models import LoginRequest, LoginResponse, MessageResponse, RegisterRequest, UserResponse, UserSummary
from api.security import Capability, get_current_claims, require_capability
from domain.model.errors import DomainError
from domain.model.user import SessionClaims, User
from port.user_repository import UserRepository
from services import auth_service
from services.password_hasher import PasswordHasher
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _to_response(user: User) -> UserResponse:
    """Convert domain User to API UserResponse."""
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=user.role.value,
        phone=user.phone,
        department=user.department,
        is_active=user.is_active,
        last_login=user.last_login,
        created_at=user.created_at,
    )


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    claims: SessionClaims = Depends(require_capability(Capability.USERS_CREATE)),
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Create a staff account.

    Raises:
        HTTPException: 400 on missing fields, weak password, unknown role or
            an email that is already registered
    """
    try:
        user = auth_service.register(
            repo, hasher,
            name=body.name,
            email=body.email,
            password=body.password,
            role=body.role,
            phone=body.phone,
            department=body.department,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to create user")

    logger.info("User registered", extra={"userId": user.id, "role": user.role.value, "createdBy": claims.user_id})
    return MessageResponse(message="User created successfully", id=user.id)


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    repo: UserRepository = Depends(get_user_repo),
    hasher: PasswordHasher = Depends(get_password_hasher),
    settings: Settings = Depends(get_settings),
):
    """Exchange credentials for a session token."""
    try:
        token, user = auth_service.login(
            repo, hasher, settings.require_jwt_secret(), email=body.email, password=body.password,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to login")

    return LoginResponse(
        token=token,
        user=UserSummary(id=user.id, name=user.name, email=user.email, role=user.role.value),
    )


@router.get("/me", response_model=UserResponse)
async def get_me(
    claims: SessionClaims = Depends(get_current_claims),
    repo: UserRepository = Depends(get_user_repo),
):
    """Stored account of the token holder."""
    try:
        user = auth_service.get_user(repo, claims.user_id)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch user")
    return _to_response(user)


@router.patch("/users/{user_id}/deactivate", response_model=UserResponse)
async def deactivate_user(
    user_id: str,
    claims: SessionClaims = Depends(require_capability(Capability.USERS_DEACTIVATE)),
    repo: UserRepository = Depends(get_user_repo),
):
    try:
        user = auth_service.deactivate(repo, user_id)
    except DomainError as e:
        raise to_http_exception(e, "Failed to deactivate user")
    return _to_response(user)
