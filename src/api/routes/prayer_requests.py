"""Prayer request routes."""

import logging

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_notification_queue, get_prayer_request_repo, get_settings
from api.errors import to_http_exception
from api.models import (
    MessageResponse, PrayerRequestCreate, PrayerRequestListResponse,
    PrayerRequestResponse, PrayerRequestUpdate,
)
from api.security import Capability, require_capability
from domain.model.errors import DomainError
from domain.model.prayer_request import PrayerRequest
from domain.model.user import SessionClaims
from port.notification_queue import NotificationQueue
from port.prayer_request_repository import PrayerRequestRepository
from services import prayer_request_service
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/prayer-requests", tags=["prayer-requests"])


def _to_response(request: PrayerRequest) -> PrayerRequestResponse:
    return PrayerRequestResponse(
        id=request.id,
        name=request.name,
        email=request.email,
        prayer_request=request.prayer_request,
        is_private=request.is_private,
        is_answered=request.is_answered,
        answered_at=request.answered_at,
        created_at=request.created_at,
    )


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def submit_prayer_request(
    body: PrayerRequestCreate,
    repo: PrayerRequestRepository = Depends(get_prayer_request_repo),
    queue: NotificationQueue = Depends(get_notification_queue),
    settings: Settings = Depends(get_settings),
):
    """Submit a prayer request; the prayer team is notified by e-mail."""
    try:
        request = prayer_request_service.submit(
            repo, queue,
            recipient=settings.prayer_email,
            name=body.name,
            prayer_request=body.prayer_request,
            email=body.email,
            is_private=body.is_private,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to submit prayer request")

    logger.info("Prayer request submitted", extra={"prayerRequestId": request.id})
    return MessageResponse(message="Prayer request submitted successfully", id=request.id)


@router.get("", response_model=PrayerRequestListResponse)
async def list_prayer_requests(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    claims: SessionClaims = Depends(require_capability(Capability.PRAYER_REQUESTS_READ)),
    repo: PrayerRequestRepository = Depends(get_prayer_request_repo),
):
    """Newest-first list of prayer requests."""
    try:
        result = prayer_request_service.list_requests(repo, page=page, limit=limit)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch prayer requests")

    return PrayerRequestListResponse(
        prayer_requests=[_to_response(r) for r in result.items],
        current_page=result.page,
        total_pages=result.total_pages,
        total=result.total,
    )


@router.patch("/{request_id}", response_model=PrayerRequestResponse)
async def update_prayer_request(
    request_id: str,
    body: PrayerRequestUpdate,
    claims: SessionClaims = Depends(require_capability(Capability.PRAYER_REQUESTS_UPDATE)),
    repo: PrayerRequestRepository = Depends(get_prayer_request_repo),
):
    """Mark a prayer request answered (or not)."""
    try:
        updated = prayer_request_service.set_answered(repo, request_id, body.is_answered)
    except DomainError as e:
        raise to_http_exception(e, "Failed to update prayer request")
    return _to_response(updated)
