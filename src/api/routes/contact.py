"""Contact form routes."""

import logging

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_contact_message_repo, get_notification_queue, get_settings
from api.errors import to_http_exception
from api.models import (
    ContactMessageCreate, ContactMessageListResponse, ContactMessageResponse,
    ContactMessageUpdate, MessageResponse,
)
from api.security import Capability, require_capability
from domain.model.contact_message import ContactMessage
from domain.model.errors import DomainError
from domain.model.user import SessionClaims
from port.contact_message_repository import ContactMessageRepository
from port.notification_queue import NotificationQueue
from services import contact_service
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/contact", tags=["contact"])


def _to_response(message: ContactMessage) -> ContactMessageResponse:
    return ContactMessageResponse(
        id=message.id,
        name=message.name,
        email=message.email,
        phone=message.phone,
        subject=message.subject,
        message=message.message,
        is_read=message.is_read,
        responded_at=message.responded_at,
        created_at=message.created_at,
    )


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(
    body: ContactMessageCreate,
    repo: ContactMessageRepository = Depends(get_contact_message_repo),
    queue: NotificationQueue = Depends(get_notification_queue),
    settings: Settings = Depends(get_settings),
):
    try:
        message = contact_service.submit(
            repo, queue,
            recipient=settings.contact_email,
            name=body.name,
            email=body.email,
            subject=body.subject,
            message=body.message,
            phone=body.phone,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to send message")

    logger.info("Contact message received", extra={"messageId": message.id})
    return MessageResponse(message="Message sent successfully", id=message.id)


@router.get("", response_model=ContactMessageListResponse)
async def list_messages(
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    claims: SessionClaims = Depends(require_capability(Capability.CONTACT_READ)),
    repo: ContactMessageRepository = Depends(get_contact_message_repo),
):
    try:
        result = contact_service.list_messages(repo, page=page, limit=limit)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch messages")

    return ContactMessageListResponse(
        messages=[_to_response(m) for m in result.items],
        current_page=result.page,
        total_pages=result.total_pages,
        total=result.total,
    )


@router.patch("/{message_id}", response_model=ContactMessageResponse)
async def update_message(
    message_id: str,
    body: ContactMessageUpdate,
    claims: SessionClaims = Depends(require_capability(Capability.CONTACT_UPDATE)),
    repo: ContactMessageRepository = Depends(get_contact_message_repo),
):
    """Mark a message read; ``respondedAt`` is stamped when it is."""
    try:
        updated = contact_service.mark_read(repo, message_id, body.is_read)
    except DomainError as e:
        raise to_http_exception(e, "Failed to update message")
    return _to_response(updated)
