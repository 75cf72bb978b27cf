"""Event routes: listing, creation with optional image, and registration."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from api.dependencies import (
    get_event_repo, get_notification_queue, get_settings, get_upload_storage, get_user_repo,
)
from api.errors import to_http_exception
from api.models import CreatorRef, EventRegistrationRequest, EventResponse, MessageResponse
from api.security import Capability, require_capability
from domain.model.errors import DomainError
from domain.model.event import Event
from domain.model.upload import Upload
from domain.model.user import SessionClaims
from port.event_repository import EventRepository
from port.notification_queue import NotificationQueue
from port.upload_storage import UploadStorage
from port.user_repository import UserRepository
from services import event_service
from utils.config import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def _to_response(event: Event, creator_name: str | None) -> EventResponse:
    return EventResponse(
        id=event.id,
        title=event.title,
        description=event.description,
        date=event.date,
        time=event.time,
        location=event.location,
        category=event.category.value,
        is_recurring=event.is_recurring,
        recurring_type=event.recurring_type.value if event.recurring_type else None,
        max_attendees=event.max_attendees,
        registered_count=len(event.registered_attendees),
        image=event.image,
        created_by=CreatorRef(id=event.created_by, name=creator_name),
        created_at=event.created_at,
    )


@router.get("", response_model=list[EventResponse])
async def list_events(
    upcoming: bool = False,
    category: Optional[str] = None,
    limit: int = Query(event_service.DEFAULT_LIST_LIMIT, ge=1, le=200),
    repo: EventRepository = Depends(get_event_repo),
    users: UserRepository = Depends(get_user_repo),
):
    """Events in date order. ``upcoming=true`` hides events already past."""
    try:
        listings = event_service.list_events(repo, users, upcoming=upcoming, category=category, limit=limit)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch events")
    return [_to_response(item.event, item.creator_name) for item in listings]


@router.get("/{event_id}", response_model=EventResponse)
async def get_event(
    event_id: str,
    repo: EventRepository = Depends(get_event_repo),
    users: UserRepository = Depends(get_user_repo),
):
    try:
        listing = event_service.get_event(repo, users, event_id)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch event")
    return _to_response(listing.event, listing.creator_name)


@router.post("", response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    time: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    is_recurring: bool = Form(False, alias="isRecurring"),
    recurring_type: Optional[str] = Form(None, alias="recurringType"),
    max_attendees: Optional[str] = Form(None, alias="maxAttendees"),
    image: Optional[UploadFile] = File(None),
    claims: SessionClaims = Depends(require_capability(Capability.EVENTS_CREATE)),
    repo: EventRepository = Depends(get_event_repo),
    users: UserRepository = Depends(get_user_repo),
    storage: UploadStorage = Depends(get_upload_storage),
    settings: Settings = Depends(get_settings),
):
    """Create an event from a multipart form, with an optional image file."""
    upload = None
    if image is not None and image.filename:
        upload = Upload(
            filename=image.filename,
            content_type=image.content_type or '',
            # One byte past the cap is enough to reject an oversized file
            data=await image.read(settings.max_upload_bytes + 1),
        )

    try:
        event = event_service.create_event(
            repo, storage,
            created_by=claims.user_id,
            title=title,
            description=description,
            date=date,
            time=time,
            location=location,
            category=category,
            is_recurring=is_recurring,
            recurring_type=recurring_type,
            max_attendees=max_attendees,
            image=upload,
            max_upload_bytes=settings.max_upload_bytes,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to create event")

    creator_name = users.get_names([claims.user_id]).get(claims.user_id)
    return _to_response(event, creator_name)


@router.post("/{event_id}/register", response_model=MessageResponse)
async def register_for_event(
    event_id: str,
    body: EventRegistrationRequest,
    repo: EventRepository = Depends(get_event_repo),
    queue: NotificationQueue = Depends(get_notification_queue),
):
    """Register an attendee; a confirmation e-mail is queued."""
    try:
        event_service.register(repo, queue, event_id, name=body.name, email=body.email, phone=body.phone)
    except DomainError as e:
        raise to_http_exception(e, "Failed to register for event")
    return MessageResponse(message="Successfully registered for event")
