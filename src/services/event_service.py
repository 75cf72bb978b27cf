"""Event listing, creation and attendee registration.

Registration relies on EventRepository.add_attendee performing the
duplicate check, the capacity check and the append as one atomic update.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone

from domain.model.errors import (
    CapacityReachedError, DomainError, DuplicateError, NotFoundError, StorageError,
    ValidationError,
)
from domain.model.event import (
    DEFAULT_LOCATION, Attendee, Event, EventCategory, EventFilter, RecurringType,
    RegistrationOutcome,
)
from domain.model.upload import Upload, validate_upload, MAX_UPLOAD_BYTES
from domain.model.validation import (
    check_max_length, clean, normalize_email, parse_datetime, require_fields,
)
from port.event_repository import EventRepository
from port.notification_queue import NotificationQueue
from port.upload_storage import UploadStorage
from port.user_repository import UserRepository
from services import notification_service

logger = logging.getLogger(__name__)

DEFAULT_LIST_LIMIT = 50


@dataclass(frozen=True)
class EventListing:
    """Event plus the display name of the user who created it."""
    event: Event
    creator_name: str | None


def _parse_enum(enum_cls, field_name: str, value: str | None):
    if value is None or value == '':
        return None
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ', '.join(member.value for member in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def list_events(
    repo: EventRepository,
    users: UserRepository,
    upcoming: bool = False,
    category: str | None = None,
    limit: int = DEFAULT_LIST_LIMIT,
    now: datetime | None = None,
) -> list[EventListing]:
    """Events in ascending date order, optionally only those still ahead."""
    event_filter = EventFilter(
        upcoming_after=(now or datetime.now(timezone.utc)) if upcoming else None,
        category=_parse_enum(EventCategory, 'category', category),
        limit=limit,
    )
    events = repo.find_many(event_filter)
    if events is None:
        raise DomainError("Failed to fetch events")

    names = users.get_names([e.created_by for e in events])
    return [EventListing(event=e, creator_name=names.get(e.created_by)) for e in events]


def get_event(repo: EventRepository, users: UserRepository, event_id: str) -> EventListing:
    event = repo.get_by_id(event_id)
    if event is None:
        raise NotFoundError("Event not found")
    return EventListing(event=event, creator_name=users.get_names([event.created_by]).get(event.created_by))


def _parse_max_attendees(value: int | str | None) -> int | None:
    if value is None or value == '':
        return None
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        raise ValidationError("maxAttendees must be a whole number")
    if parsed <= 0:
        raise ValidationError("maxAttendees must be positive")
    return parsed


def create_event(
    repo: EventRepository,
    storage: UploadStorage,
    created_by: str,
    title: str | None,
    description: str | None,
    date: str | datetime | None,
    time: str | None,
    location: str | None = None,
    category: str | None = None,
    is_recurring: bool = False,
    recurring_type: str | None = None,
    max_attendees: int | str | None = None,
    image: Upload | None = None,
    max_upload_bytes: int = MAX_UPLOAD_BYTES,
) -> Event:
    """Validate and store a new event, saving its image first if one was sent."""
    require_fields(title=title, description=description, date=date, time=time)
    title = clean(title)
    check_max_length('title', title, 200)
    check_max_length('description', description, 1000)

    event = Event(
        id=uuid.uuid4().hex,
        title=title,
        description=description.strip(),
        date=parse_datetime('date', date),
        time=clean(time),
        location=clean(location) or DEFAULT_LOCATION,
        category=_parse_enum(EventCategory, 'category', category) or EventCategory.WORSHIP,
        is_recurring=is_recurring,
        recurring_type=_parse_enum(RecurringType, 'recurringType', recurring_type),
        max_attendees=_parse_max_attendees(max_attendees),
        created_by=created_by,
        created_at=datetime.now(timezone.utc),
    )

    if image is not None:
        validate_upload(image, max_upload_bytes)
        event.image = storage.save(image)

    if not repo.save(event):
        raise DomainError("Failed to create event")
    logger.info("Event created", extra={"eventId": event.id, "createdBy": created_by})
    return event


def register(
    repo: EventRepository,
    queue: NotificationQueue,
    event_id: str,
    name: str | None,
    email: str | None,
    phone: str | None = None,
) -> Event:
    """Add an attendee and send them a confirmation.

    Raises:
        MissingFieldsError: name or email absent
        NotFoundError: no such event
        DuplicateError: email already registered for this event
        CapacityReachedError: event is full
    """
    require_fields(name=name, email=email)
    attendee = Attendee(
        name=clean(name),
        email=normalize_email(email),
        phone=clean(phone),
        registered_at=datetime.now(timezone.utc),
    )

    outcome = repo.add_attendee(event_id, attendee)
    if outcome is None:
        raise DomainError("Failed to register for event")
    if outcome is RegistrationOutcome.NOT_FOUND:
        raise NotFoundError("Event not found")
    if outcome is RegistrationOutcome.ALREADY_REGISTERED:
        raise DuplicateError("Already registered for this event")
    if outcome is RegistrationOutcome.FULL:
        raise CapacityReachedError("Event is at full capacity")

    try:
        event = repo.get_by_id(event_id)
    except StorageError:
        # Registration is stored; only the confirmation is lost
        logger.warning("Event unavailable for confirmation e-mail", extra={"eventId": event_id})
        event = None
    if event is not None:
        notification_service.dispatch(
            queue, notification_service.event_registration_confirmation(event, attendee),
        )
    logger.info("Event registration", extra={"eventId": event_id})
    return event
