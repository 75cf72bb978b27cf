"""Contact form messages."""

import logging
import uuid
from datetime import datetime, timezone

from domain.model.contact_message import ContactMessage
from domain.model.errors import DomainError, NotFoundError
from domain.model.page import Page
from domain.model.validation import check_max_length, clean, normalize_email, require_fields
from port.contact_message_repository import ContactMessageRepository
from port.notification_queue import NotificationQueue
from services import notification_service

logger = logging.getLogger(__name__)


def submit(
    repo: ContactMessageRepository,
    queue: NotificationQueue,
    recipient: str | None,
    name: str | None,
    email: str | None,
    subject: str | None,
    message: str | None,
    phone: str | None = None,
) -> ContactMessage:
    require_fields(name=name, email=email, subject=subject, message=message)
    check_max_length('name', clean(name), 100)
    check_max_length('subject', clean(subject), 200)
    check_max_length('message', message, 1000)

    contact = ContactMessage(
        id=uuid.uuid4().hex,
        name=clean(name),
        email=normalize_email(email),
        phone=clean(phone),
        subject=clean(subject),
        message=message.strip(),
        created_at=datetime.now(timezone.utc),
    )
    if not repo.save(contact):
        raise DomainError("Failed to send message")

    if recipient:
        notification_service.dispatch(queue, notification_service.contact_message_notice(contact, recipient))
    else:
        logger.warning("CONTACT_EMAIL not configured, skipping notification", extra={"messageId": contact.id})
    return contact


def list_messages(repo: ContactMessageRepository, page: int, limit: int) -> Page[ContactMessage]:
    result = repo.find_page(page=page, limit=limit)
    if result is None:
        raise DomainError("Failed to fetch messages")
    return result


def mark_read(repo: ContactMessageRepository, message_id: str, is_read: bool) -> ContactMessage:
    updated = repo.set_read(message_id, is_read)
    if updated is None:
        raise NotFoundError("Message not found")
    return updated
