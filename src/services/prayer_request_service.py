"""Prayer request submission and pastoral follow-up."""

import logging
import uuid
from datetime import datetime, timezone

from domain.model.errors import DomainError, NotFoundError
from domain.model.page import Page
from domain.model.prayer_request import PrayerRequest
from domain.model.validation import check_max_length, clean, normalize_email, require_fields
from port.notification_queue import NotificationQueue
from port.prayer_request_repository import PrayerRequestRepository
from services import notification_service

logger = logging.getLogger(__name__)

MAX_NAME_LENGTH = 100
MAX_REQUEST_LENGTH = 1000


def submit(
    repo: PrayerRequestRepository,
    queue: NotificationQueue,
    recipient: str | None,
    name: str | None,
    prayer_request: str | None,
    email: str | None = None,
    is_private: bool | None = None,
) -> PrayerRequest:
    """Store a prayer request and notify the prayer team mailbox.

    Requests are private unless the submitter explicitly says otherwise.
    """
    require_fields(name=name, prayerRequest=prayer_request)
    name = clean(name)
    check_max_length('name', name, MAX_NAME_LENGTH)
    check_max_length('prayerRequest', prayer_request, MAX_REQUEST_LENGTH)

    request = PrayerRequest(
        id=uuid.uuid4().hex,
        name=name,
        email=normalize_email(email),
        prayer_request=prayer_request.strip(),
        is_private=is_private is not False,
        created_at=datetime.now(timezone.utc),
    )
    if not repo.save(request):
        raise DomainError("Failed to submit prayer request")

    if recipient:
        notification_service.dispatch(queue, notification_service.prayer_request_notice(request, recipient))
    else:
        logger.warning("PRAYER_EMAIL not configured, skipping notification", extra={"prayerRequestId": request.id})
    return request


def list_requests(repo: PrayerRequestRepository, page: int, limit: int) -> Page[PrayerRequest]:
    result = repo.find_page(page=page, limit=limit)
    if result is None:
        raise DomainError("Failed to fetch prayer requests")
    return result


def set_answered(repo: PrayerRequestRepository, request_id: str, is_answered: bool) -> PrayerRequest:
    updated = repo.set_answered(request_id, is_answered)
    if updated is None:
        if repo.get_by_id(request_id) is None:
            raise NotFoundError("Prayer request not found")
        raise DomainError("Failed to update prayer request")
    logger.info("Prayer request updated", extra={"prayerRequestId": request_id, "isAnswered": is_answered})
    return updated
