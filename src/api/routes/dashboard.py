"""Admin dashboard route."""

from fastapi import APIRouter, Depends

from api.dependencies import (
    get_contact_message_repo, get_event_repo, get_newsletter_repo,
    get_prayer_request_repo, get_sermon_repo,
)
from api.errors import to_http_exception
from api.models import DashboardCountsResponse, DashboardStatsResponse, RecentMessage, RecentPrayerRequest
from api.security import Capability, require_capability
from domain.model.errors import DomainError
from domain.model.user import SessionClaims
from port.contact_message_repository import ContactMessageRepository
from port.event_repository import EventRepository
from port.newsletter_repository import NewsletterRepository
from port.prayer_request_repository import PrayerRequestRepository
from port.sermon_repository import SermonRepository
from services import dashboard_service

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    claims: SessionClaims = Depends(require_capability(Capability.DASHBOARD_READ)),
    prayer_requests: PrayerRequestRepository = Depends(get_prayer_request_repo),
    events: EventRepository = Depends(get_event_repo),
    messages: ContactMessageRepository = Depends(get_contact_message_repo),
    newsletter: NewsletterRepository = Depends(get_newsletter_repo),
    sermons: SermonRepository = Depends(get_sermon_repo),
):
    try:
        result = await dashboard_service.get_dashboard_stats(
            prayer_requests, events, messages, newsletter, sermons,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch dashboard stats")

    counts = result.counts
    return DashboardStatsResponse(
        stats=DashboardCountsResponse(
            total_prayer_requests=counts.total_prayer_requests,
            answered_prayers=counts.answered_prayers,
            upcoming_events=counts.upcoming_events,
            total_messages=counts.total_messages,
            newsletter_subscribers=counts.newsletter_subscribers,
            total_sermons=counts.total_sermons,
        ),
        recent_prayer_requests=[
            RecentPrayerRequest(id=r.id, name=r.name, prayer_request=r.prayer_request, created_at=r.created_at)
            for r in result.recent_prayer_requests
        ],
        recent_messages=[
            RecentMessage(id=m.id, name=m.name, subject=m.subject, created_at=m.created_at, is_read=m.is_read)
            for m in result.recent_messages
        ],
    )
