"""Admin dashboard summary."""

import asyncio
from datetime import datetime, timezone

from domain.model.dashboard import RECENT_LIMIT, DashboardCounts, DashboardStats
from domain.model.errors import DomainError
from port.contact_message_repository import ContactMessageRepository
from port.event_repository import EventRepository
from port.newsletter_repository import NewsletterRepository
from port.prayer_request_repository import PrayerRequestRepository
from port.sermon_repository import SermonRepository


async def get_dashboard_stats(
    prayer_requests: PrayerRequestRepository,
    events: EventRepository,
    messages: ContactMessageRepository,
    newsletter: NewsletterRepository,
    sermons: SermonRepository,
    now: datetime | None = None,
) -> DashboardStats:
    """Run the six counts and two recent listings concurrently and merge them.

    Repositories are synchronous, so each call runs in a worker thread.
    """
    now = now or datetime.now(timezone.utc)
    results = await asyncio.gather(
        asyncio.to_thread(prayer_requests.count),
        asyncio.to_thread(prayer_requests.count, True),
        asyncio.to_thread(events.count_upcoming, now),
        asyncio.to_thread(messages.count),
        asyncio.to_thread(newsletter.count_active),
        asyncio.to_thread(sermons.count),
        asyncio.to_thread(prayer_requests.find_recent, RECENT_LIMIT),
        asyncio.to_thread(messages.find_recent, RECENT_LIMIT),
    )
    if any(r is None for r in results):
        raise DomainError("Failed to fetch dashboard stats")

    (total_prayers, answered, upcoming, total_messages,
     subscribers, total_sermons, recent_prayers, recent_messages) = results

    return DashboardStats(
        counts=DashboardCounts(
            total_prayer_requests=total_prayers,
            answered_prayers=answered,
            upcoming_events=upcoming,
            total_messages=total_messages,
            newsletter_subscribers=subscribers,
            total_sermons=total_sermons,
        ),
        recent_prayer_requests=recent_prayers,
        recent_messages=recent_messages,
    )
