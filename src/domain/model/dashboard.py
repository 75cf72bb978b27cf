from dataclasses import dataclass, field

from domain.model.contact_message import ContactMessage
from domain.model.prayer_request import PrayerRequest

RECENT_LIMIT = 5


@dataclass(frozen=True)
class DashboardCounts:
    total_prayer_requests: int
    answered_prayers: int
    upcoming_events: int
    total_messages: int
    newsletter_subscribers: int
    total_sermons: int


@dataclass
class DashboardStats:
    """Admin dashboard summary: aggregate counts plus the latest submissions."""
    counts: DashboardCounts
    recent_prayer_requests: list[PrayerRequest] = field(default_factory=list)
    recent_messages: list[ContactMessage] = field(default_factory=list)
