from dataclasses import dataclass
from datetime import datetime


@dataclass
class PrayerRequest:
    """Domain model representing a submitted prayer request."""
    id: str
    name: str
    prayer_request: str
    created_at: datetime
    email: str | None = None
    is_private: bool = True
    is_answered: bool = False
    answered_at: datetime | None = None
