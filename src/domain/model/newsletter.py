from dataclasses import dataclass
from datetime import datetime


@dataclass
class NewsletterSubscription:
    """Domain model representing a newsletter subscriber."""
    id: str
    email: str
    subscribed_at: datetime
    name: str | None = None
    is_active: bool = True
    unsubscribed_at: datetime | None = None
