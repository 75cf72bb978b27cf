from typing import Protocol

from domain.model.newsletter import NewsletterSubscription


class NewsletterRepository(Protocol):
    def create(self, email: str, name: str | None = None) -> NewsletterSubscription | None:
        """Insert a new active subscription. None on failure or duplicate email."""
        ...

    def get_by_email(self, email: str) -> NewsletterSubscription | None: ...

    def reactivate(self, subscription_id: str) -> NewsletterSubscription | None:
        """Set active, refresh subscribed_at, clear unsubscribed_at on the same document."""
        ...

    def deactivate(self, subscription_id: str) -> NewsletterSubscription | None: ...

    def count_active(self) -> int | None: ...
