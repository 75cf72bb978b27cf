"""In-memory implementation of NewsletterRepository for testing."""

import uuid
from datetime import datetime, timezone

from domain.model.newsletter import NewsletterSubscription


class FakeNewsletterRepository:
    def __init__(self):
        self.store: dict[str, NewsletterSubscription] = {}

    def create(self, email: str, name: str | None = None) -> NewsletterSubscription | None:
        if self.get_by_email(email):
            return None
        subscription = NewsletterSubscription(
            id=uuid.uuid4().hex,
            email=email,
            name=name,
            subscribed_at=datetime.now(timezone.utc),
        )
        self.store[subscription.id] = subscription
        return subscription

    def get_by_email(self, email: str) -> NewsletterSubscription | None:
        for subscription in self.store.values():
            if subscription.email == email:
                return subscription
        return None

    def reactivate(self, subscription_id: str) -> NewsletterSubscription | None:
        subscription = self.store.get(subscription_id)
        if not subscription:
            return None
        subscription.is_active = True
        subscription.subscribed_at = datetime.now(timezone.utc)
        subscription.unsubscribed_at = None
        return subscription

    def deactivate(self, subscription_id: str) -> NewsletterSubscription | None:
        subscription = self.store.get(subscription_id)
        if not subscription:
            return None
        subscription.is_active = False
        subscription.unsubscribed_at = datetime.now(timezone.utc)
        return subscription

    def count_active(self) -> int | None:
        return sum(1 for s in self.store.values() if s.is_active)
