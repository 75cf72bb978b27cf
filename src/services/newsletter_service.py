"""Newsletter subscription lifecycle."""

import logging
from dataclasses import dataclass

from domain.model.errors import DomainError, DuplicateError, NotFoundError
from domain.model.newsletter import NewsletterSubscription
from domain.model.validation import clean, normalize_email, require_fields
from port.newsletter_repository import NewsletterRepository
from port.notification_queue import NotificationQueue
from services import notification_service

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SubscribeResult:
    subscription: NewsletterSubscription
    reactivated: bool


def subscribe(
    repo: NewsletterRepository,
    queue: NotificationQueue,
    email: str | None,
    name: str | None = None,
) -> SubscribeResult:
    """Subscribe ``email``, or reactivate its earlier subscription.

    Reactivation updates the existing document in place and sends no
    welcome mail; only brand-new subscribers are welcomed.

    Raises:
        MissingFieldsError: email absent
        DuplicateError: email already has an active subscription
    """
    require_fields(email=email)
    email = normalize_email(email)

    existing = repo.get_by_email(email)
    if existing:
        if existing.is_active:
            raise DuplicateError("Already subscribed to newsletter")
        reactivated = repo.reactivate(existing.id)
        if reactivated is None:
            raise DomainError("Failed to subscribe to newsletter")
        logger.info("Newsletter subscription reactivated", extra={"subscriptionId": existing.id})
        return SubscribeResult(subscription=reactivated, reactivated=True)

    subscription = repo.create(email=email, name=clean(name))
    if subscription is None:
        if repo.get_by_email(email):
            raise DuplicateError("Already subscribed to newsletter")
        raise DomainError("Failed to subscribe to newsletter")

    notification_service.dispatch(queue, notification_service.newsletter_welcome(subscription))
    logger.info("Newsletter subscription created", extra={"subscriptionId": subscription.id})
    return SubscribeResult(subscription=subscription, reactivated=False)


def unsubscribe(repo: NewsletterRepository, email: str | None) -> NewsletterSubscription:
    require_fields(email=email)
    existing = repo.get_by_email(normalize_email(email))
    if existing is None:
        raise NotFoundError("Subscription not found")
    if not existing.is_active:
        return existing

    updated = repo.deactivate(existing.id)
    if updated is None:
        raise DomainError("Failed to unsubscribe from newsletter")
    logger.info("Newsletter subscription cancelled", extra={"subscriptionId": existing.id})
    return updated
