"""Newsletter subscription routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse

from api.dependencies import get_newsletter_repo, get_notification_queue
from api.errors import to_http_exception
from api.models import (
    NewsletterResponse, NewsletterSubscribeRequest, NewsletterSubscriptionResponse,
    NewsletterUnsubscribeRequest,
)
from domain.model.errors import DomainError
from domain.model.newsletter import NewsletterSubscription
from port.newsletter_repository import NewsletterRepository
from port.notification_queue import NotificationQueue
from services import newsletter_service

router = APIRouter(prefix="/newsletter", tags=["newsletter"])


def _to_response(message: str, subscription: NewsletterSubscription) -> NewsletterResponse:
    return NewsletterResponse(
        message=message,
        subscription=NewsletterSubscriptionResponse(
            id=subscription.id,
            email=subscription.email,
            name=subscription.name,
            is_active=subscription.is_active,
            subscribed_at=subscription.subscribed_at,
            unsubscribed_at=subscription.unsubscribed_at,
        ),
    )


@router.post("/subscribe", response_model=NewsletterResponse, status_code=status.HTTP_201_CREATED)
async def subscribe(
    body: NewsletterSubscribeRequest,
    repo: NewsletterRepository = Depends(get_newsletter_repo),
    queue: NotificationQueue = Depends(get_notification_queue),
):
    """Subscribe, or reactivate an earlier subscription (200 instead of 201)."""
    try:
        result = newsletter_service.subscribe(repo, queue, email=body.email, name=body.name)
    except DomainError as e:
        raise to_http_exception(e, "Failed to subscribe to newsletter")

    if result.reactivated:
        response = _to_response("Newsletter subscription reactivated", result.subscription)
        return JSONResponse(
            status_code=status.HTTP_200_OK,
            content=response.model_dump(mode="json", by_alias=True),
        )
    return _to_response("Successfully subscribed to newsletter", result.subscription)


@router.post("/unsubscribe", response_model=NewsletterResponse)
async def unsubscribe(
    body: NewsletterUnsubscribeRequest,
    repo: NewsletterRepository = Depends(get_newsletter_repo),
):
    try:
        subscription = newsletter_service.unsubscribe(repo, email=body.email)
    except DomainError as e:
        raise to_http_exception(e, "Failed to unsubscribe from newsletter")
    return _to_response("Successfully unsubscribed from newsletter", subscription)
