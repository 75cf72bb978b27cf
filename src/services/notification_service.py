"""Builds outbound e-mails and hands them to the notification queue.

Dispatch is fire-and-forget from the caller's point of view: the store
write that triggered a notification has already succeeded, so a queue
failure is logged and swallowed rather than reported to the client.
"""

import logging
from datetime import datetime, timezone
from html import escape

from domain.model.contact_message import ContactMessage
from domain.model.event import Attendee, Event
from domain.model.newsletter import NewsletterSubscription
from domain.model.notification import Notification, NotificationKind
from domain.model.prayer_request import PrayerRequest
from port.notification_queue import NotificationQueue

logger = logging.getLogger(__name__)

CHURCH_NAME = 'New Revival Baptist Church'
CHURCH_SHORT_NAME = 'NRBC Arepo'


def _stamp(moment: datetime) -> str:
    return moment.astimezone(timezone.utc).strftime('%Y-%m-%d %H:%M UTC')


def prayer_request_notice(request: PrayerRequest, to: str) -> Notification:
    html = f"""
        <h2>New Prayer Request Submitted</h2>
        <p><strong>Name:</strong> {escape(request.name)}</p>
        <p><strong>Email:</strong> {escape(request.email or 'Not provided')}</p>
        <p><strong>Request:</strong></p>
        <p>{escape(request.prayer_request)}</p>
        <p><strong>Privacy:</strong> {'Private' if request.is_private else 'Can be shared'}</p>
        <p><strong>Submitted:</strong> {_stamp(request.created_at)}</p>
    """
    return Notification(
        kind=NotificationKind.PRAYER_REQUEST,
        to=to,
        subject=f'New Prayer Request - {CHURCH_SHORT_NAME}',
        html=html,
    )


def event_registration_confirmation(event: Event, attendee: Attendee) -> Notification:
    html = f"""
        <h2>Registration Confirmed</h2>
        <p>Dear {escape(attendee.name)},</p>
        <p>Thank you for registering for <strong>{escape(event.title)}</strong></p>
        <p><strong>Date:</strong> {event.date.strftime('%a %b %d %Y')}</p>
        <p><strong>Time:</strong> {escape(event.time)}</p>
        <p><strong>Location:</strong> {escape(event.location)}</p>
        <p>We look forward to seeing you there!</p>
        <p>Blessings,<br>{CHURCH_NAME}</p>
    """
    return Notification(
        kind=NotificationKind.EVENT_REGISTRATION,
        to=attendee.email,
        subject=f'Event Registration Confirmed - {event.title}',
        html=html,
    )


def contact_message_notice(message: ContactMessage, to: str) -> Notification:
    html = f"""
        <h2>New Contact Message</h2>
        <p><strong>Name:</strong> {escape(message.name)}</p>
        <p><strong>Email:</strong> {escape(message.email)}</p>
        <p><strong>Phone:</strong> {escape(message.phone or 'Not provided')}</p>
        <p><strong>Subject:</strong> {escape(message.subject)}</p>
        <p><strong>Message:</strong></p>
        <p>{escape(message.message)}</p>
        <p><strong>Submitted:</strong> {_stamp(message.created_at)}</p>
    """
    return Notification(
        kind=NotificationKind.CONTACT_MESSAGE,
        to=to,
        subject=f'New Contact Message - {message.subject}',
        html=html,
    )


def newsletter_welcome(subscription: NewsletterSubscription) -> Notification:
    html = f"""
        <h2>Welcome to {CHURCH_NAME} Newsletter!</h2>
        <p>Dear {escape(subscription.name or 'Friend')},</p>
        <p>Thank you for subscribing to our newsletter. You'll receive updates about:</p>
        <ul>
          <li>Upcoming events and services</li>
          <li>Prayer requests and testimonies</li>
          <li>Community outreach programs</li>
          <li>Spiritual encouragement and Bible teachings</li>
        </ul>
        <p>God bless you!</p>
        <p>{CHURCH_NAME}, Arepo</p>
    """
    return Notification(
        kind=NotificationKind.NEWSLETTER_WELCOME,
        to=subscription.email,
        subject='Welcome to NRBC Newsletter!',
        html=html,
    )


def dispatch(queue: NotificationQueue, notification: Notification | None) -> bool:
    """Queue ``notification`` for the worker. Never raises."""
    if notification is None:
        return False
    try:
        queued = queue.enqueue(notification)
    except Exception as e:
        logger.error("Notification enqueue raised", extra={**notification.log_extra, "error": str(e)})
        return False
    if not queued:
        logger.warning("Notification not queued", extra=notification.log_extra)
    return queued
