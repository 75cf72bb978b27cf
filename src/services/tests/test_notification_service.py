"""Tests for notification building and dispatch."""

import unittest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from adapter.fake.notification_queue import FakeNotificationQueue
from domain.model.event import Attendee, Event
from domain.model.notification import Notification, NotificationKind
from domain.model.prayer_request import PrayerRequest
from services import notification_service


def _prayer_request(**kwargs) -> PrayerRequest:
    defaults = {
        "id": "pr-1",
        "name": "Ada",
        "prayer_request": "Healing",
        "created_at": datetime(2025, 1, 1, 9, 30, tzinfo=timezone.utc),
    }
    defaults.update(kwargs)
    return PrayerRequest(**defaults)


class TestBuilders(unittest.TestCase):

    def test_user_content_is_escaped(self):
        request = _prayer_request(name="<script>alert(1)</script>", prayer_request="a & b")

        notification = notification_service.prayer_request_notice(request, "prayer@nrbcarepo.org")

        self.assertNotIn("<script>", notification.html)
        self.assertIn("&lt;script&gt;", notification.html)
        self.assertIn("a &amp; b", notification.html)

    def test_privacy_label(self):
        shared = notification_service.prayer_request_notice(_prayer_request(is_private=False), "p@x.org")
        private = notification_service.prayer_request_notice(_prayer_request(), "p@x.org")

        self.assertIn("Can be shared", shared.html)
        self.assertIn("Private", private.html)

    def test_registration_confirmation_goes_to_attendee(self):
        now = datetime.now(timezone.utc)
        event = Event(
            id="e-1", title="Baptism Service", description="d", date=now, time="11:00 AM",
            created_by="u-1", created_at=now,
        )
        attendee = Attendee(name="Bola", email="bola@example.com", registered_at=now)

        notification = notification_service.event_registration_confirmation(event, attendee)

        self.assertEqual(notification.to, "bola@example.com")
        self.assertEqual(notification.subject, "Event Registration Confirmed - Baptism Service")
        self.assertEqual(notification.kind, NotificationKind.EVENT_REGISTRATION)

    def test_notification_survives_serialization(self):
        notification = notification_service.prayer_request_notice(_prayer_request(), "p@x.org")
        self.assertEqual(Notification.from_dict(notification.to_dict()), notification)


class TestDispatch(unittest.TestCase):

    def setUp(self):
        self.notification = notification_service.prayer_request_notice(_prayer_request(), "p@x.org")

    def test_queued(self):
        queue = FakeNotificationQueue()
        self.assertTrue(notification_service.dispatch(queue, self.notification))
        self.assertEqual(queue.size(), 1)

    def test_unavailable_queue_returns_false(self):
        self.assertFalse(notification_service.dispatch(FakeNotificationQueue(available=False), self.notification))

    def test_raising_queue_is_contained(self):
        queue = MagicMock()
        queue.enqueue.side_effect = RuntimeError("boom")

        self.assertFalse(notification_service.dispatch(queue, self.notification))


if __name__ == '__main__':
    unittest.main()
