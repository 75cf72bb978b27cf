"""Tests for newsletter subscribe/unsubscribe."""

import unittest

from adapter.fake.newsletter_repository import FakeNewsletterRepository
from adapter.fake.notification_queue import FakeNotificationQueue
from domain.model.errors import DuplicateError, MissingFieldsError, NotFoundError
from domain.model.notification import NotificationKind
from services import newsletter_service


class TestSubscribe(unittest.TestCase):

    def setUp(self):
        self.repo = FakeNewsletterRepository()
        self.queue = FakeNotificationQueue()

    def test_new_subscription_welcomed(self):
        result = newsletter_service.subscribe(self.repo, self.queue, "Friend@Example.com", "Friend")

        self.assertFalse(result.reactivated)
        self.assertTrue(result.subscription.is_active)
        self.assertEqual(result.subscription.email, "friend@example.com")
        self.assertEqual([n.kind for n in self.queue.queue], [NotificationKind.NEWSLETTER_WELCOME])

    def test_email_required(self):
        with self.assertRaises(MissingFieldsError):
            newsletter_service.subscribe(self.repo, self.queue, "  ")

    def test_active_subscription_rejected(self):
        newsletter_service.subscribe(self.repo, self.queue, "friend@example.com")
        with self.assertRaises(DuplicateError):
            newsletter_service.subscribe(self.repo, self.queue, "friend@example.com")

    def test_inactive_subscription_reactivated_in_place(self):
        first = newsletter_service.subscribe(self.repo, self.queue, "friend@example.com").subscription
        newsletter_service.unsubscribe(self.repo, "friend@example.com")
        self.queue.queue.clear()

        result = newsletter_service.subscribe(self.repo, self.queue, "friend@example.com")

        self.assertTrue(result.reactivated)
        self.assertEqual(result.subscription.id, first.id)
        self.assertTrue(result.subscription.is_active)
        self.assertIsNone(result.subscription.unsubscribed_at)
        self.assertEqual(len(self.repo.store), 1)
        self.assertEqual(len(self.queue.queue), 0)


class TestUnsubscribe(unittest.TestCase):

    def setUp(self):
        self.repo = FakeNewsletterRepository()
        self.queue = FakeNotificationQueue()

    def test_unsubscribe_sets_timestamp(self):
        newsletter_service.subscribe(self.repo, self.queue, "friend@example.com")

        result = newsletter_service.unsubscribe(self.repo, "FRIEND@example.com")

        self.assertFalse(result.is_active)
        self.assertIsNotNone(result.unsubscribed_at)
        self.assertEqual(self.repo.count_active(), 0)

    def test_unknown_email(self):
        with self.assertRaises(NotFoundError):
            newsletter_service.unsubscribe(self.repo, "nobody@example.com")


if __name__ == '__main__':
    unittest.main()
