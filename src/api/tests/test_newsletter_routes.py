"""Tests for /api/newsletter routes."""

from api.tests.fixtures import RouteTestCase
from domain.model.notification import NotificationKind


class TestNewsletterRoutes(RouteTestCase):

    def _subscribe(self, email="grace@example.com", name="Grace"):
        return self.client.post("/api/newsletter/subscribe", json={"email": email, "name": name})

    def test_subscribe_sends_welcome(self):
        response = self._subscribe()

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Successfully subscribed to newsletter")
        self.assertTrue(body["subscription"]["isActive"])
        self.assertEqual(self.queue.queue[0].kind, NotificationKind.NEWSLETTER_WELCOME)

    def test_active_subscriber_is_400(self):
        self._subscribe()

        response = self._subscribe(email="GRACE@example.com")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Already subscribed to newsletter")

    def test_resubscribe_reactivates_same_record(self):
        original = self._subscribe().json()["subscription"]
        self.client.post("/api/newsletter/unsubscribe", json={"email": "grace@example.com"})
        self.queue.queue.clear()

        response = self._subscribe()

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["message"], "Newsletter subscription reactivated")
        self.assertEqual(body["subscription"]["id"], original["id"])
        self.assertTrue(body["subscription"]["isActive"])
        self.assertEqual(len(self.queue.queue), 0)

    def test_unsubscribe(self):
        self._subscribe()

        response = self.client.post("/api/newsletter/unsubscribe", json={"email": "grace@example.com"})

        self.assertEqual(response.status_code, 200)
        self.assertFalse(response.json()["subscription"]["isActive"])
        self.assertIsNotNone(response.json()["subscription"]["unsubscribedAt"])
        self.assertEqual(self.newsletter.count_active(), 0)

    def test_unsubscribe_unknown_email(self):
        response = self.client.post("/api/newsletter/unsubscribe", json={"email": "nobody@example.com"})

        self.assertEqual(response.status_code, 404)

    def test_malformed_email(self):
        response = self._subscribe(email="not-an-email")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["fields"], ["email"])
