"""Tests for /api/prayer-requests and /api/contact routes."""

from api.tests.fixtures import RouteTestCase
from domain.model.notification import NotificationKind
from domain.model.user import Role


class TestPrayerRequestRoutes(RouteTestCase):

    def _submit(self, **body):
        payload = {"name": "Ada", "prayerRequest": "Healing for my mother"}
        payload.update(body)
        return self.client.post("/api/prayer-requests", json=payload)

    def test_submit(self):
        response = self._submit(email="ada@example.com")

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["message"], "Prayer request submitted successfully")
        stored = self.prayer_requests.get_by_id(body["id"])
        self.assertTrue(stored.is_private)
        self.assertEqual(self.queue.queue[0].kind, NotificationKind.PRAYER_REQUEST)
        self.assertEqual(self.queue.queue[0].to, "prayer@nrbcarepo.org")

    def test_submit_succeeds_when_queue_is_down(self):
        self.queue.available = False

        response = self._submit()

        self.assertEqual(response.status_code, 201)
        self.assertEqual(self.prayer_requests.count(), 1)

    def test_missing_fields(self):
        response = self.client.post("/api/prayer-requests", json={"email": "ada@example.com"})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["missing"], ["name", "prayerRequest"])

    def test_list_paginated_newest_first(self):
        for i in range(3):
            self._submit(name=f"Member {i}")

        response = self.client.get("/api/prayer-requests?page=1&limit=2", headers=self.auth_headers())

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["total"], 3)
        self.assertEqual(body["totalPages"], 2)
        self.assertEqual(body["currentPage"], 1)
        self.assertEqual(len(body["prayerRequests"]), 2)
        self.assertIn("prayerRequest", body["prayerRequests"][0])

    def test_mark_answered(self):
        request_id = self._submit().json()["id"]

        response = self.client.patch(
            f"/api/prayer-requests/{request_id}", json={"isAnswered": True}, headers=self.auth_headers(),
        )

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["isAnswered"])
        self.assertIsNotNone(response.json()["answeredAt"])

    def test_mark_unknown_request(self):
        response = self.client.patch(
            "/api/prayer-requests/missing", json={"isAnswered": True}, headers=self.auth_headers(),
        )
        self.assertEqual(response.status_code, 404)


class TestContactRoutes(RouteTestCase):

    def _send(self, **body):
        payload = {
            "name": "Bola",
            "email": "bola@example.com",
            "subject": "Visiting",
            "message": "What time is the Sunday service?",
        }
        payload.update(body)
        return self.client.post("/api/contact", json=payload)

    def test_send(self):
        response = self._send(phone="+234-800-000-0000")

        self.assertEqual(response.status_code, 201)
        self.assertEqual(response.json()["message"], "Message sent successfully")
        self.assertEqual(self.queue.queue[0].to, "office@nrbcarepo.org")

    def test_missing_subject(self):
        response = self._send(subject="")
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["missing"], ["subject"])

    def test_list_and_mark_read(self):
        self._send()
        headers = self.auth_headers(Role.PASTOR)

        listing = self.client.get("/api/contact", headers=headers).json()
        message_id = listing["messages"][0]["id"]
        response = self.client.patch(f"/api/contact/{message_id}", json={"isRead": True}, headers=headers)

        self.assertEqual(listing["total"], 1)
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.json()["isRead"])
        self.assertIsNotNone(response.json()["respondedAt"])
