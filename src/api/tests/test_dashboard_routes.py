"""Tests for /api/dashboard/stats."""

from api.tests.fixtures import RouteTestCase
from services import seed_service


class TestDashboardRoutes(RouteTestCase):

    def test_stats_after_seed(self):
        seed_service.seed(self.users, self.events, self.sermons, self.hasher)
        self.client.post("/api/prayer-requests", json={"name": "Ada", "prayerRequest": "Peace"})
        self.client.post("/api/contact", json={
            "name": "Bola", "email": "bola@example.com", "subject": "Hello", "message": "Hi",
        })

        response = self.client.get("/api/dashboard/stats", headers=self.auth_headers())

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["stats"], {
            "totalPrayerRequests": 1,
            "answeredPrayers": 0,
            "upcomingEvents": 6,
            "totalMessages": 1,
            "newsletterSubscribers": 0,
            "totalSermons": 5,
        })
        self.assertEqual(body["recentPrayerRequests"][0]["name"], "Ada")
        self.assertEqual(body["recentMessages"][0]["subject"], "Hello")

    def test_store_failure_is_500(self):
        self.sermons.count = lambda: None

        response = self.client.get("/api/dashboard/stats", headers=self.auth_headers())

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Failed to fetch dashboard stats")
