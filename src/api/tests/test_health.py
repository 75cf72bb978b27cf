"""Tests for the health endpoint and store availability handling."""

import unittest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from adapter.fake.notification_queue import FakeNotificationQueue
from adapter.fake.sermon_repository import FakeSermonRepository
from api.dependencies import get_mongo_connection, get_notification_queue, get_sermon_repo, get_settings
from api.main import app
from api.tests.fixtures import TEST_SETTINGS


class TestHealth(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.mongo = MagicMock()
        self.mongo.ping.return_value = True
        self.queue = FakeNotificationQueue()
        app.dependency_overrides[get_mongo_connection] = lambda: self.mongo
        app.dependency_overrides[get_notification_queue] = lambda: self.queue
        app.dependency_overrides[get_settings] = lambda: TEST_SETTINGS

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_all_services_up(self):
        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["status"], "OK")
        self.assertEqual(body["version"], app.version)
        self.assertEqual(body["services"]["mongodb"]["status"], "healthy")
        self.assertTrue(body["timestamp"].endswith("Z"))

    def test_queue_down_is_degraded(self):
        self.queue.available = False

        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "degraded")
        self.assertEqual(response.json()["services"]["notifications"]["status"], "unhealthy")

    def test_mongo_down_is_503(self):
        self.mongo.ping.return_value = False

        response = self.client.get("/api/health")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["status"], "unhealthy")

    def test_repository_routes_503_without_database(self):
        self.mongo.get_database.return_value = None

        response = self.client.get("/api/sermons")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["detail"], "Database unavailable")


class TestErrorHandlers(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app, raise_server_exceptions=False)

    def tearDown(self):
        app.dependency_overrides.clear()

    def test_unexpected_error_is_generic_500(self):
        repo = MagicMock()
        repo.find_page.side_effect = RuntimeError("boom")
        app.dependency_overrides[get_sermon_repo] = lambda: repo

        response = self.client.get("/api/sermons")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"detail": "Something went wrong!"})

    def test_query_validation_is_400(self):
        app.dependency_overrides[get_sermon_repo] = lambda: FakeSermonRepository()

        response = self.client.get("/api/sermons?limit=0")

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["message"], "Invalid request")
        self.assertEqual(response.json()["detail"]["fields"], ["limit"])

    def test_root(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "running")
