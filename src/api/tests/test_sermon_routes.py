"""Tests for /api/sermons routes."""

from unittest.mock import MagicMock

from pymongo.errors import PyMongoError

from adapter.mongodb.sermon_repository import MongoSermonRepository
from api.dependencies import get_sermon_repo
from api.main import app
from api.tests.fixtures import RouteTestCase
from domain.model.user import Role


class TestSermonRoutes(RouteTestCase):

    def _create(self, **body):
        payload = {
            "title": "The Power of Prayer",
            "speaker": "Pastor John Doe",
            "date": "2026-09-06T09:00:00Z",
            "scripture": "Matthew 6:9-13",
            "tags": ["prayer", " faith "],
        }
        payload.update(body)
        return self.client.post("/api/sermons", json=payload, headers=self.auth_headers(Role.PASTOR))

    def test_create(self):
        response = self._create()

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body["viewCount"], 0)
        self.assertEqual(body["tags"], ["prayer", "faith"])

    def test_create_requires_speaker(self):
        response = self._create(speaker=None)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"]["missing"], ["speaker"])

    def test_create_requires_token(self):
        response = self.client.post("/api/sermons", json={"title": "x"})
        self.assertEqual(response.status_code, 401)

    def test_list_newest_first(self):
        self._create(title="Older", date="2026-08-30T09:00:00Z")
        self._create(title="Newer", date="2026-09-06T09:00:00Z")

        response = self.client.get("/api/sermons")

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([s["title"] for s in body["sermons"]], ["Newer", "Older"])
        self.assertEqual(body["total"], 2)

    def test_each_fetch_counts_a_view(self):
        sermon_id = self._create().json()["id"]

        self.client.get(f"/api/sermons/{sermon_id}")
        response = self.client.get(f"/api/sermons/{sermon_id}")

        self.assertEqual(response.json()["viewCount"], 2)

    def test_unknown_sermon(self):
        self.assertEqual(self.client.get("/api/sermons/missing").status_code, 404)

    def test_store_outage_is_500_not_404(self):
        collection = MagicMock()
        collection.find_one_and_update.side_effect = PyMongoError("down")
        db = MagicMock()
        db.__getitem__.return_value = collection
        app.dependency_overrides[get_sermon_repo] = lambda: MongoSermonRepository(db)

        response = self.client.get("/api/sermons/abc")

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["detail"], "Failed to fetch sermon")
