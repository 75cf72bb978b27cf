"""Tests for sermon_service."""

import unittest
from datetime import datetime, timezone

from adapter.fake.sermon_repository import FakeSermonRepository
from domain.model.errors import MissingFieldsError, NotFoundError, ValidationError
from services import sermon_service


class TestSermonService(unittest.TestCase):

    def setUp(self):
        self.repo = FakeSermonRepository()

    def _create(self, **overrides):
        kwargs = {
            "title": "The Power of Prayer",
            "speaker": "Pastor John Doe",
            "date": "2025-03-02",
            "tags": [" prayer ", "", "faith"],
        }
        kwargs.update(overrides)
        return sermon_service.create_sermon(self.repo, **kwargs)

    def test_create(self):
        sermon = self._create()

        self.assertEqual(sermon.date, datetime(2025, 3, 2, tzinfo=timezone.utc))
        self.assertEqual(sermon.tags, ["prayer", "faith"])
        self.assertEqual(sermon.view_count, 0)

    def test_missing_fields(self):
        with self.assertRaises(MissingFieldsError) as ctx:
            self._create(speaker=None, date=None)
        self.assertEqual(ctx.exception.fields, ["speaker", "date"])

    def test_summary_too_long(self):
        with self.assertRaises(ValidationError):
            self._create(summary="x" * 501)

    def test_view_increments_count(self):
        sermon = self._create()

        sermon_service.view_sermon(self.repo, sermon.id)
        viewed = sermon_service.view_sermon(self.repo, sermon.id)

        self.assertEqual(viewed.view_count, 2)

    def test_view_unknown_sermon(self):
        with self.assertRaises(NotFoundError):
            sermon_service.view_sermon(self.repo, "missing")

    def test_list_newest_first(self):
        self._create(title="Older", date="2025-01-05")
        self._create(title="Newer", date="2025-02-05")

        page = sermon_service.list_sermons(self.repo, page=1, limit=10)

        self.assertEqual([s.title for s in page.items], ["Newer", "Older"])


if __name__ == '__main__':
    unittest.main()
