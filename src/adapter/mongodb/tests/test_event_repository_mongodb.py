"""Tests for MongoEventRepository against a mocked collection."""

import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import MagicMock

from pymongo.errors import PyMongoError

from adapter.mongodb import EVENTS_COLLECTION_NAME
from adapter.mongodb.event_repository import MongoEventRepository
from domain.model.errors import StorageError
from domain.model.event import Attendee, EventCategory, EventFilter, RegistrationOutcome

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)


def _event_doc(**kwargs) -> dict:
    doc = {
        '_id': 'event-1',
        'title': 'Community Outreach Program',
        'description': 'Food distribution and health screenings.',
        'date': NOW + timedelta(days=14),
        'time': '10:00 AM',
        'category': 'outreach',
        'is_recurring': False,
        'recurring_type': None,
        'max_attendees': 2,
        'registered_attendees': [],
        'image': None,
        'created_by': 'pastor-id',
        'created_at': NOW,
    }
    doc.update(kwargs)
    return doc


def _attendee(email: str = 'ada@example.com') -> Attendee:
    return Attendee(name='Ada', email=email, registered_at=NOW)


class MongoEventRepositoryTestBase(unittest.TestCase):

    def setUp(self):
        self.collection = MagicMock()
        self.db = MagicMock()
        self.db.__getitem__.return_value = self.collection
        self.repo = MongoEventRepository(self.db)


class TestAddAttendee(MongoEventRepositoryTestBase):

    def test_uses_one_conditional_update(self):
        self.collection.update_one.return_value.modified_count = 1

        outcome = self.repo.add_attendee('event-1', _attendee())

        self.assertEqual(outcome, RegistrationOutcome.REGISTERED)
        self.db.__getitem__.assert_called_with(EVENTS_COLLECTION_NAME)
        query, update = self.collection.update_one.call_args[0]
        self.assertEqual(query['_id'], 'event-1')
        self.assertEqual(query['registered_attendees.email'], {'$ne': 'ada@example.com'})
        self.assertIn({'max_attendees': None}, query['$or'])
        self.assertEqual(update['$push']['registered_attendees']['email'], 'ada@example.com')
        self.collection.find_one.assert_not_called()

    def test_missing_event(self):
        self.collection.update_one.return_value.modified_count = 0
        self.collection.find_one.return_value = None

        self.assertEqual(self.repo.add_attendee('event-1', _attendee()), RegistrationOutcome.NOT_FOUND)

    def test_already_registered(self):
        self.collection.update_one.return_value.modified_count = 0
        self.collection.find_one.return_value = _event_doc(registered_attendees=[
            {'name': 'Ada', 'email': 'ada@example.com', 'registered_at': NOW, 'phone': None},
        ])

        self.assertEqual(self.repo.add_attendee('event-1', _attendee()), RegistrationOutcome.ALREADY_REGISTERED)

    def test_full(self):
        self.collection.update_one.return_value.modified_count = 0
        self.collection.find_one.return_value = _event_doc(registered_attendees=[
            {'name': 'A', 'email': 'a@example.com', 'registered_at': NOW},
            {'name': 'B', 'email': 'b@example.com', 'registered_at': NOW},
        ])

        self.assertEqual(self.repo.add_attendee('event-1', _attendee()), RegistrationOutcome.FULL)

    def test_store_error(self):
        self.collection.update_one.side_effect = PyMongoError("boom")
        self.assertIsNone(self.repo.add_attendee('event-1', _attendee()))

    def test_open_event_without_match_is_retried_once(self):
        self.collection.update_one.return_value.modified_count = 0
        self.collection.find_one.return_value = _event_doc()

        self.assertIsNone(self.repo.add_attendee('event-1', _attendee()))
        self.assertEqual(self.collection.update_one.call_count, 2)

    def test_second_attempt_registers(self):
        self.collection.update_one.side_effect = [MagicMock(modified_count=0), MagicMock(modified_count=1)]
        self.collection.find_one.return_value = _event_doc()

        self.assertEqual(self.repo.add_attendee('event-1', _attendee()), RegistrationOutcome.REGISTERED)


class TestQueries(MongoEventRepositoryTestBase):

    def test_get_by_id_maps_document(self):
        self.collection.find_one.return_value = _event_doc(location=None)

        event = self.repo.get_by_id('event-1')

        self.assertEqual(event.category, EventCategory.OUTREACH)
        self.assertEqual(event.location, 'New Revival Baptist Church, Arepo')
        self.assertEqual(event.max_attendees, 2)

    def test_find_many_builds_filter_and_sort(self):
        cursor = self.collection.find.return_value.sort.return_value.limit.return_value
        cursor.__iter__.return_value = iter([_event_doc()])

        events = self.repo.find_many(EventFilter(upcoming_after=NOW, category=EventCategory.OUTREACH, limit=10))

        self.collection.find.assert_called_once_with({'date': {'$gte': NOW}, 'category': 'outreach'})
        self.collection.find.return_value.sort.assert_called_once_with('date', 1)
        self.collection.find.return_value.sort.return_value.limit.assert_called_once_with(10)
        self.assertEqual(len(events), 1)

    def test_get_by_id_store_error_raises(self):
        self.collection.find_one.side_effect = PyMongoError("boom")

        with self.assertRaises(StorageError):
            self.repo.get_by_id('event-1')

    def test_find_many_store_error(self):
        self.collection.find.side_effect = PyMongoError("boom")
        self.assertIsNone(self.repo.find_many(EventFilter()))

    def test_count_upcoming(self):
        self.collection.count_documents.return_value = 4

        self.assertEqual(self.repo.count_upcoming(NOW), 4)
        self.collection.count_documents.assert_called_once_with({'date': {'$gte': NOW}})


if __name__ == '__main__':
    unittest.main()
