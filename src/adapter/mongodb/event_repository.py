"""MongoDB implementation of EventRepository."""

from dataclasses import asdict
from datetime import datetime
from logging import getLogger

from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import EVENTS_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.event import (
    DEFAULT_LOCATION, Attendee, Event, EventCategory, EventFilter, RecurringType,
    RegistrationOutcome,
)

logger = getLogger(__name__)


class MongoEventRepository:
    def __init__(self, db: Database):
        self.collection = db[EVENTS_COLLECTION_NAME]

    # ── indexes ──────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for events collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('date', 1)], 'idx_events_date')
            create_index_safe(self.collection, [('category', 1), ('date', 1)], 'idx_events_category_date')
            return True
        except Exception as e:
            logger.error("Failed to create events indexes", extra={"error": str(e)})
            return False

    # ── helpers ──────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Event:
        """Convert MongoDB document to Event domain model."""
        attendees = [
            Attendee(
                name=a['name'],
                email=a['email'],
                registered_at=a['registered_at'],
                phone=a.get('phone'),
            )
            for a in doc.get('registered_attendees', [])
        ]
        recurring_type = doc.get('recurring_type')
        return Event(
            id=doc['_id'],
            title=doc['title'],
            description=doc['description'],
            date=doc['date'],
            time=doc['time'],
            created_by=doc['created_by'],
            created_at=doc['created_at'],
            location=doc.get('location') or DEFAULT_LOCATION,
            category=EventCategory(doc.get('category', EventCategory.WORSHIP.value)),
            is_recurring=doc.get('is_recurring', False),
            recurring_type=RecurringType(recurring_type) if recurring_type else None,
            max_attendees=doc.get('max_attendees'),
            registered_attendees=attendees,
            image=doc.get('image'),
        )

    def _to_document(self, event: Event) -> dict:
        return {
            '_id': event.id,
            'title': event.title,
            'description': event.description,
            'date': event.date,
            'time': event.time,
            'location': event.location,
            'category': event.category.value,
            'is_recurring': event.is_recurring,
            'recurring_type': event.recurring_type.value if event.recurring_type else None,
            'max_attendees': event.max_attendees,
            'registered_attendees': [asdict(a) for a in event.registered_attendees],
            'image': event.image,
            'created_by': event.created_by,
            'created_at': event.created_at,
        }

    # ── write operations ─────────────────────────────────────

    def save(self, event: Event) -> bool:
        try:
            self.collection.insert_one(self._to_document(event))
            logger.info("Event saved", extra={"eventId": event.id})
            return True
        except PyMongoError as e:
            logger.error("Failed to save event", extra={"eventId": event.id, "error": str(e)})
            return False

    def add_attendee(self, event_id: str, attendee: Attendee) -> RegistrationOutcome | None:
        """Register ``attendee`` with one conditional update.

        The filter only matches when the email is not yet in the attendee list
        and the list is shorter than max_attendees (or there is no cap), so two
        concurrent registrations cannot both take the last place.
        """
        query = {
            '_id': event_id,
            'registered_attendees.email': {'$ne': attendee.email},
            '$or': [
                {'max_attendees': None},
                {'$expr': {'$lt': [{'$size': '$registered_attendees'}, '$max_attendees']}},
            ],
        }
        # A second pass covers the document changing between update and re-read
        for _ in range(2):
            try:
                result = self.collection.update_one(
                    query,
                    {'$push': {'registered_attendees': asdict(attendee)}},
                )
                if result.modified_count == 1:
                    logger.info("Attendee registered", extra={"eventId": event_id})
                    return RegistrationOutcome.REGISTERED

                # No match: find out which condition failed
                doc = self.collection.find_one({'_id': event_id})
            except PyMongoError as e:
                logger.error("Failed to register attendee", extra={"eventId": event_id, "error": str(e)})
                return None

            if doc is None:
                return RegistrationOutcome.NOT_FOUND
            outcome = self._to_domain(doc).registration_outcome(attendee.email)
            if outcome is not RegistrationOutcome.REGISTERED:
                return outcome

        logger.error("Attendee not stored although the event accepts registrations", extra={"eventId": event_id})
        return None

    def clear(self) -> bool:
        try:
            self.collection.delete_many({})
            return True
        except PyMongoError as e:
            logger.error("Failed to clear events", extra={"error": str(e)})
            return False

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, event_id: str) -> Event | None:
        try:
            doc = self.collection.find_one({'_id': event_id})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to retrieve event", extra={"eventId": event_id, "error": str(e)})
            raise StorageError("Failed to retrieve event") from e

    def find_many(self, event_filter: EventFilter) -> list[Event] | None:
        """List events in ascending date order."""
        query: dict = {}
        if event_filter.upcoming_after:
            query['date'] = {'$gte': event_filter.upcoming_after}
        if event_filter.category:
            query['category'] = event_filter.category.value
        try:
            docs = self.collection.find(query).sort('date', 1).limit(event_filter.limit)
            events = [self._to_domain(doc) for doc in docs]
            logger.debug("Listed events", extra={"count": len(events)})
            return events
        except PyMongoError as e:
            logger.error("Failed to list events", extra={"error": str(e)})
            return None

    def count_upcoming(self, now: datetime) -> int | None:
        try:
            return self.collection.count_documents({'date': {'$gte': now}})
        except PyMongoError as e:
            logger.error("Failed to count upcoming events", extra={"error": str(e)})
            return None

    def count(self) -> int | None:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            logger.error("Failed to count events", extra={"error": str(e)})
            return None
