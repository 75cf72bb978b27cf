"""In-memory implementation of EventRepository for testing."""

import threading
from dataclasses import replace
from datetime import datetime

from domain.model.event import Attendee, Event, EventFilter, RegistrationOutcome


class FakeEventRepository:
    def __init__(self):
        self.store: dict[str, Event] = {}
        # Stands in for MongoDB's single-document atomicity
        self._lock = threading.Lock()

    # ── write operations ─────────────────────────────────────

    def save(self, event: Event) -> bool:
        self.store[event.id] = replace(event, registered_attendees=list(event.registered_attendees))
        return True

    def add_attendee(self, event_id: str, attendee: Attendee) -> RegistrationOutcome | None:
        with self._lock:
            event = self.store.get(event_id)
            if event is None:
                return RegistrationOutcome.NOT_FOUND
            outcome = event.registration_outcome(attendee.email)
            if outcome is RegistrationOutcome.REGISTERED:
                event.registered_attendees.append(attendee)
            return outcome

    def clear(self) -> bool:
        self.store.clear()
        return True

    # ── read operations ──────────────────────────────────────

    def get_by_id(self, event_id: str) -> Event | None:
        return self.store.get(event_id)

    def find_many(self, event_filter: EventFilter) -> list[Event] | None:
        events = list(self.store.values())
        if event_filter.upcoming_after:
            events = [e for e in events if e.date >= event_filter.upcoming_after]
        if event_filter.category:
            events = [e for e in events if e.category == event_filter.category]
        events.sort(key=lambda e: e.date)
        return events[:event_filter.limit]

    def count_upcoming(self, now: datetime) -> int | None:
        return sum(1 for e in self.store.values() if e.date >= now)

    def count(self) -> int | None:
        return len(self.store)
