from datetime import datetime
from typing import Protocol

from domain.model.event import Attendee, Event, EventFilter, RegistrationOutcome


class EventRepository(Protocol):
    def save(self, event: Event) -> bool: ...

    def get_by_id(self, event_id: str) -> Event | None: ...

    def find_many(self, event_filter: EventFilter) -> list[Event] | None: ...

    def add_attendee(self, event_id: str, attendee: Attendee) -> RegistrationOutcome | None:
        """Append ``attendee`` only if not already registered and capacity allows.

        The duplicate check, the capacity check and the append must happen as
        one atomic store operation. Returns None on store failure.
        """
        ...

    def count_upcoming(self, now: datetime) -> int | None: ...

    def count(self) -> int | None: ...

    def clear(self) -> bool: ...
