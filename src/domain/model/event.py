from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

DEFAULT_LOCATION = 'New Revival Baptist Church, Arepo'


class EventCategory(str, Enum):
    WORSHIP = 'worship'
    BIBLE_STUDY = 'bible-study'
    YOUTH = 'youth'
    OUTREACH = 'outreach'
    SPECIAL = 'special'
    CONFERENCE = 'conference'


class RecurringType(str, Enum):
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'


class RegistrationOutcome(str, Enum):
    """Result of a single conditional attendee insert."""
    REGISTERED = 'registered'
    NOT_FOUND = 'not_found'
    ALREADY_REGISTERED = 'already_registered'
    FULL = 'full'


@dataclass(frozen=True)
class Attendee:
    """Person registered for an event."""
    name: str
    email: str
    registered_at: datetime
    phone: str | None = None


@dataclass
class Event:
    """Domain model representing a church event."""
    id: str
    title: str
    description: str
    date: datetime
    time: str
    created_by: str
    created_at: datetime
    location: str = DEFAULT_LOCATION
    category: EventCategory = EventCategory.WORSHIP
    is_recurring: bool = False
    recurring_type: RecurringType | None = None
    max_attendees: int | None = None
    registered_attendees: list[Attendee] = field(default_factory=list)
    image: str | None = None

    def is_registered(self, email: str) -> bool:
        return any(a.email == email for a in self.registered_attendees)

    @property
    def is_full(self) -> bool:
        if self.max_attendees is None:
            return False
        return len(self.registered_attendees) >= self.max_attendees

    def registration_outcome(self, email: str) -> RegistrationOutcome:
        """Decide whether ``email`` may be added to this event right now."""
        if self.is_registered(email):
            return RegistrationOutcome.ALREADY_REGISTERED
        if self.is_full:
            return RegistrationOutcome.FULL
        return RegistrationOutcome.REGISTERED


@dataclass(frozen=True)
class EventFilter:
    """Query options for the public event listing."""
    upcoming_after: datetime | None = None
    category: EventCategory | None = None
    limit: int = 50
