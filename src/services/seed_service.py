"""Initial data for a fresh deployment: two staff accounts, sample events and sermons."""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from domain.model.errors import DomainError
from domain.model.event import Event, EventCategory, RecurringType
from domain.model.sermon import Sermon
from domain.model.user import Role
from port.event_repository import EventRepository
from port.sermon_repository import SermonRepository
from port.user_repository import UserRepository
from services.password_hasher import PasswordHasher

logger = logging.getLogger(__name__)

PLACEHOLDER_PHONE = '+234-xxx-xxx-xxxx'

DEFAULT_USERS = [
    {
        'name': 'Pastor Administrator',
        'email': 'admin@nrbcarepo.org',
        'password': 'admin123',
        'role': Role.ADMIN,
        'department': 'Leadership',
    },
    {
        'name': 'Pastor John Doe',
        'email': 'pastor@nrbcarepo.org',
        'password': 'pastor123',
        'role': Role.PASTOR,
        'department': 'Pastoral Care',
    },
]

# (title, description, days ahead, time, category, recurring type, capacity, creator key)
SAMPLE_EVENTS = [
    ('Sunday Morning Worship Service',
     'Join us for our weekly worship service with inspiring music, prayer, and biblical teaching.',
     7, '9:00 AM', EventCategory.WORSHIP, RecurringType.WEEKLY, 200, 'admin'),
    ('Wednesday Bible Study',
     "Deep dive into God's Word with our midweek Bible study. All ages welcome!",
     3, '7:00 PM', EventCategory.BIBLE_STUDY, RecurringType.WEEKLY, 100, 'pastor'),
    ('Youth Fellowship Night',
     'Fun games, worship, and fellowship for our young people aged 13-25.',
     5, '6:30 PM', EventCategory.YOUTH, None, 50, 'admin'),
    ('Community Outreach Program',
     'Join us as we serve our community with food distribution and health screenings.',
     14, '10:00 AM', EventCategory.OUTREACH, None, 30, 'pastor'),
    ('Annual Revival Conference 2025',
     'Three days of powerful worship, inspiring messages, and spiritual renewal with guest speakers.',
     30, '9:00 AM', EventCategory.CONFERENCE, None, 500, 'admin'),
    ('Baptism Service',
     'Celebrating new believers as they take the next step in their faith journey through baptism.',
     21, '11:00 AM', EventCategory.SPECIAL, None, 150, 'pastor'),
]

SAMPLE_SERMONS = [
    {
        'title': 'Walking in Faith During Difficult Times',
        'speaker': 'Pastor John Doe',
        'days_ago': 7,
        'scripture': 'Hebrews 11:1',
        'summary': "A powerful message about maintaining faith when facing life's challenges "
                   "and trusting in God's perfect plan.",
        'series': 'Faith That Overcomes',
        'tags': ['faith', 'trials', 'trust', 'hope'],
        'view_count': 156,
    },
    {
        'title': 'The Power of Prayer',
        'speaker': 'Pastor John Doe',
        'days_ago': 14,
        'scripture': 'Matthew 6:9-13',
        'summary': 'Understanding the importance of prayer in our daily lives and how to develop '
                   'a meaningful prayer life.',
        'series': 'Foundations of Faith',
        'tags': ['prayer', 'communication', 'relationship', 'god'],
        'view_count': 234,
    },
    {
        'title': 'Love Your Neighbor as Yourself',
        'speaker': 'Guest Speaker Sarah Johnson',
        'days_ago': 21,
        'scripture': 'Mark 12:31',
        'summary': 'Exploring what it means to truly love others as Christ loves us, with practical '
                   'applications for daily life.',
        'series': "Christ's Greatest Commandments",
        'tags': ['love', 'community', 'service', 'compassion'],
        'view_count': 189,
    },
    {
        'title': "Finding Hope in God's Promises",
        'speaker': 'Pastor John Doe',
        'days_ago': 28,
        'scripture': 'Romans 15:13',
        'summary': 'Discovering the unshakeable hope we have in Christ and His faithful promises '
                   'to His children.',
        'series': 'Faith That Overcomes',
        'tags': ['hope', 'promises', 'encouragement', 'faith'],
        'view_count': 278,
    },
    {
        'title': 'The Great Commission: Our Calling',
        'speaker': 'Pastor John Doe',
        'days_ago': 35,
        'scripture': 'Matthew 28:19-20',
        'summary': 'Understanding our responsibility as Christians to share the Gospel and make '
                   'disciples of all nations.',
        'series': 'Living on Mission',
        'tags': ['evangelism', 'mission', 'discipleship', 'calling'],
        'view_count': 201,
    },
]


@dataclass(frozen=True)
class SeedSummary:
    users: int
    events: int
    sermons: int


def seed(
    users: UserRepository,
    events: EventRepository,
    sermons: SermonRepository,
    hasher: PasswordHasher,
    now: datetime | None = None,
) -> SeedSummary:
    """Wipe users, events and sermons, then insert the sample data.

    Passwords go through the same hasher used by registration so that the
    seeded accounts can log in with the configured work factor.
    """
    now = now or datetime.now(timezone.utc)

    for repo in (users, events, sermons):
        if not repo.clear():
            raise DomainError(f"Failed to clear {type(repo).__name__}")
    logger.info("Cleared existing data")

    created = {}
    for entry in DEFAULT_USERS:
        user = users.create(
            name=entry['name'],
            email=entry['email'],
            password_hash=hasher.hash(entry['password']),
            role=entry['role'],
            phone=PLACEHOLDER_PHONE,
            department=entry['department'],
        )
        if user is None:
            raise DomainError(f"Failed to create user {entry['email']}")
        created[entry['role'].value] = user
    logger.info("Created default users", extra={"count": len(created)})

    for title, description, days, time, category, recurring, capacity, creator in SAMPLE_EVENTS:
        event = Event(
            id=uuid.uuid4().hex,
            title=title,
            description=description,
            date=now + timedelta(days=days),
            time=time,
            category=category,
            is_recurring=recurring is not None,
            recurring_type=recurring,
            max_attendees=capacity,
            created_by=created[creator].id,
            created_at=now,
        )
        if not events.save(event):
            raise DomainError(f"Failed to create event {title!r}")
    logger.info("Created sample events", extra={"count": len(SAMPLE_EVENTS)})

    for item in SAMPLE_SERMONS:
        fields = {k: v for k, v in item.items() if k != 'days_ago'}
        sermon = Sermon(
            id=uuid.uuid4().hex,
            date=now - timedelta(days=item['days_ago']),
            created_at=now,
            **fields,
        )
        if not sermons.save(sermon):
            raise DomainError(f"Failed to create sermon {sermon.title!r}")
    logger.info("Created sample sermons", extra={"count": len(SAMPLE_SERMONS)})

    return SeedSummary(users=len(created), events=len(SAMPLE_EVENTS), sermons=len(SAMPLE_SERMONS))
