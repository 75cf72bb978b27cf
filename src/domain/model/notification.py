import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class NotificationKind(str, Enum):
    PRAYER_REQUEST = 'prayer_request'
    EVENT_REGISTRATION = 'event_registration'
    CONTACT_MESSAGE = 'contact_message'
    NEWSLETTER_WELCOME = 'newsletter_welcome'


@dataclass(frozen=True)
class Notification:
    """Outbound e-mail waiting in the notification queue."""
    kind: NotificationKind
    to: str
    subject: str
    html: str
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    attempts: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        return {
            'id': self.id,
            'kind': self.kind.value,
            'to': self.to,
            'subject': self.subject,
            'html': self.html,
            'attempts': self.attempts,
            'created_at': self.created_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'Notification':
        return cls(
            id=data['id'],
            kind=NotificationKind(data['kind']),
            to=data['to'],
            subject=data['subject'],
            html=data['html'],
            attempts=int(data.get('attempts', 0)),
            created_at=datetime.fromisoformat(data['created_at']),
        )

    @property
    def log_extra(self) -> dict:
        """Common extra fields for structured logging."""
        return {"notificationId": self.id, "kind": self.kind.value, "attempts": self.attempts}
