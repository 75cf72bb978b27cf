from dataclasses import dataclass
from datetime import datetime


@dataclass
class ContactMessage:
    """Domain model representing a message sent through the contact form."""
    id: str
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    phone: str | None = None
    is_read: bool = False
    responded_at: datetime | None = None
