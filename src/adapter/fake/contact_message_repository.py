"""In-memory implementation of ContactMessageRepository for testing."""

from datetime import datetime, timezone

from domain.model.contact_message import ContactMessage
from domain.model.page import Page


class FakeContactMessageRepository:
    def __init__(self):
        self.store: dict[str, ContactMessage] = {}

    def save(self, message: ContactMessage) -> bool:
        self.store[message.id] = message
        return True

    def set_read(self, message_id: str, is_read: bool) -> ContactMessage | None:
        message = self.store.get(message_id)
        if not message:
            return None
        message.is_read = is_read
        message.responded_at = datetime.now(timezone.utc) if is_read else None
        return message

    def _newest_first(self) -> list[ContactMessage]:
        return sorted(self.store.values(), key=lambda m: m.created_at, reverse=True)

    def find_page(self, page: int, limit: int) -> Page[ContactMessage] | None:
        result = Page(page=page, limit=limit, total=len(self.store))
        result.items = self._newest_first()[result.skip:result.skip + limit]
        return result

    def find_recent(self, limit: int) -> list[ContactMessage] | None:
        return self._newest_first()[:limit]

    def count(self) -> int | None:
        return len(self.store)
