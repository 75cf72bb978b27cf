from typing import Protocol

from domain.model.contact_message import ContactMessage
from domain.model.page import Page


class ContactMessageRepository(Protocol):
    def save(self, message: ContactMessage) -> bool: ...

    def find_page(self, page: int, limit: int) -> Page[ContactMessage] | None: ...

    def set_read(self, message_id: str, is_read: bool) -> ContactMessage | None: ...

    def count(self) -> int | None: ...

    def find_recent(self, limit: int) -> list[ContactMessage] | None: ...
