"""Port definition for the outbound notification queue."""

from typing import Protocol

from domain.model.notification import Notification


class NotificationQueue(Protocol):
    def enqueue(self, notification: Notification) -> bool: ...
    def dequeue(self, timeout: int = 1) -> Notification | None: ...
    def size(self) -> int | None: ...
    def ping(self) -> bool: ...
