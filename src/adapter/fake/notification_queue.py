"""In-memory implementation of NotificationQueue for testing."""

from collections import deque

from domain.model.notification import Notification


class FakeNotificationQueue:
    def __init__(self, available: bool = True):
        self.queue: deque[Notification] = deque()
        self.available = available

    def enqueue(self, notification: Notification) -> bool:
        if not self.available:
            return False
        self.queue.append(notification)
        return True

    def dequeue(self, timeout: int = 1) -> Notification | None:
        if self.queue:
            return self.queue.popleft()
        return None

    def size(self) -> int | None:
        return len(self.queue)

    def ping(self) -> bool:
        return self.available
