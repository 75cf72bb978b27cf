"""Recording Mailer for testing."""

from domain.model.errors import NotificationDeliveryError
from domain.model.notification import Notification


class FakeMailer:
    def __init__(self, failures: int = 0):
        self.sent: list[Notification] = []
        self.failures = failures
        self.calls = 0

    def send(self, notification: Notification) -> None:
        self.calls += 1
        if self.failures > 0:
            self.failures -= 1
            raise NotificationDeliveryError("SMTP unavailable")
        self.sent.append(notification)
