from typing import Protocol

from domain.model.notification import Notification


class Mailer(Protocol):
    def send(self, notification: Notification) -> None:
        """Deliver one e-mail. Raises NotificationDeliveryError on failure."""
        ...
