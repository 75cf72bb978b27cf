"""SMTP implementation of Mailer.

Sends HTML mail over STARTTLS. Connection-level failures are retried a few
times with exponential backoff; anything left over surfaces as
NotificationDeliveryError so the worker can re-queue the notification.
"""

import logging
import smtplib
from email.message import EmailMessage

from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
)

from domain.model.errors import NotificationDeliveryError
from domain.model.notification import Notification

logger = logging.getLogger(__name__)

SMTP_TIMEOUT_SECONDS = 10.0

_TRANSIENT_ERRORS = (
    smtplib.SMTPServerDisconnected,
    smtplib.SMTPConnectError,
    smtplib.SMTPHeloError,
    TimeoutError,
    ConnectionError,
)


class SmtpMailer:
    def __init__(
        self,
        host: str,
        port: int,
        username: str | None,
        password: str | None,
        sender: str | None,
        timeout: float = SMTP_TIMEOUT_SECONDS,
    ):
        self.host = host
        self.port = port
        self.username = username
        self.password = password
        self.sender = sender or username
        self.timeout = timeout

    def _build_message(self, notification: Notification) -> EmailMessage:
        message = EmailMessage()
        message['From'] = self.sender
        message['To'] = notification.to
        message['Subject'] = notification.subject
        message.set_content("This message requires an HTML-capable mail client.")
        message.add_alternative(notification.html, subtype='html')
        return message

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=8),
        retry=retry_if_exception_type(_TRANSIENT_ERRORS),
        reraise=True,
    )
    def _deliver(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            smtp.starttls()
            if self.username and self.password:
                smtp.login(self.username, self.password)
            smtp.send_message(message)

    def send(self, notification: Notification) -> None:
        if not self.sender:
            raise NotificationDeliveryError("EMAIL_USER/EMAIL_FROM not configured")

        try:
            self._deliver(self._build_message(notification))
        except (smtplib.SMTPException, OSError) as e:
            logger.warning(
                "SMTP delivery failed",
                extra={**notification.log_extra, "error": str(e)[:200], "errorType": type(e).__name__},
            )
            raise NotificationDeliveryError(str(e)) from e

        logger.info("Notification delivered", extra=notification.log_extra)
