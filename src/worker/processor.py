"""Notification processor - worker service core logic.

1. Dequeue a notification from the Redis queue (FIFO order)
2. Deliver it through the Mailer (SMTP retries transient errors itself)
3. On delivery failure, push it back with ``attempts + 1`` until the
   configured maximum, then drop it with an error log

Architecture:
    Redis Queue → dequeue() → process_notification() → Mailer.send()
                                      ↓ failure
                               enqueue(attempts + 1)
"""

import logging
import time
from dataclasses import replace
from typing import Callable

from domain.model.errors import NotificationDeliveryError
from domain.model.notification import Notification
from port.mailer import Mailer
from port.notification_queue import NotificationQueue

logger = logging.getLogger(__name__)

IDLE_SLEEP_SECONDS = 1
ERROR_SLEEP_SECONDS = 5


def process_notification(
    notification: Notification,
    mailer: Mailer,
    queue: NotificationQueue,
    max_attempts: int,
) -> bool:
    """Deliver one notification.

    Returns:
        True if it was sent, False if it was re-queued or dropped
    """
    try:
        mailer.send(notification)
    except NotificationDeliveryError as e:
        attempts = notification.attempts + 1
        if attempts >= max_attempts:
            logger.error(
                "Notification dropped after repeated failures",
                extra={**notification.log_extra, "error": str(e), "maxAttempts": max_attempts},
            )
            return False

        retry = replace(notification, attempts=attempts)
        if not queue.enqueue(retry):
            logger.error("Failed to re-queue notification", extra={**retry.log_extra, "error": str(e)})
        else:
            logger.warning("Notification re-queued", extra={**retry.log_extra, "error": str(e)})
        return False

    logger.info("Notification sent", extra=notification.log_extra)
    return True


def run_worker_loop(
    queue: NotificationQueue,
    mailer: Mailer,
    max_attempts: int,
    should_continue: Callable[[], bool] = lambda: True,
) -> None:
    """Process notifications until ``should_continue`` returns False.

    Error handling:
        - KeyboardInterrupt: graceful shutdown
        - Other exceptions: log and keep going, the worker must not die
          because of one bad message
    """
    logger.info("Worker started, waiting for notifications...")

    while should_continue():
        try:
            notification = queue.dequeue(timeout=1)
            if notification:
                process_notification(notification, mailer, queue, max_attempts)
            else:
                time.sleep(IDLE_SLEEP_SECONDS)
        except KeyboardInterrupt:
            logger.info("Worker stopped by user")
            break
        except Exception as e:
            logger.error(f"Error in worker loop: {e}", exc_info=True)
            time.sleep(ERROR_SLEEP_SECONDS)
