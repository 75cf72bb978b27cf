"""Worker service entry point."""

#!/usr/bin/env python
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from adapter.mail.smtp_mailer import SmtpMailer
from adapter.queue.redis_notification_queue import RedisNotificationQueue
from utils.config import get_settings
from utils.logging import setup_structured_logging
from worker.processor import run_worker_loop

load_dotenv()
settings = get_settings()

# Set up structured JSON logging
setup_structured_logging(level=settings.log_level, service='nrbc-notification-worker')

logger = logging.getLogger(__name__)


def main():
    """Main entry point for worker service."""
    logger.info("Starting NRBC notification worker...")

    queue = RedisNotificationQueue(settings.redis_url)
    if not queue.ping():
        logger.error("Cannot start worker: Redis connection failed")
        sys.exit(1)

    mailer = SmtpMailer(
        host=settings.smtp_host,
        port=settings.smtp_port,
        username=settings.email_user,
        password=settings.email_pass,
        sender=settings.email_from,
    )

    try:
        run_worker_loop(queue, mailer, settings.notification_max_attempts)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
