"""Redis implementation of NotificationQueue.

Notifications are JSON payloads on a FIFO list (RPUSH + BLPOP). The API
only pushes; the notification worker pops and delivers.
"""

import json
import logging
from typing import Optional

import redis
from redis.exceptions import RedisError

from domain.model.notification import Notification

logger = logging.getLogger(__name__)

QUEUE_NAME = 'nrbc:notifications'


class RedisNotificationQueue:
    def __init__(self, redis_url: str | None, queue_name: str = QUEUE_NAME):
        self.redis_url = redis_url
        self.queue_name = queue_name
        self._client_cache: Optional[redis.Redis] = None
        self._connection_attempted: bool = False
        self._connection_failed: bool = False

    def _get_client(self) -> Optional[redis.Redis]:
        """Get Redis client with caching and reconnection logic."""
        if self._client_cache:
            try:
                self._client_cache.ping()
                return self._client_cache
            except Exception:
                self._client_cache = None
                logger.debug("[REDIS] Cached client failed ping, attempting reconnection...")

        if self._connection_failed:
            return None

        if not self.redis_url:
            logger.error("[REDIS] REDIS_URL not configured, notifications will not be queued")
            self._connection_failed = True
            return None

        try:
            client = redis.from_url(
                self.redis_url,
                decode_responses=True,
                socket_connect_timeout=5,
            )
            client.ping()

            is_first = not self._connection_attempted
            self._connection_attempted = True
            self._client_cache = client

            if is_first:
                logger.info("[REDIS] Connected successfully")

            return client
        except (RedisError, ValueError, OSError) as e:
            if not self._connection_attempted:
                logger.error(f"[REDIS] Initial connection failed: {str(e)[:200]}")
                self._connection_failed = True
            return None

    # ── NotificationQueue implementation ─────────────────────

    def enqueue(self, notification: Notification) -> bool:
        client = self._get_client()
        if not client:
            return False

        try:
            client.rpush(self.queue_name, json.dumps(notification.to_dict()))
            logger.info("Notification enqueued", extra=notification.log_extra)
            return True
        except RedisError as e:
            logger.error("Failed to enqueue notification", extra={**notification.log_extra, "error": str(e)})
            return False

    def dequeue(self, timeout: int = 1) -> Notification | None:
        client = self._get_client()
        if not client:
            logger.debug("[DEQUEUE] Redis client unavailable, cannot dequeue notification")
            return None

        try:
            result = client.blpop(self.queue_name, timeout=timeout)
            if not result:
                return None
            _, payload = result
            return Notification.from_dict(json.loads(payload))
        except (RedisError, json.JSONDecodeError, KeyError, ValueError) as e:
            logger.warning("[DEQUEUE] Failed to dequeue notification", extra={"error": str(e), "errorType": type(e).__name__})
            return None

    def size(self) -> int | None:
        client = self._get_client()
        if not client:
            return None
        try:
            return client.llen(self.queue_name)
        except RedisError:
            return None

    def ping(self) -> bool:
        client = self._get_client()
        if not client:
            return False
        try:
            client.ping()
            return True
        except Exception:
            return False
