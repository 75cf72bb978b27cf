import logging
import time
from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, PyMongoError

logger = logging.getLogger(__name__)

RETRY_COOLDOWN_SECONDS = 30.0


class MongoConnection:
    """Owns the MongoClient for one process.

    Connection strategy:
    1. Return cached client if healthy (ping succeeds)
    2. If cached client fails, attempt reconnection
    3. If no URL is configured, never try
    4. If a connection attempt fails, wait out the cooldown before the next one
    """

    def __init__(self, url: str | None, database_name: str, retry_cooldown: float = RETRY_COOLDOWN_SECONDS):
        self.url = url
        self.database_name = database_name
        self.retry_cooldown = retry_cooldown
        self._client_cache: MongoClient | None = None
        self._connection_attempted = False
        self._connection_failed = False
        self._retry_at: float | None = None

    def reset(self):
        self._client_cache = None

    def get_client(self) -> MongoClient | None:
        """Get MongoDB client with connection caching and reconnection logic.

        Returns:
            MongoDB client or None if connection fails
        """
        if self._client_cache:
            try:
                self._client_cache.admin.command('ping')
                return self._client_cache
            except Exception:
                self._client_cache = None
                logger.debug("[MONGODB] Cached client failed ping, attempting reconnection...")

        if self._connection_failed:
            return None

        if not self.url:
            logger.error("[MONGODB] MONGODB_URI not configured.")
            self._connection_failed = True
            return None

        if self._retry_at is not None and time.monotonic() < self._retry_at:
            return None

        try:
            client = MongoClient(
                self.url,
                tz_aware=True,
                serverSelectionTimeoutMS=5000,
                connectTimeoutMS=5000,
                socketTimeoutMS=30000,
                maxPoolSize=10,
                minPoolSize=0,
                maxIdleTimeMS=30000,
                waitQueueTimeoutMS=10000,
                retryWrites=True,
                retryReads=True,
            )
            client.admin.command('ping')

            is_first_connection = not self._connection_attempted
            self._connection_attempted = True
            self._retry_at = None
            self._client_cache = client

            if is_first_connection:
                logger.info(f"[MONGODB] Connected successfully to {self.database_name}")

            return client
        except (ConnectionFailure, PyMongoError) as e:
            logger.error(
                f"[MONGODB] Connection failed, next attempt in {self.retry_cooldown:.0f}s: {str(e)[:200]}"
            )
            self._retry_at = time.monotonic() + self.retry_cooldown
            return None

    def get_database(self) -> Database | None:
        client = self.get_client()
        if client is None:
            return None
        return client[self.database_name]

    def ping(self) -> bool:
        client = self.get_client()
        if not client:
            return False
        try:
            client.admin.command('ping')
            return True
        except PyMongoError:
            return False
