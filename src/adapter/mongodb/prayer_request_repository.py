"""MongoDB implementation of PrayerRequestRepository."""

from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import PRAYER_REQUESTS_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.page import Page
from domain.model.prayer_request import PrayerRequest

logger = getLogger(__name__)


class MongoPrayerRequestRepository:
    def __init__(self, db: Database):
        self.collection = db[PRAYER_REQUESTS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for prayer_requests collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('created_at', -1)], 'idx_prayer_requests_created_at')
            create_index_safe(self.collection, [('is_answered', 1)], 'idx_prayer_requests_answered')
            return True
        except Exception as e:
            logger.error("Failed to create prayer_requests indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> PrayerRequest:
        return PrayerRequest(
            id=doc['_id'],
            name=doc['name'],
            prayer_request=doc['prayer_request'],
            created_at=doc['created_at'],
            email=doc.get('email'),
            is_private=doc.get('is_private', True),
            is_answered=doc.get('is_answered', False),
            answered_at=doc.get('answered_at'),
        )

    def save(self, prayer_request: PrayerRequest) -> bool:
        try:
            self.collection.insert_one({
                '_id': prayer_request.id,
                'name': prayer_request.name,
                'email': prayer_request.email,
                'prayer_request': prayer_request.prayer_request,
                'is_private': prayer_request.is_private,
                'is_answered': prayer_request.is_answered,
                'answered_at': prayer_request.answered_at,
                'created_at': prayer_request.created_at,
            })
            logger.info("Prayer request saved", extra={"prayerRequestId": prayer_request.id})
            return True
        except PyMongoError as e:
            logger.error("Failed to save prayer request", extra={"prayerRequestId": prayer_request.id, "error": str(e)})
            return False

    def set_answered(self, request_id: str, is_answered: bool) -> PrayerRequest | None:
        answered_at = datetime.now(timezone.utc) if is_answered else None
        try:
            doc = self.collection.find_one_and_update(
                {'_id': request_id},
                {'$set': {'is_answered': is_answered, 'answered_at': answered_at}},
                return_document=ReturnDocument.AFTER,
            )
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to update prayer request", extra={"prayerRequestId": request_id, "error": str(e)})
            raise StorageError("Failed to update prayer request") from e

    def get_by_id(self, request_id: str) -> PrayerRequest | None:
        try:
            doc = self.collection.find_one({'_id': request_id})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to retrieve prayer request", extra={"prayerRequestId": request_id, "error": str(e)})
            raise StorageError("Failed to retrieve prayer request") from e

    def find_page(self, page: int, limit: int) -> Page[PrayerRequest] | None:
        result = Page(page=page, limit=limit)
        try:
            result.total = self.collection.count_documents({})
            docs = self.collection.find().sort('created_at', -1).skip(result.skip).limit(limit)
            result.items = [self._to_domain(doc) for doc in docs]
            return result
        except PyMongoError as e:
            logger.error("Failed to list prayer requests", extra={"error": str(e)})
            return None

    def find_recent(self, limit: int) -> list[PrayerRequest] | None:
        try:
            docs = self.collection.find().sort('created_at', -1).limit(limit)
            return [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list recent prayer requests", extra={"error": str(e)})
            return None

    def count(self, answered: bool | None = None) -> int | None:
        query = {} if answered is None else {'is_answered': answered}
        try:
            return self.collection.count_documents(query)
        except PyMongoError as e:
            logger.error("Failed to count prayer requests", extra={"error": str(e)})
            return None
