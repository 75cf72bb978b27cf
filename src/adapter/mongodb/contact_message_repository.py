"""MongoDB implementation of ContactMessageRepository."""

from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import CONTACT_MESSAGES_COLLECTION_NAME
from domain.model.contact_message import ContactMessage
from domain.model.errors import StorageError
from domain.model.page import Page

logger = getLogger(__name__)


class MongoContactMessageRepository:
    def __init__(self, db: Database):
        self.collection = db[CONTACT_MESSAGES_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for contact_messages collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('created_at', -1)], 'idx_contact_messages_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create contact_messages indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> ContactMessage:
        return ContactMessage(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            subject=doc['subject'],
            message=doc['message'],
            created_at=doc['created_at'],
            phone=doc.get('phone'),
            is_read=doc.get('is_read', False),
            responded_at=doc.get('responded_at'),
        )

    def save(self, message: ContactMessage) -> bool:
        try:
            self.collection.insert_one({
                '_id': message.id,
                'name': message.name,
                'email': message.email,
                'phone': message.phone,
                'subject': message.subject,
                'message': message.message,
                'is_read': message.is_read,
                'responded_at': message.responded_at,
                'created_at': message.created_at,
            })
            logger.info("Contact message saved", extra={"messageId": message.id})
            return True
        except PyMongoError as e:
            logger.error("Failed to save contact message", extra={"messageId": message.id, "error": str(e)})
            return False

    def set_read(self, message_id: str, is_read: bool) -> ContactMessage | None:
        responded_at = datetime.now(timezone.utc) if is_read else None
        try:
            doc = self.collection.find_one_and_update(
                {'_id': message_id},
                {'$set': {'is_read': is_read, 'responded_at': responded_at}},
                return_document=ReturnDocument.AFTER,
            )
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to update contact message", extra={"messageId": message_id, "error": str(e)})
            raise StorageError("Failed to update contact message") from e

    def find_page(self, page: int, limit: int) -> Page[ContactMessage] | None:
        result = Page(page=page, limit=limit)
        try:
            result.total = self.collection.count_documents({})
            docs = self.collection.find().sort('created_at', -1).skip(result.skip).limit(limit)
            result.items = [self._to_domain(doc) for doc in docs]
            return result
        except PyMongoError as e:
            logger.error("Failed to list contact messages", extra={"error": str(e)})
            return None

    def find_recent(self, limit: int) -> list[ContactMessage] | None:
        try:
            docs = self.collection.find().sort('created_at', -1).limit(limit)
            return [self._to_domain(doc) for doc in docs]
        except PyMongoError as e:
            logger.error("Failed to list recent contact messages", extra={"error": str(e)})
            return None

    def count(self) -> int | None:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            logger.error("Failed to count contact messages", extra={"error": str(e)})
            return None
