"""MongoDB implementation of NewsletterRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError

from adapter.mongodb import NEWSLETTER_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.newsletter import NewsletterSubscription

logger = getLogger(__name__)


class MongoNewsletterRepository:
    def __init__(self, db: Database):
        self.collection = db[NEWSLETTER_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for newsletter collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_newsletter_email', unique=True)
            create_index_safe(self.collection, [('is_active', 1)], 'idx_newsletter_active')
            return True
        except Exception as e:
            logger.error("Failed to create newsletter indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> NewsletterSubscription:
        return NewsletterSubscription(
            id=doc['_id'],
            email=doc['email'],
            subscribed_at=doc['subscribed_at'],
            name=doc.get('name'),
            is_active=doc.get('is_active', True),
            unsubscribed_at=doc.get('unsubscribed_at'),
        )

    def create(self, email: str, name: str | None = None) -> NewsletterSubscription | None:
        doc = {
            '_id': uuid.uuid4().hex,
            'email': email,
            'name': name,
            'is_active': True,
            'subscribed_at': datetime.now(timezone.utc),
            'unsubscribed_at': None,
        }
        try:
            self.collection.insert_one(doc)
        except DuplicateKeyError:
            logger.warning("Subscription already exists", extra={"email": email})
            return None
        except PyMongoError as e:
            logger.error("Failed to create subscription", extra={"email": email, "error": str(e)})
            return None
        return self._to_domain(doc)

    def get_by_email(self, email: str) -> NewsletterSubscription | None:
        try:
            doc = self.collection.find_one({'email': email})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get subscription", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to get subscription") from e

    def _update(self, subscription_id: str, fields: dict) -> NewsletterSubscription | None:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': subscription_id},
                {'$set': fields},
                return_document=ReturnDocument.AFTER,
            )
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to update subscription", extra={"subscriptionId": subscription_id, "error": str(e)})
            return None

    def reactivate(self, subscription_id: str) -> NewsletterSubscription | None:
        return self._update(subscription_id, {
            'is_active': True,
            'subscribed_at': datetime.now(timezone.utc),
            'unsubscribed_at': None,
        })

    def deactivate(self, subscription_id: str) -> NewsletterSubscription | None:
        return self._update(subscription_id, {
            'is_active': False,
            'unsubscribed_at': datetime.now(timezone.utc),
        })

    def count_active(self) -> int | None:
        try:
            return self.collection.count_documents({'is_active': True})
        except PyMongoError as e:
            logger.error("Failed to count subscribers", extra={"error": str(e)})
            return None
