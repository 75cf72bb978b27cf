"""MongoDB implementation of UserRepository."""

import uuid
from datetime import datetime, timezone
from logging import getLogger
from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError, PyMongoError
from adapter.mongodb import USERS_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.user import Role, User

logger = getLogger(__name__)


class MongoUserRepository:
    def __init__(self, db: Database):
        self.collection = db[USERS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for users collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('email', 1)], 'idx_users_email', unique=True)
            create_index_safe(self.collection, [('created_at', -1)], 'idx_users_created_at')
            return True
        except Exception as e:
            logger.error("Failed to create users indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> User:
        """Convert MongoDB document to User domain model."""
        return User(
            id=doc['_id'],
            name=doc['name'],
            email=doc['email'],
            role=Role(doc.get('role', Role.VOLUNTEER.value)),
            created_at=doc['created_at'],
            is_active=doc.get('is_active', True),
            phone=doc.get('phone'),
            department=doc.get('department'),
            last_login=doc.get('last_login'),
            password_hash=doc.get('password_hash'),
        )

    def create(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: Role = Role.VOLUNTEER,
        phone: str | None = None,
        department: str | None = None,
    ) -> User | None:
        """Create a new user and return the User object."""
        user_id = uuid.uuid4().hex
        user_doc = {
            '_id': user_id,
            'name': name,
            'email': email,
            'password_hash': password_hash,
            'role': role.value,
            'phone': phone,
            'department': department,
            'is_active': True,
            'created_at': datetime.now(timezone.utc),
        }
        try:
            self.collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.warning("User creation failed: email already exists", extra={"email": email})
            return None
        except PyMongoError as e:
            logger.error("Failed to create user", extra={"email": email, "error": str(e)})
            return None

        logger.info("User created", extra={"userId": user_id, "role": role.value})
        return self._to_domain(user_doc)

    def get_by_email(self, email: str) -> User | None:
        """Find a user by email. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'email': email})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by email", extra={"email": email, "error": str(e)})
            raise StorageError("Failed to get user by email") from e

    def get_by_id(self, user_id: str) -> User | None:
        """Find a user by ID. Return User or None if not found."""
        try:
            doc = self.collection.find_one({'_id': user_id})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get user by ID", extra={"userId": user_id, "error": str(e)})
            raise StorageError("Failed to get user by ID") from e

    def get_names(self, user_ids: list[str]) -> dict[str, str]:
        if not user_ids:
            return {}
        try:
            cursor = self.collection.find({'_id': {'$in': list(set(user_ids))}}, {'name': 1})
            return {doc['_id']: doc['name'] for doc in cursor}
        except PyMongoError as e:
            logger.error("Failed to resolve user names", extra={"count": len(user_ids), "error": str(e)})
            return {}

    def update_last_login(self, user_id: str) -> bool:
        """Update the last login timestamp for a user. Return True if successful."""
        try:
            result = self.collection.update_one(
                {'_id': user_id},
                {'$set': {'last_login': datetime.now(timezone.utc)}}
            )
            return result.matched_count > 0
        except PyMongoError as e:
            logger.error("Failed to update last_login", extra={"userId": user_id, "error": str(e)})
            return False

    def deactivate(self, user_id: str) -> bool:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': user_id},
                {'$set': {'is_active': False}},
                return_document=ReturnDocument.AFTER,
            )
            return doc is not None
        except PyMongoError as e:
            logger.error("Failed to deactivate user", extra={"userId": user_id, "error": str(e)})
            return False

    def count(self) -> int | None:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            logger.error("Failed to count users", extra={"error": str(e)})
            return None

    def clear(self) -> bool:
        try:
            self.collection.delete_many({})
            return True
        except PyMongoError as e:
            logger.error("Failed to clear users", extra={"error": str(e)})
            return False
