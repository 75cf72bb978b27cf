from fastapi import Depends, HTTPException, Request

from adapter.mongodb.connection import MongoConnection
from adapter.mongodb.contact_message_repository import MongoContactMessageRepository
from adapter.mongodb.event_repository import MongoEventRepository
from adapter.mongodb.newsletter_repository import MongoNewsletterRepository
from adapter.mongodb.prayer_request_repository import MongoPrayerRequestRepository
from adapter.mongodb.sermon_repository import MongoSermonRepository
from adapter.mongodb.user_repository import MongoUserRepository
from adapter.storage.local_upload_storage import LocalUploadStorage
from port.contact_message_repository import ContactMessageRepository
from port.event_repository import EventRepository
from port.newsletter_repository import NewsletterRepository
from port.notification_queue import NotificationQueue
from port.prayer_request_repository import PrayerRequestRepository
from port.sermon_repository import SermonRepository
from port.upload_storage import UploadStorage
from port.user_repository import UserRepository
from services.password_hasher import PasswordHasher
from utils.config import Settings, get_settings

__all__ = [
    'get_settings', 'get_mongo_connection', 'get_notification_queue',
    'get_user_repo', 'get_event_repo', 'get_prayer_request_repo',
    'get_contact_message_repo', 'get_newsletter_repo', 'get_sermon_repo',
    'get_password_hasher', 'get_upload_storage',
]


def get_mongo_connection(request: Request) -> MongoConnection:
    return request.app.state.mongo


def get_notification_queue(request: Request) -> NotificationQueue:
    return request.app.state.notification_queue


def _get_db(connection: MongoConnection = Depends(get_mongo_connection)):
    """Get MongoDB database, raising 503 if unavailable."""
    db = connection.get_database()
    if db is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return db


def get_user_repo(db=Depends(_get_db)) -> UserRepository:
    return MongoUserRepository(db)


def get_event_repo(db=Depends(_get_db)) -> EventRepository:
    return MongoEventRepository(db)


def get_prayer_request_repo(db=Depends(_get_db)) -> PrayerRequestRepository:
    return MongoPrayerRequestRepository(db)


def get_contact_message_repo(db=Depends(_get_db)) -> ContactMessageRepository:
    return MongoContactMessageRepository(db)


def get_newsletter_repo(db=Depends(_get_db)) -> NewsletterRepository:
    return MongoNewsletterRepository(db)


def get_sermon_repo(db=Depends(_get_db)) -> SermonRepository:
    return MongoSermonRepository(db)


def get_password_hasher(settings: Settings = Depends(get_settings)) -> PasswordHasher:
    return PasswordHasher(rounds=settings.bcrypt_rounds)


def get_upload_storage(settings: Settings = Depends(get_settings)) -> UploadStorage:
    return LocalUploadStorage(settings.upload_dir)
