"""MongoDB index management used by each MongoXxxRepository at startup."""

from logging import getLogger

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

logger = getLogger(__name__)


def create_index_safe(collection: Collection, keys: list, name: str, **kwargs) -> bool:
    """Create an index, replacing any existing index that clashes with it.

    A clash is an index with the same name but other keys, or the same keys
    under another name. The clashing index is dropped and ours recreated.
    """
    try:
        collection.create_index(keys, name=name, **kwargs)
        return True
    except PyMongoError as e:
        if "already exists" not in str(e) and "Conflict" not in str(e):
            raise

    wanted = dict(keys)
    for existing_name, info in collection.index_information().items():
        if existing_name == '_id_':
            continue
        if (existing_name == name) != (dict(info.get('key', [])) == wanted):
            logger.warning("Dropping conflicting index", extra={"index": existing_name, "collection": collection.name})
            collection.drop_index(existing_name)
            collection.create_index(keys, name=name, **kwargs)
            return True

    logger.error("Failed to resolve index conflict", extra={"index": name, "collection": collection.name})
    return False


def ensure_all_indexes(db) -> bool:
    """Ensure indexes for all collections. Called at app startup."""
    from adapter.mongodb.contact_message_repository import MongoContactMessageRepository
    from adapter.mongodb.event_repository import MongoEventRepository
    from adapter.mongodb.newsletter_repository import MongoNewsletterRepository
    from adapter.mongodb.prayer_request_repository import MongoPrayerRequestRepository
    from adapter.mongodb.sermon_repository import MongoSermonRepository
    from adapter.mongodb.user_repository import MongoUserRepository

    results = [
        MongoUserRepository(db).ensure_indexes(),
        MongoEventRepository(db).ensure_indexes(),
        MongoPrayerRequestRepository(db).ensure_indexes(),
        MongoContactMessageRepository(db).ensure_indexes(),
        MongoNewsletterRepository(db).ensure_indexes(),
        MongoSermonRepository(db).ensure_indexes(),
    ]
    return all(results)
