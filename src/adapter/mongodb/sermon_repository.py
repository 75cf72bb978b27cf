"""MongoDB implementation of SermonRepository."""

from logging import getLogger

from pymongo import ReturnDocument
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb import SERMONS_COLLECTION_NAME
from domain.model.errors import StorageError
from domain.model.page import Page
from domain.model.sermon import Sermon

logger = getLogger(__name__)


class MongoSermonRepository:
    def __init__(self, db: Database):
        self.collection = db[SERMONS_COLLECTION_NAME]

    def ensure_indexes(self) -> bool:
        """Create indexes for sermons collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('date', -1)], 'idx_sermons_date_desc')
            create_index_safe(self.collection, [('series', 1)], 'idx_sermons_series', sparse=True)
            return True
        except Exception as e:
            logger.error("Failed to create sermons indexes", extra={"error": str(e)})
            return False

    def _to_domain(self, doc: dict) -> Sermon:
        return Sermon(
            id=doc['_id'],
            title=doc['title'],
            speaker=doc['speaker'],
            date=doc['date'],
            created_at=doc['created_at'],
            scripture=doc.get('scripture'),
            summary=doc.get('summary'),
            audio_url=doc.get('audio_url'),
            video_url=doc.get('video_url'),
            notes=doc.get('notes'),
            series=doc.get('series'),
            tags=doc.get('tags', []),
            view_count=doc.get('view_count', 0),
        )

    def save(self, sermon: Sermon) -> bool:
        try:
            self.collection.insert_one({
                '_id': sermon.id,
                'title': sermon.title,
                'speaker': sermon.speaker,
                'date': sermon.date,
                'scripture': sermon.scripture,
                'summary': sermon.summary,
                'audio_url': sermon.audio_url,
                'video_url': sermon.video_url,
                'notes': sermon.notes,
                'series': sermon.series,
                'tags': sermon.tags,
                'view_count': sermon.view_count,
                'created_at': sermon.created_at,
            })
            logger.info("Sermon saved", extra={"sermonId": sermon.id})
            return True
        except PyMongoError as e:
            logger.error("Failed to save sermon", extra={"sermonId": sermon.id, "error": str(e)})
            return False

    def increment_views(self, sermon_id: str) -> Sermon | None:
        try:
            doc = self.collection.find_one_and_update(
                {'_id': sermon_id},
                {'$inc': {'view_count': 1}},
                return_document=ReturnDocument.AFTER,
            )
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to increment sermon views", extra={"sermonId": sermon_id, "error": str(e)})
            raise StorageError("Failed to increment sermon views") from e

    def find_page(self, page: int, limit: int) -> Page[Sermon] | None:
        result = Page(page=page, limit=limit)
        try:
            result.total = self.collection.count_documents({})
            docs = self.collection.find().sort('date', -1).skip(result.skip).limit(limit)
            result.items = [self._to_domain(doc) for doc in docs]
            return result
        except PyMongoError as e:
            logger.error("Failed to list sermons", extra={"error": str(e)})
            return None

    def count(self) -> int | None:
        try:
            return self.collection.count_documents({})
        except PyMongoError as e:
            logger.error("Failed to count sermons", extra={"error": str(e)})
            return None

    def clear(self) -> bool:
        try:
            self.collection.delete_many({})
            return True
        except PyMongoError as e:
            logger.error("Failed to clear sermons", extra={"error": str(e)})
            return False
