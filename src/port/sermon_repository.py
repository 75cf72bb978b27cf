from typing import Protocol

from domain.model.page import Page
from domain.model.sermon import Sermon


class SermonRepository(Protocol):
    def save(self, sermon: Sermon) -> bool: ...

    def find_page(self, page: int, limit: int) -> Page[Sermon] | None:
        """Page of sermons ordered by sermon date, newest first."""
        ...

    def increment_views(self, sermon_id: str) -> Sermon | None:
        """Atomically bump view_count and return the updated sermon.

        None means no such sermon; a store failure raises StorageError.
        """
        ...

    def count(self) -> int | None: ...

    def clear(self) -> bool: ...
