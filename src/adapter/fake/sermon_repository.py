"""In-memory implementation of SermonRepository for testing."""

from domain.model.page import Page
from domain.model.sermon import Sermon


class FakeSermonRepository:
    def __init__(self):
        self.store: dict[str, Sermon] = {}

    def save(self, sermon: Sermon) -> bool:
        self.store[sermon.id] = sermon
        return True

    def increment_views(self, sermon_id: str) -> Sermon | None:
        sermon = self.store.get(sermon_id)
        if not sermon:
            return None
        sermon.view_count += 1
        return sermon

    def find_page(self, page: int, limit: int) -> Page[Sermon] | None:
        result = Page(page=page, limit=limit, total=len(self.store))
        ordered = sorted(self.store.values(), key=lambda s: s.date, reverse=True)
        result.items = ordered[result.skip:result.skip + limit]
        return result

    def count(self) -> int | None:
        return len(self.store)

    def clear(self) -> bool:
        self.store.clear()
        return True
