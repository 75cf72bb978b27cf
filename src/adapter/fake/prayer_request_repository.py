"""In-memory implementation of PrayerRequestRepository for testing."""

from datetime import datetime, timezone

from domain.model.page import Page
from domain.model.prayer_request import PrayerRequest


class FakePrayerRequestRepository:
    def __init__(self):
        self.store: dict[str, PrayerRequest] = {}

    def save(self, prayer_request: PrayerRequest) -> bool:
        self.store[prayer_request.id] = prayer_request
        return True

    def set_answered(self, request_id: str, is_answered: bool) -> PrayerRequest | None:
        request = self.store.get(request_id)
        if not request:
            return None
        request.is_answered = is_answered
        request.answered_at = datetime.now(timezone.utc) if is_answered else None
        return request

    def get_by_id(self, request_id: str) -> PrayerRequest | None:
        return self.store.get(request_id)

    def _newest_first(self) -> list[PrayerRequest]:
        return sorted(self.store.values(), key=lambda r: r.created_at, reverse=True)

    def find_page(self, page: int, limit: int) -> Page[PrayerRequest] | None:
        result = Page(page=page, limit=limit, total=len(self.store))
        result.items = self._newest_first()[result.skip:result.skip + limit]
        return result

    def find_recent(self, limit: int) -> list[PrayerRequest] | None:
        return self._newest_first()[:limit]

    def count(self, answered: bool | None = None) -> int | None:
        if answered is None:
            return len(self.store)
        return sum(1 for r in self.store.values() if r.is_answered == answered)
