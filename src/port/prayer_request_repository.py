from typing import Protocol

from domain.model.page import Page
from domain.model.prayer_request import PrayerRequest


class PrayerRequestRepository(Protocol):
    def save(self, prayer_request: PrayerRequest) -> bool: ...

    def get_by_id(self, request_id: str) -> PrayerRequest | None: ...

    def find_page(self, page: int, limit: int) -> Page[PrayerRequest] | None:
        """Newest-first page of prayer requests."""
        ...

    def set_answered(self, request_id: str, is_answered: bool) -> PrayerRequest | None:
        """Update answered state and return the updated request, None if absent."""
        ...

    def count(self, answered: bool | None = None) -> int | None: ...

    def find_recent(self, limit: int) -> list[PrayerRequest] | None: ...
