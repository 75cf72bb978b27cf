import uuid
from datetime import datetime, timezone

from domain.model.errors import DomainError, NotFoundError
from domain.model.page import Page
from domain.model.sermon import Sermon
from domain.model.validation import check_max_length, clean, parse_datetime, require_fields
from port.sermon_repository import SermonRepository


def list_sermons(repo: SermonRepository, page: int, limit: int) -> Page[Sermon]:
    result = repo.find_page(page=page, limit=limit)
    if result is None:
        raise DomainError("Failed to fetch sermons")
    return result


def view_sermon(repo: SermonRepository, sermon_id: str) -> Sermon:
    """Fetch a sermon, counting the view."""
    sermon = repo.increment_views(sermon_id)
    if sermon is None:
        raise NotFoundError("Sermon not found")
    return sermon


def create_sermon(
    repo: SermonRepository,
    title: str | None,
    speaker: str | None,
    date: str | datetime | None,
    scripture: str | None = None,
    summary: str | None = None,
    audio_url: str | None = None,
    video_url: str | None = None,
    notes: str | None = None,
    series: str | None = None,
    tags: list[str] | None = None,
) -> Sermon:
    require_fields(title=title, speaker=speaker, date=date)
    check_max_length('summary', summary, 500)

    sermon = Sermon(
        id=uuid.uuid4().hex,
        title=clean(title),
        speaker=clean(speaker),
        date=parse_datetime('date', date),
        scripture=clean(scripture),
        summary=summary,
        audio_url=clean(audio_url),
        video_url=clean(video_url),
        notes=notes,
        series=clean(series),
        tags=[t.strip() for t in (tags or []) if t and t.strip()],
        created_at=datetime.now(timezone.utc),
    )
    if not repo.save(sermon):
        raise DomainError("Failed to create sermon")
    return sermon
