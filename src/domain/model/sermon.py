from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Sermon:
    """Domain model representing a preached sermon and its media."""
    id: str
    title: str
    speaker: str
    date: datetime
    created_at: datetime
    scripture: str | None = None
    summary: str | None = None
    audio_url: str | None = None
    video_url: str | None = None
    notes: str | None = None
    series: str | None = None
    tags: list[str] = field(default_factory=list)
    view_count: int = 0
