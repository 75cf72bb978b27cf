"""Sermon archive routes."""

import logging

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_sermon_repo
from api.errors import to_http_exception
from api.models import SermonCreate, SermonListResponse, SermonResponse
from api.security import Capability, require_capability
from domain.model.errors import DomainError
from domain.model.sermon import Sermon
from domain.model.user import SessionClaims
from port.sermon_repository import SermonRepository
from services import sermon_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sermons", tags=["sermons"])


def _to_response(sermon: Sermon) -> SermonResponse:
    return SermonResponse(
        id=sermon.id,
        title=sermon.title,
        speaker=sermon.speaker,
        date=sermon.date,
        scripture=sermon.scripture,
        summary=sermon.summary,
        audio_url=sermon.audio_url,
        video_url=sermon.video_url,
        notes=sermon.notes,
        series=sermon.series,
        tags=sermon.tags,
        view_count=sermon.view_count,
        created_at=sermon.created_at,
    )


@router.get("", response_model=SermonListResponse)
async def list_sermons(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    repo: SermonRepository = Depends(get_sermon_repo),
):
    """Sermons with the most recently preached first."""
    try:
        result = sermon_service.list_sermons(repo, page=page, limit=limit)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch sermons")

    return SermonListResponse(
        sermons=[_to_response(s) for s in result.items],
        current_page=result.page,
        total_pages=result.total_pages,
        total=result.total,
    )


@router.get("/{sermon_id}", response_model=SermonResponse)
async def get_sermon(sermon_id: str, repo: SermonRepository = Depends(get_sermon_repo)):
    """Fetch one sermon; each fetch counts as a view."""
    try:
        sermon = sermon_service.view_sermon(repo, sermon_id)
    except DomainError as e:
        raise to_http_exception(e, "Failed to fetch sermon")
    return _to_response(sermon)


@router.post("", response_model=SermonResponse, status_code=status.HTTP_201_CREATED)
async def create_sermon(
    body: SermonCreate,
    claims: SessionClaims = Depends(require_capability(Capability.SERMONS_CREATE)),
    repo: SermonRepository = Depends(get_sermon_repo),
):
    try:
        sermon = sermon_service.create_sermon(
            repo,
            title=body.title,
            speaker=body.speaker,
            date=body.date,
            scripture=body.scripture,
            summary=body.summary,
            audio_url=body.audio_url,
            video_url=body.video_url,
            notes=body.notes,
            series=body.series,
            tags=body.tags,
        )
    except DomainError as e:
        raise to_http_exception(e, "Failed to create sermon")

    logger.info("Sermon created", extra={"sermonId": sermon.id, "userId": claims.user_id})
    return _to_response(sermon)
