"""Health check endpoint."""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from adapter.mongodb.connection import MongoConnection
from api.dependencies import get_mongo_connection, get_notification_queue
from port.notification_queue import NotificationQueue

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/health", tags=["health"])


def _service_status(healthy: bool) -> dict:
    if healthy:
        return {"status": "healthy", "message": "Connection successful"}
    return {"status": "unhealthy", "message": "Connection failed or not configured"}


@router.get("")
async def health(
    request: Request,
    mongo: MongoConnection = Depends(get_mongo_connection),
    queue: NotificationQueue = Depends(get_notification_queue),
):
    """Liveness plus dependency status.

    Only MongoDB being down makes the service unavailable; a down
    notification queue degrades it.
    """
    mongo_ok = mongo.ping()
    try:
        queue_ok = queue.ping()
    except Exception as e:
        logger.warning("Notification queue ping raised", extra={"error": str(e)[:200]})
        queue_ok = False

    if not mongo_ok:
        overall = "unhealthy"
    elif not queue_ok:
        overall = "degraded"
    else:
        overall = "OK"

    body = {
        "status": overall,
        "message": "NRBC Church API is running",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "version": request.app.version,
        "services": {
            "mongodb": _service_status(mongo_ok),
            "notifications": _service_status(queue_ok),
        },
    }
    status_code = status.HTTP_200_OK if mongo_ok else status.HTTP_503_SERVICE_UNAVAILABLE
    return JSONResponse(content=body, status_code=status_code)
