"""システムAPIエンドポイント

死活監視（ping）とヘルスチェックを提供
"""

from datetime import UTC, datetime
from typing import Any

from fastapi import APIRouter, Request
from fastapi import status as http_status
from fastapi.responses import JSONResponse

from app.core.constants import SuccessMessages
from app.schemas.task import MessageResponse

router = APIRouter()


@router.get("/ping", response_model=MessageResponse)
async def ping() -> MessageResponse:
    """死活監視"""
    return MessageResponse(message=SuccessMessages.PONG)


@router.get("/health", response_model=None)
async def health_check(request: Request) -> dict[str, Any] | JSONResponse:
    settings = request.app.state.settings
    db_health = await request.app.state.database.health_check()

    content = {
        "status": db_health.get("status", "unhealthy"),
        "timestamp": datetime.now(UTC).isoformat(),
        "version": settings.PROJECT_VERSION,
        "environment": settings.ENVIRONMENT,
        "services": {"database": db_health},
    }

    if content["status"] != "healthy":
        return JSONResponse(status_code=http_status.HTTP_503_SERVICE_UNAVAILABLE, content=content)

    return content
