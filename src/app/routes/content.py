"""
Content Routes: 세션 산출물 조회.

- GET /api/content/{session_id}/{filename} → text/plain 원문

에러 응답은 plain text:
- 400: 파일명/세션 ID 불일치 (파일시스템 접근 전)
- 404: 파일 없음
- 500: 그 외 (내부 상세는 로그로만)
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse, Response

from src.app.services.content import read_artifact
from src.domain.errors import ErrorCodes, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)

api_router = APIRouter()


@api_router.get("/{session_id}/{filename}")
async def get_content(
    request: Request,
    session_id: str,
    filename: str,
) -> Response:
    """산출물 원문 반환."""
    output_root = request.app.state.settings.output_root

    try:
        content = read_artifact(output_root, session_id, filename)
    except ValidationError as e:
        message = (
            "Invalid filename"
            if e.code == ErrorCodes.INVALID_FILENAME
            else "Invalid session id"
        )
        return PlainTextResponse(message, status_code=400)
    except NotFoundError:
        return PlainTextResponse("File not found", status_code=404)
    except StorageError as e:
        logger.error(f"Error serving file {filename} for session {session_id}: {e}", exc_info=True)
        return PlainTextResponse("Internal server error", status_code=500)

    return Response(content=content, media_type="text/plain")
