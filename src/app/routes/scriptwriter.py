"""
Scriptwriter Routes: 스크립트 생성.

- POST /api/scriptwriter { content, sessionId? }
  → { message, sessionId, scriptPaths: { script1, script2 } }

요청은 생성기 프로세스가 끝날 때까지 열려 있음 (백그라운드 실행 없음).
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.app.services.scriptwriter import FAILED_TO_GENERATE, ScriptInvoker
from src.domain.errors import ErrorCodes, GenerationError, StorageError, ValidationError

logger = logging.getLogger(__name__)

api_router = APIRouter()


@api_router.post("")
async def generate_scripts(request: Request) -> Any:
    """
    프롬프트 → 스크립트 두 개 생성.

    body가 JSON이 아니면 500, JSON 객체가 아니면 content 없음 (400).
    """
    try:
        payload = await request.json()
    except ValueError as e:
        logger.error(f"Error in scriptwriter API: invalid JSON body: {e}")
        return JSONResponse(
            status_code=500,
            content={"message": FAILED_TO_GENERATE, "details": str(e)},
        )
    if not isinstance(payload, dict):
        payload = {}

    invoker = ScriptInvoker(request.app.state.settings)

    try:
        result = await invoker.generate(
            content=payload.get("content"),
            session_id=payload.get("sessionId"),
        )
    except ValidationError as e:
        message = (
            "Content prompt cannot be empty"
            if e.code == ErrorCodes.EMPTY_CONTENT
            else "Invalid session id"
        )
        return JSONResponse(status_code=400, content={"message": message})
    except GenerationError as e:
        return JSONResponse(
            status_code=500,
            content={"message": e.message, "details": e.details},
        )
    except StorageError as e:
        logger.error(f"Error in scriptwriter API: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"message": FAILED_TO_GENERATE, "details": e.context.get("cause", "")},
        )

    return {
        "message": "Scripts generated successfully",
        **result.to_dict(),
    }
