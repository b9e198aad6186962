"""
Config Routes: API 키 설정.

- GET /api/config → { deepseekApiKey, plexelsApiKeys }
- POST /api/config → { success: true }
"""

import logging
from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.app.services.config_store import ConfigStore
from src.domain.errors import StorageError

logger = logging.getLogger(__name__)

api_router = APIRouter()


def _store(request: Request) -> ConfigStore:
    return ConfigStore(request.app.state.settings.config_path)


@api_router.get("")
async def get_config(request: Request) -> Any:
    """설정 조회. 파일이 없으면 빈 레코드."""
    try:
        config = _store(request).load()
    except StorageError as e:
        logger.error(f"Error reading config file: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to read config"})

    return config.to_dict()


@api_router.post("")
async def save_config(request: Request) -> Any:
    """
    설정 저장 (통째로 덮어쓰기).

    plexelsApiKeys가 list가 아니면 조용히 정규화 (에러 아님).
    body가 JSON 객체가 아니면 저장 실패로 처리.
    """
    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            raise ValueError(f"expected JSON object, got {type(payload).__name__}")
        _store(request).save(payload)
    except (ValueError, StorageError) as e:
        logger.error(f"Error writing config file: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"error": "Failed to write config"})

    return {"success": True}
