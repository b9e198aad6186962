"""
FastAPI 애플리케이션 진입점.

실행:
- 개발: uv run uvicorn src.app.main:app --reload
- 프로덕션: uv run uvicorn src.app.main:app
"""

import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Any

import yaml
from fastapi import FastAPI

# Routes
from src.app.routes import config, content, scriptwriter
from src.domain.schemas import Settings

PROJECT_ROOT = Path(__file__).parent.parent.parent

# =============================================================================
# Configuration
# =============================================================================


def load_config(config_path: Path | None = None) -> dict:
    """설정 파일 로드."""
    if config_path is None:
        # 환경변수 우선, 없으면 프로젝트 루트의 default.yaml
        env_path = os.environ.get("SCRIPTWRITER_CONFIG")
        config_path = Path(env_path) if env_path else PROJECT_ROOT / "default.yaml"

    if not config_path.exists():
        return {}

    with open(config_path, encoding="utf-8") as f:
        data: dict[Any, Any] = yaml.safe_load(f) or {}
        return data


# =============================================================================
# Lifespan
# =============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    애플리케이션 생명주기 관리.

    시작 시: 설정 로드 (두 개의 고정 루트 포함)
    테스트에서 app.state.settings를 미리 넣었으면 그대로 사용.
    """
    # Startup
    if getattr(app.state, "settings", None) is None:
        app.state.settings = Settings.from_config(load_config(), PROJECT_ROOT)

    yield


# =============================================================================
# App Instance
# =============================================================================

app = FastAPI(
    title="Shortform Scriptwriter API",
    description="API 키 설정, 스크립트 생성, 생성 결과 조회",
    version="0.1.0",
    lifespan=lifespan,
)


# =============================================================================
# Routes
# =============================================================================

app.include_router(config.api_router, prefix="/api/config", tags=["Config API"])
app.include_router(content.api_router, prefix="/api/content", tags=["Content API"])
app.include_router(
    scriptwriter.api_router, prefix="/api/scriptwriter", tags=["Scriptwriter API"]
)


# =============================================================================
# Root Endpoints
# =============================================================================


@app.get("/")
async def root() -> dict[str, Any]:
    """서비스 인덱스."""
    return {
        "message": "Shortform Scriptwriter API",
        "endpoints": {
            "config": "/api/config",
            "content": "/api/content/{session_id}/{filename}",
            "scriptwriter": "/api/scriptwriter",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    """헬스 체크."""
    return {"status": "ok"}


# =============================================================================
# CLI Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.app.main:app",
        host="127.0.0.1",
        port=8000,
        reload=True,
    )
