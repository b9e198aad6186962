"""
Data schemas for the scriptwriter API.

규칙:
- 와이어/TOML 키는 camelCase (deepseekApiKey, plexelsApiKeys)
- plexelsApiKeys는 항상 list로 정규화
- Settings는 시작 시 한 번 로드, 런타임 변경 금지
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from src.domain.constants import (
    CONFIG_FILENAME,
    DEEPSEEK_KEY_FIELD,
    DEFAULT_GENERATOR_COMMAND,
    DEFAULT_GENERATOR_TIMEOUT,
    DEFAULT_SESSION_ID,
    DEFAULT_SUCCESS_MARKER,
    PLEXELS_KEYS_FIELD,
)

# =============================================================================
# API Key Config
# =============================================================================

@dataclass
class ApiKeyConfig:
    """
    config.toml 레코드.

    POST마다 통째로 덮어씀 (부분 업데이트/병합 없음).
    """
    deepseek_api_key: str = ""
    plexels_api_keys: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """TOML/JSON 직렬화용."""
        return {
            DEEPSEEK_KEY_FIELD: self.deepseek_api_key,
            PLEXELS_KEYS_FIELD: list(self.plexels_api_keys),
        }


# =============================================================================
# Generation Result
# =============================================================================

@dataclass
class GenerationResult:
    """스크립트 생성 결과. 파일 내용이 아닌 경로만 담는다."""
    session_id: str
    script_paths: dict[str, str]
    stdout: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "scriptPaths": dict(self.script_paths),
        }


# =============================================================================
# Service Settings
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """
    서비스 설정 (default.yaml → scriptwriter 섹션).

    두 개의 고정 루트:
    - config_dir: config.toml 위치 + 생성기 작업 디렉터리
    - output_root: 세션별 산출물 폴더의 루트
    """
    config_dir: Path
    output_root: Path
    config_filename: str = CONFIG_FILENAME
    generator_command: tuple[str, ...] = DEFAULT_GENERATOR_COMMAND
    success_marker: str = DEFAULT_SUCCESS_MARKER
    generator_timeout: float | None = DEFAULT_GENERATOR_TIMEOUT
    default_session: str = DEFAULT_SESSION_ID

    @property
    def config_path(self) -> Path:
        return self.config_dir / self.config_filename

    @classmethod
    def from_config(cls, config: dict[str, Any], base_dir: Path) -> "Settings":
        """
        설정 dict로부터 Settings 생성.

        Args:
            config: load_config() 결과 (전체 YAML)
            base_dir: 상대 경로 해석 기준 (프로젝트 루트)

        Returns:
            Settings 인스턴스
        """
        section = config.get("scriptwriter") or {}
        generator = section.get("generator") or {}

        def _resolve(value: str) -> Path:
            path = Path(value)
            return path if path.is_absolute() else base_dir / path

        command = generator.get("command") or DEFAULT_GENERATOR_COMMAND
        if isinstance(command, str):
            command = command.split()

        # timeout: 키가 없으면 기본값, null이면 비활성화
        timeout = generator.get("timeout", DEFAULT_GENERATOR_TIMEOUT)

        return cls(
            config_dir=_resolve(section.get("config_dir", "static/scripts")),
            output_root=_resolve(section.get("output_root", "static/scripts/output")),
            config_filename=section.get("config_filename", CONFIG_FILENAME),
            generator_command=tuple(str(part) for part in command),
            success_marker=generator.get("success_marker", DEFAULT_SUCCESS_MARKER),
            generator_timeout=float(timeout) if timeout is not None else None,
            default_session=section.get("default_session", DEFAULT_SESSION_ID),
        )
