"""
ConfigStore: API 키 설정 파일 (config.toml) 읽기/쓰기.

규칙:
- 파일 없음 → 빈 레코드 (에러 아님)
- plexelsApiKeys는 항상 list로 정규화
- 쓰기는 통째로 덮어쓰기 (병합 없음), 원자적 rename
- 동시 POST는 last-writer-wins (락 없음)
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

import tomli_w

from src.core.fileio import atomic_write_text
from src.domain.constants import DEEPSEEK_KEY_FIELD, PLEXELS_KEYS_FIELD
from src.domain.errors import ErrorCodes, StorageError
from src.domain.schemas import ApiKeyConfig

logger = logging.getLogger(__name__)


def _keys_from_file(value: Any) -> list[str]:
    """저장된 값 정규화: 스칼라 → [str], 비어있음 → []."""
    if isinstance(value, list):
        return [str(item) for item in value]
    if not value:
        return []
    return [str(value)]


def _keys_from_request(value: Any) -> list[str]:
    """
    요청 값 정규화.

    list → 그대로 (문자열화), 단일 문자열 → [문자열],
    그 외 (None, 숫자, 객체) → []. 에러를 내지 않는다.
    """
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str) and value:
        return [value]
    return []


def _key_string(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


class ConfigStore:
    """config.toml 저장소."""

    def __init__(self, config_path: Path) -> None:
        self.config_path = config_path

    def load(self) -> ApiKeyConfig:
        """
        설정 로드.

        Returns:
            ApiKeyConfig (파일 없으면 빈 레코드)

        Raises:
            StorageError: 읽기 실패 또는 TOML 파싱 실패
        """
        if not self.config_path.exists():
            return ApiKeyConfig()

        try:
            with open(self.config_path, "rb") as f:
                data = tomllib.load(f)
        except (OSError, ValueError) as e:
            # ValueError: TOMLDecodeError, UnicodeDecodeError
            raise StorageError(
                ErrorCodes.CONFIG_READ_FAILED,
                path=str(self.config_path),
                cause=str(e),
            ) from e

        return ApiKeyConfig(
            deepseek_api_key=_key_string(data.get(DEEPSEEK_KEY_FIELD)),
            plexels_api_keys=_keys_from_file(data.get(PLEXELS_KEYS_FIELD)),
        )

    def save(self, payload: dict[str, Any]) -> ApiKeyConfig:
        """
        설정 저장 (통째로 덮어쓰기).

        Args:
            payload: 요청 body (deepseekApiKey, plexelsApiKeys)

        Returns:
            실제 저장된 ApiKeyConfig

        Raises:
            StorageError: 디렉터리 생성/직렬화/쓰기 실패
        """
        config = ApiKeyConfig(
            deepseek_api_key=_key_string(payload.get(DEEPSEEK_KEY_FIELD)),
            plexels_api_keys=_keys_from_request(payload.get(PLEXELS_KEYS_FIELD)),
        )

        try:
            content = tomli_w.dumps(config.to_dict())
            atomic_write_text(self.config_path, content)
        except (OSError, TypeError, ValueError) as e:
            raise StorageError(
                ErrorCodes.CONFIG_WRITE_FAILED,
                path=str(self.config_path),
                cause=str(e),
            ) from e

        logger.info(
            f"Config saved to {self.config_path} "
            f"({len(config.plexels_api_keys)} plexels key(s))"
        )
        return config
