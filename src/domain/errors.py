"""
Error definitions for the scriptwriter API.

규칙:
- 조용한 실패 금지 → 도메인 에러로 명시적 실패
- 에러 변환은 라우트 경계에서만 (HTTP 상태 코드 매핑)
- 내부 상세는 로그로, 클라이언트에는 일반 메시지만
"""

from typing import Any


class ScriptwriterError(Exception):
    """
    도메인 에러 베이스.

    Usage:
        raise ValidationError(ErrorCodes.INVALID_FILENAME, filename="x.txt")
    """

    def __init__(self, code: str, **context: Any) -> None:
        self.code = code
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
        return f"[{self.code}] {ctx_str}" if ctx_str else f"[{self.code}]"

    def to_dict(self) -> dict[str, Any]:
        """로그/JSON 직렬화용."""
        return {
            "code": self.code,
            **self.context,
        }


class ValidationError(ScriptwriterError):
    """잘못된 입력. 파일시스템/서브프로세스 접근 전에 발생."""


class NotFoundError(ScriptwriterError):
    """요청한 산출물 파일 없음 (content 라우트 전용)."""


class StorageError(ScriptwriterError):
    """파일 읽기/쓰기/직렬화 실패."""


class GenerationError(ScriptwriterError):
    """
    스크립트 생성 프로세스 실패.

    message: 클라이언트에 노출되는 요약
    details: 진단 텍스트 (stderr 등)
    """

    def __init__(self, code: str, message: str, details: str = "", **context: Any) -> None:
        self.message = message
        self.details = details
        super().__init__(code, **context)


# =============================================================================
# Error Codes
# =============================================================================

class ErrorCodes:
    """에러 코드 상수."""

    # === Validation ===
    INVALID_FILENAME = "INVALID_FILENAME"
    INVALID_SESSION_ID = "INVALID_SESSION_ID"
    EMPTY_CONTENT = "EMPTY_CONTENT"

    # === Content ===
    ARTIFACT_NOT_FOUND = "ARTIFACT_NOT_FOUND"

    # === Storage ===
    CONFIG_READ_FAILED = "CONFIG_READ_FAILED"
    CONFIG_WRITE_FAILED = "CONFIG_WRITE_FAILED"
    ARTIFACT_READ_FAILED = "ARTIFACT_READ_FAILED"
    OUTPUT_DIR_FAILED = "OUTPUT_DIR_FAILED"

    # === Generation ===
    GENERATOR_SPAWN_FAILED = "GENERATOR_SPAWN_FAILED"
    GENERATOR_EXIT_NONZERO = "GENERATOR_EXIT_NONZERO"
    GENERATOR_TIMEOUT = "GENERATOR_TIMEOUT"
    GENERATOR_UNCONFIRMED = "GENERATOR_UNCONFIRMED"
