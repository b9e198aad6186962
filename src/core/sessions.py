"""
세션 경로 정책.

세션 ID와 파일명은 요청에서 그대로 들어와 경로 세그먼트가 되므로
파일시스템 접근 전에 반드시 allow-list 검증을 거친다.

output_root/
└── <session_id>/
    ├── script1.txt
    └── script2.txt
"""

from pathlib import Path

from src.domain.constants import (
    ARTIFACT_FILENAME_PATTERN,
    ARTIFACT_FILENAMES,
    DEFAULT_SESSION_ID,
    SESSION_ID_PATTERN,
)
from src.domain.errors import ErrorCodes, ValidationError


def validate_artifact_filename(filename: str) -> str:
    """
    산출물 파일명 검증 (script1.txt / script2.txt만 허용).

    Raises:
        ValidationError: 패턴 불일치
    """
    if not isinstance(filename, str) or not ARTIFACT_FILENAME_PATTERN.fullmatch(filename):
        raise ValidationError(ErrorCodes.INVALID_FILENAME, filename=filename)
    return filename


def validate_session_id(session_id: str) -> str:
    """
    세션 ID 검증 (영문/숫자/-/_ 1~64자).

    Raises:
        ValidationError: 허용되지 않는 문자 또는 길이
    """
    if not isinstance(session_id, str) or not SESSION_ID_PATTERN.fullmatch(session_id):
        raise ValidationError(ErrorCodes.INVALID_SESSION_ID, session_id=session_id)
    return session_id


def resolve_session_folder(
    session_id: str | None,
    default: str = DEFAULT_SESSION_ID,
) -> str:
    """세션 ID가 없거나 빈 문자열이면 default 토큰으로 대체 후 검증."""
    return validate_session_id(session_id or default)


def session_dir(output_root: Path, session_id: str) -> Path:
    """세션 산출물 디렉터리 경로 (생성하지 않음)."""
    return output_root / validate_session_id(session_id)


def artifact_paths(output_dir: Path) -> dict[str, Path]:
    """세션 디렉터리의 산출물 경로. 키: script1, script2."""
    return {
        Path(name).stem: output_dir / name
        for name in ARTIFACT_FILENAMES
    }
