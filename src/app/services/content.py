"""
ContentServer: 세션 산출물 (script1.txt / script2.txt) 읽기.

검증 순서가 보안 통제:
1. 파일명 allow-list (파일시스템 접근 전)
2. 세션 ID allow-list
3. 파일 읽기 (없음 → NotFoundError, 그 외 → StorageError)
"""

from pathlib import Path

from src.core.sessions import session_dir, validate_artifact_filename
from src.domain.errors import ErrorCodes, NotFoundError, StorageError


def read_artifact(output_root: Path, session_id: str, filename: str) -> bytes:
    """
    산출물 원본 바이트 반환 (변환 없음).

    Args:
        output_root: 세션 폴더 루트
        session_id: 세션 ID
        filename: script1.txt 또는 script2.txt

    Returns:
        파일 내용 (bytes)

    Raises:
        ValidationError: 파일명 또는 세션 ID 불일치
        NotFoundError: 파일 (또는 세션 디렉터리) 없음
        StorageError: 그 외 읽기 실패
    """
    validate_artifact_filename(filename)
    file_path = session_dir(output_root, session_id) / filename

    try:
        return file_path.read_bytes()
    except FileNotFoundError as e:
        raise NotFoundError(
            ErrorCodes.ARTIFACT_NOT_FOUND,
            session_id=session_id,
            filename=filename,
        ) from e
    except OSError as e:
        raise StorageError(
            ErrorCodes.ARTIFACT_READ_FAILED,
            path=str(file_path),
            cause=str(e),
        ) from e
