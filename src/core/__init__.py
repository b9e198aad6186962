"""
Core layer: 파일시스템 안전 핵심 모듈.

역할:
- 원자적 쓰기 (temp → rename + fsync)
- 세션 ID/파일명 검증, 세션 경로 해석
"""

from .fileio import atomic_write_text
from .sessions import (
    artifact_paths,
    resolve_session_folder,
    session_dir,
    validate_artifact_filename,
    validate_session_id,
)

__all__ = [
    # fileio
    "atomic_write_text",
    # sessions
    "validate_artifact_filename",
    "validate_session_id",
    "resolve_session_folder",
    "session_dir",
    "artifact_paths",
]
