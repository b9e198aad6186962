"""
Application Services.

역할:
- config_store: config.toml 읽기/쓰기
- content: 세션 산출물 읽기
- scriptwriter: 외부 생성기 호출
"""

from .config_store import ConfigStore
from .content import read_artifact
from .scriptwriter import ScriptInvoker

__all__ = [
    "ConfigStore",
    "ScriptInvoker",
    "read_artifact",
]
