"""
FastAPI Routes.

API 라우트 (JSON + text/plain)
"""

from . import config, content, scriptwriter

__all__ = ["config", "content", "scriptwriter"]
