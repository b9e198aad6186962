"""Domain layer: errors, constants and schemas."""

from .errors import (
    ErrorCodes,
    GenerationError,
    NotFoundError,
    ScriptwriterError,
    StorageError,
    ValidationError,
)
from .schemas import ApiKeyConfig, GenerationResult, Settings

__all__ = [
    "ScriptwriterError",
    "ValidationError",
    "NotFoundError",
    "StorageError",
    "GenerationError",
    "ErrorCodes",
    "ApiKeyConfig",
    "GenerationResult",
    "Settings",
]
