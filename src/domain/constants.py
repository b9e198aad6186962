"""
Domain Constants: 서비스 전역 상수.

파일명 정책, 세션 ID 정책, 생성기 기본값 등.
"""

import re

# =============================================================================
# Artifact Filenames (산출물 파일명 정책)
# =============================================================================
# 생성기는 세션 폴더에 정확히 두 개의 스크립트 변형을 쓴다:
# output/<session_id>/
# ├── script1.txt
# └── script2.txt

ARTIFACT_FILENAMES = ("script1.txt", "script2.txt")
ARTIFACT_FILENAME_PATTERN = re.compile(r"^script[12]\.txt$")

# =============================================================================
# Session (세션 폴더 정책)
# =============================================================================
# 세션 ID는 경로 세그먼트로 그대로 쓰이므로 allow-list로 제한

SESSION_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")
DEFAULT_SESSION_ID = "default"

# =============================================================================
# API Key Config (config.toml 키)
# =============================================================================

CONFIG_FILENAME = "config.toml"
DEEPSEEK_KEY_FIELD = "deepseekApiKey"
PLEXELS_KEYS_FIELD = "plexelsApiKeys"

# =============================================================================
# Generator (외부 스크립트 생성기)
# =============================================================================
# 호출 형식: <command...> -prompt "<content>" -output "<dir>"

DEFAULT_GENERATOR_COMMAND = ("go", "run", "ScriptWriter.go")
DEFAULT_SUCCESS_MARKER = "successfully generated"
DEFAULT_GENERATOR_TIMEOUT = 600.0  # seconds
