"""
Pytest fixtures for the scriptwriter API tests.

테스트 구성:
- tmp_path 기반 Settings (config_dir, output_root)
- 실제 프로세스로 실행되는 가짜 생성기 (sys.executable)
- app.state.settings가 주입된 테스트용 FastAPI 앱
"""

import sys
from pathlib import Path

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from src.app.routes import config, content, scriptwriter
from src.domain.schemas import Settings

# =============================================================================
# Fake Generator
# =============================================================================

# 프롬프트 키워드로 동작 선택:
# - "exit-nonzero": stderr 출력 후 exit 1
# - "stderr-noise": 파일은 쓰지만 marker 없는 stderr
# - "stderr-marker": 파일 쓰고 marker 포함 stderr
# - "no-files": 아무 파일도 쓰지 않음
# - 그 외: script1.txt, script2.txt 작성
FAKE_GENERATOR_SOURCE = '''
import argparse
import os
import sys
from pathlib import Path

parser = argparse.ArgumentParser()
parser.add_argument("-prompt", required=True)
parser.add_argument("-output", required=True)
args = parser.parse_args()

if "exit-nonzero" in args.prompt:
    sys.stderr.write("Error: DeepSeek API key not found in config.toml\\n")
    sys.exit(1)

output = Path(args.output)
if "no-files" not in args.prompt:
    (output / "script1.txt").write_text("variant one: " + args.prompt, encoding="utf-8")
    (output / "script2.txt").write_text("cwd=" + os.getcwd(), encoding="utf-8")

if "stderr-noise" in args.prompt:
    sys.stderr.write("panic: something went wrong\\n")
elif "stderr-marker" in args.prompt:
    sys.stderr.write("warning: slow response\\nscripts successfully generated\\n")

print("Successfully generated and saved two scripts:")
'''


@pytest.fixture
def fake_generator(tmp_path: Path) -> Path:
    """가짜 생성기 스크립트 경로."""
    script = tmp_path / "fake_generator.py"
    script.write_text(FAKE_GENERATOR_SOURCE, encoding="utf-8")
    return script


# =============================================================================
# Settings Fixtures
# =============================================================================

@pytest.fixture
def scripts_dir(tmp_path: Path) -> Path:
    """config.toml 디렉터리 (생성기 작업 디렉터리)."""
    scripts_dir = tmp_path / "scripts"
    scripts_dir.mkdir()
    return scripts_dir


@pytest.fixture
def output_root(scripts_dir: Path) -> Path:
    """세션 산출물 루트 (미생성 상태)."""
    return scripts_dir / "output"


@pytest.fixture
def settings(scripts_dir: Path, output_root: Path, fake_generator: Path) -> Settings:
    """테스트용 Settings."""
    return Settings(
        config_dir=scripts_dir,
        output_root=output_root,
        generator_command=(sys.executable, str(fake_generator)),
        generator_timeout=30.0,
    )


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """테스트용 FastAPI 앱."""
    app = FastAPI()
    app.include_router(config.api_router, prefix="/api/config")
    app.include_router(content.api_router, prefix="/api/content")
    app.include_router(scriptwriter.api_router, prefix="/api/scriptwriter")
    app.state.settings = settings
    return app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """테스트 클라이언트."""
    return TestClient(app)
