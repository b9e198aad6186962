"""
ScriptInvoker: 외부 스크립트 생성기 서브프로세스 호출.

흐름:
1. content 검증 (빈 값/공백 → ValidationError, 프로세스 실행 안 함)
2. 세션 폴더 결정 (없으면 default) + 검증
3. output_root/<session> 생성 (이미 있으면 no-op)
4. 생성기 실행: <command...> -prompt <content> -output <dir>
   - argv 직접 전달 (셸 경유 없음)
   - cwd = config_dir (생성기가 같은 config.toml을 읽음)
   - 완료까지 대기, timeout 초과 시 kill
5. 성공 판정:
   - 실행 실패 / non-zero exit → 실패
   - stderr가 있고 success marker가 없으면 → 실패

재시도 없음: 모든 실패는 호출자에게 한 번 보고.
"""

import asyncio
import contextlib
import logging
from pathlib import Path

from src.core.sessions import artifact_paths, resolve_session_folder
from src.domain.errors import ErrorCodes, GenerationError, StorageError, ValidationError
from src.domain.schemas import GenerationResult, Settings

logger = logging.getLogger(__name__)

FAILED_TO_GENERATE = "Failed to generate script"
GENERATION_FAILED = "Script generation failed"


class ScriptInvoker:
    """스크립트 생성기 호출자. 요청마다 프로세스 하나."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def build_command(self, content: str, output_dir: Path) -> list[str]:
        """생성기 argv 구성."""
        return [
            *self.settings.generator_command,
            "-prompt",
            content,
            "-output",
            str(output_dir),
        ]

    def is_confirmed(self, stderr: str) -> bool:
        """stderr가 완전히 비어 있거나 success marker를 포함하면 성공."""
        if not stderr:
            return True
        return self.settings.success_marker in stderr

    def prepare_output_dir(self, session_id: str) -> Path:
        """세션 출력 디렉터리 생성 (동시 요청에도 idempotent)."""
        output_dir = self.settings.output_root / session_id
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(
                ErrorCodes.OUTPUT_DIR_FAILED,
                path=str(output_dir),
                cause=str(e),
            ) from e
        return output_dir

    async def generate(self, content: str | None, session_id: str | None = None) -> GenerationResult:
        """
        스크립트 두 개 생성.

        Args:
            content: 프롬프트
            session_id: 세션 ID (없으면 default)

        Returns:
            GenerationResult (세션 ID + 산출물 경로)

        Raises:
            ValidationError: 빈 content 또는 잘못된 세션 ID
            StorageError: 출력 디렉터리 생성 실패
            GenerationError: 생성기 실패
        """
        if not isinstance(content, str) or not content.strip():
            raise ValidationError(ErrorCodes.EMPTY_CONTENT)

        session_folder = resolve_session_folder(session_id, self.settings.default_session)
        output_dir = self.prepare_output_dir(session_folder)

        command = self.build_command(content, output_dir)
        logger.info(
            f"Executing generator: {' '.join(self.settings.generator_command)} "
            f"(prompt {len(content)} chars, output={output_dir})"
        )

        stdout, stderr = await self._run(command)

        if not self.is_confirmed(stderr):
            logger.error(f"Error from script generator: {stderr}")
            raise GenerationError(
                ErrorCodes.GENERATOR_UNCONFIRMED,
                message=GENERATION_FAILED,
                details=stderr,
                session_id=session_folder,
            )

        logger.info(f"Script generator output: {stdout}")

        paths = artifact_paths(output_dir)
        missing = [name for name, path in paths.items() if not path.exists()]
        if missing:
            logger.warning(
                f"Generator reported success but artifacts are missing "
                f"in {output_dir}: {', '.join(missing)}"
            )

        return GenerationResult(
            session_id=session_folder,
            script_paths={name: str(path) for name, path in paths.items()},
            stdout=stdout,
        )

    async def _run(self, command: list[str]) -> tuple[str, str]:
        """
        서브프로세스 실행 후 (stdout, stderr) 반환.

        Raises:
            GenerationError: 실행 실패, timeout, non-zero exit
        """
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=str(self.settings.config_dir),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            logger.error(f"Failed to start script generator: {e}", exc_info=True)
            raise GenerationError(
                ErrorCodes.GENERATOR_SPAWN_FAILED,
                message=FAILED_TO_GENERATE,
                details=str(e),
            ) from e

        try:
            out, err = await asyncio.wait_for(
                process.communicate(),
                timeout=self.settings.generator_timeout,
            )
        except TimeoutError as e:
            with contextlib.suppress(ProcessLookupError):
                process.kill()
            await process.wait()
            timeout = self.settings.generator_timeout
            logger.error(f"Script generator timed out after {timeout}s")
            raise GenerationError(
                ErrorCodes.GENERATOR_TIMEOUT,
                message=FAILED_TO_GENERATE,
                details=f"Generator timed out after {timeout} seconds",
            ) from e

        stdout = out.decode("utf-8", errors="replace")
        stderr = err.decode("utf-8", errors="replace")

        if process.returncode != 0:
            logger.error(
                f"Script generator exited with status {process.returncode}: {stderr}"
            )
            raise GenerationError(
                ErrorCodes.GENERATOR_EXIT_NONZERO,
                message=FAILED_TO_GENERATE,
                details=stderr or stdout or f"Generator exited with status {process.returncode}",
                returncode=process.returncode,
            )

        return stdout, stderr
