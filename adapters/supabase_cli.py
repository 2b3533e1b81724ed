"""
Supabase CLI wrapper for TypeScript type generation.
"""

import logging
import subprocess
from typing import Optional, Sequence

from validation.arguments import TypeGenRequest
from validation.errors import CliNotFoundError, ExecutionError
from .process import ProcessRunner

logger = logging.getLogger(__name__)

CLI_INSTALL_MESSAGE = "Supabase CLI not found. Please install it with: npm install -g supabase"
NO_TYPES_MESSAGE = "No types generated"

# 버전 확인은 빠르게 끝나야 함
VERSION_CHECK_TIMEOUT = 60.0


class SupabaseCLI:
    """Supabase CLI 어댑터"""

    def __init__(self, command: Sequence[str], project_ref: Optional[str] = None,
                 runner: ProcessRunner = None):
        self.command = tuple(command)
        self.project_ref = project_ref
        self.runner = runner or ProcessRunner()

    def is_available(self) -> bool:
        """`<cli> --version` 실행 성공 여부로 CLI 설치 확인"""
        try:
            result = self.runner.run(self.command + ("--version",), timeout=VERSION_CHECK_TIMEOUT)
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning(f"Supabase CLI 확인 실패: {e}")
            return False
        if not result.ok:
            logger.warning(f"Supabase CLI 확인 실패 (exit {result.returncode}): {result.stderr.strip()}")
            return False
        logger.debug(f"Supabase CLI 버전: {result.stdout.strip()}")
        return True

    def build_gen_types_args(self, schema: str) -> tuple:
        """타입 생성 명령 구성 (프로젝트 ref가 없으면 --local)"""
        args = self.command + ("gen", "types", "typescript")
        if self.project_ref:
            args += ("--project-id", self.project_ref)
        else:
            args += ("--local",)
        return args + ("--schema", schema)

    def generate_types(self, request: TypeGenRequest) -> str:
        """
        스키마의 TypeScript 타입을 생성합니다.

        Returns:
            str: stdout, 비어 있으면 stderr, 둘 다 비어 있으면 안내 문구

        Raises:
            CliNotFoundError: CLI가 설치되어 있지 않음 (생성 명령 실행 전)
            ExecutionError: 생성 명령 실패 또는 타임아웃
        """
        if not self.is_available():
            raise CliNotFoundError(CLI_INSTALL_MESSAGE)

        args = self.build_gen_types_args(request.schema)
        logger.info(f"타입 생성 시작: schema={request.schema}, "
                    f"mode={'project ' + self.project_ref if self.project_ref else 'local'}")

        command = " ".join(args)
        try:
            result = self.runner.run(args)
        except subprocess.TimeoutExpired as e:
            logger.error(f"타입 생성 시간 초과 ({e.timeout}초): {command}")
            raise ExecutionError(f"Failed to generate types: command timed out after {e.timeout} seconds")
        except OSError as e:
            logger.error(f"타입 생성 명령 실행 실패: {command} ({e})")
            raise ExecutionError(f"Failed to generate types: {e}")

        if not result.ok:
            logger.error(f"타입 생성 실패 (exit {result.returncode}): {command}")
            detail = result.stderr.strip() or result.stdout.strip()
            message = f"Command failed with exit code {result.returncode}: {command}"
            if detail:
                message += f"\n{detail}"
            raise ExecutionError(f"Failed to generate types: {message}")

        return result.stdout or result.stderr or NO_TYPES_MESSAGE
