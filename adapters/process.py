"""
External process runner for CLI-backed tools.
"""

import logging
import subprocess
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """완료된 프로세스의 실행 결과"""
    args: Tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class ProcessRunner:
    """서브프로세스 실행기 (출력 캡처, 타임아웃 지원)"""

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def run(self, args: Sequence[str], timeout: Optional[float] = None) -> ProcessResult:
        """
        명령을 실행하고 종료될 때까지 기다립니다.

        Args:
            args: 실행할 명령과 인자 (셸을 거치지 않음)
            timeout: 초 단위 제한. None이면 러너 기본값 사용

        Returns:
            ProcessResult: 종료 코드와 캡처된 stdout/stderr

        Raises:
            FileNotFoundError: 실행 파일이 없을 때
            subprocess.TimeoutExpired: 제한 시간 초과
        """
        effective_timeout = self.timeout if timeout is None else timeout
        logger.debug(f"프로세스 실행: {' '.join(args)} (timeout={effective_timeout})")

        completed = subprocess.run(
            list(args),
            capture_output=True,
            text=True,
            timeout=effective_timeout,
            check=False,
        )
        return ProcessResult(
            args=tuple(args),
            returncode=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )
