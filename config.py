"""
서버 설정 - 환경변수 로드 및 Supabase 프로젝트 ref 추출
"""

import logging
import os
import re
import shlex
from dataclasses import dataclass
from typing import Optional, Tuple

from validation.errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CLI_COMMAND = "npx supabase"
DEFAULT_GEN_TYPES_TIMEOUT = 120.0

_PROJECT_REF_PATTERN = re.compile(r"https://([^.]+)\.supabase\.co")


def derive_project_ref(url: str) -> Optional[str]:
    """
    Supabase URL에서 프로젝트 ref 추출

    localhost URL이거나 https://<ref>.supabase.co 형식이 아니면 None
    (타입 생성 시 --local 모드 사용)
    """
    if "localhost" in url:
        return None
    match = _PROJECT_REF_PATTERN.search(url)
    if match:
        return match.group(1)
    return None


def _parse_timeout(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return DEFAULT_GEN_TYPES_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        raise ConfigurationError(f"GEN_TYPES_TIMEOUT 값이 숫자가 아닙니다: {raw}")
    if timeout < 0:
        raise ConfigurationError(f"GEN_TYPES_TIMEOUT 값은 0 이상이어야 합니다: {raw}")
    # 0 = 타임아웃 없음
    return timeout or None


@dataclass(frozen=True)
class ServerConfig:
    """서버 시작 시 한 번 생성되는 읽기 전용 설정"""
    supabase_url: str
    supabase_key: str
    project_ref: Optional[str] = None
    cli_command: Tuple[str, ...] = tuple(shlex.split(DEFAULT_CLI_COMMAND))
    gen_types_timeout: Optional[float] = DEFAULT_GEN_TYPES_TIMEOUT

    @classmethod
    def from_env(cls, environ=None) -> "ServerConfig":
        """환경변수에서 설정을 가져옵니다."""
        environ = os.environ if environ is None else environ

        url = (environ.get("SUPABASE_URL") or "").strip()
        key = (environ.get("SUPABASE_KEY") or "").strip()

        missing = [name for name, value in (("SUPABASE_URL", url), ("SUPABASE_KEY", key)) if not value]
        if missing:
            raise ConfigurationError(
                "SUPABASE_URL and SUPABASE_KEY environment variables are required",
                missing=missing
            )

        cli_command = tuple(shlex.split(environ.get("SUPABASE_CLI") or DEFAULT_CLI_COMMAND))
        if not cli_command:
            raise ConfigurationError("SUPABASE_CLI 값이 비어 있습니다.")

        return cls(
            supabase_url=url,
            supabase_key=key,
            project_ref=derive_project_ref(url),
            cli_command=cli_command,
            gen_types_timeout=_parse_timeout(environ.get("GEN_TYPES_TIMEOUT")),
        )

    @property
    def is_local(self) -> bool:
        return self.project_ref is None

    def describe(self) -> dict:
        """로그용 설정 요약 (키는 포함하지 않음)"""
        return {
            "supabase_url": self.supabase_url,
            "project_ref": self.project_ref,
            "mode": "local" if self.is_local else "hosted",
            "cli_command": " ".join(self.cli_command),
            "gen_types_timeout": self.gen_types_timeout,
        }
