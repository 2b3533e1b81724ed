"""
Adapters for the Supabase database client and the Supabase CLI.
"""

import logging
from dataclasses import dataclass

from .database import MAX_ROWS, SupabaseAdapter, apply_where_condition, apply_where_conditions
from .process import ProcessResult, ProcessRunner
from .supabase_cli import SupabaseCLI

logger = logging.getLogger(__name__)

__all__ = [
    'MAX_ROWS',
    'SupabaseAdapter',
    'SupabaseCLI',
    'ProcessRunner',
    'ProcessResult',
    'ServerContext',
    'apply_where_condition',
    'apply_where_conditions',
    'create_context',
]


@dataclass(frozen=True)
class ServerContext:
    """시작 시 한 번 구성되어 도구들에 전달되는 공유 객체"""
    config: object
    database: SupabaseAdapter
    cli: SupabaseCLI


def create_context(config) -> ServerContext:
    """설정으로부터 어댑터들을 생성합니다."""
    database = SupabaseAdapter.from_config(config)
    cli = SupabaseCLI(
        config.cli_command,
        project_ref=config.project_ref,
        runner=ProcessRunner(timeout=config.gen_types_timeout),
    )
    logger.info(f"타입 생성 모드: {'project ' + config.project_ref if config.project_ref else 'local'}")
    return ServerContext(config=config, database=database, cli=cli)
