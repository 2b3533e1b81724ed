"""
MCP Supabase Server - 테이블 조회 및 타입 생성
"""

from mcp.server.fastmcp import FastMCP
import os
import logging
import sys
from dotenv import load_dotenv

# 모듈 임포트
from adapters import create_context
from config import ServerConfig
from tools.query_tools import register_query_tools
from tools.type_tools import register_type_tools
from validation.errors import ConfigurationError

SERVER_NAME = "supabase-server"

# .env 로드
load_dotenv()

# 로깅 설정 (stdout은 MCP 통신 채널이므로 stderr 사용)
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)


def create_mcp_server(config: ServerConfig = None, context=None) -> FastMCP:
    """MCP 서버를 생성하고 설정합니다."""
    if context is None:
        config = config or ServerConfig.from_env()
        logger.info(f"Supabase 설정: {config.describe()}")
        try:
            context = create_context(config)
        except Exception as e:
            logger.error(f"Supabase 클라이언트 생성 실패: {str(e)}")
            raise

    # MCP 서버 생성 (stdio 모드)
    mcp = FastMCP(SERVER_NAME)

    # MCP 도구들 등록
    register_query_tools(mcp, context)
    register_type_tools(mcp, context)

    logger.info("모든 MCP 도구가 등록되었습니다")

    return mcp


def main() -> int:
    try:
        logger.info("MCP 서버 실행")
        mcp = create_mcp_server()
        logger.info("Supabase MCP server running on stdio")
        mcp.run(transport="stdio")
    except ConfigurationError as e:
        logger.error(f"설정 오류: {e.message}")
        return 1
    except KeyboardInterrupt:
        logger.info("MCP 서버 종료 (SIGINT)")
    except Exception as e:
        logger.error(f"MCP 서버 실행 중 오류 발생: {str(e)}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
