"""
MCP 도구 호출 예외 정의
- 파라미터 검증 실패
- 지원하지 않는 연산자
- Supabase CLI 미설치
- 하위 실행(DB/서브프로세스) 실패

ToolError는 FastMCP의 ToolError를 상속하므로 핸들러에서 그대로 raise하면
FastMCP가 isError=True 결과로 변환합니다.
"""

from mcp.server.fastmcp.exceptions import ToolError as FastMCPToolError


class ToolError(FastMCPToolError):
    """도구 호출 실패 예외 (베이스)"""

    default_code = "TOOL_ERROR"

    def __init__(self, message: str, error_code: str = None, **kwargs):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.default_code
        self.details = kwargs

    def __str__(self):
        text = self.message
        reason = self.details.get("reason")
        if reason:
            text = f"{text}: {reason}"
        if self.error_code:
            return f"[{self.error_code}] {text}"
        return text


class InvalidParamsError(ToolError):
    """도구 인자 형식 오류"""

    default_code = "INVALID_PARAMS"


class UnsupportedOperatorError(InvalidParamsError):
    """WHERE 조건 연산자 오류 (검증 이후에는 도달하지 않아야 함)"""

    default_code = "UNSUPPORTED_OPERATOR"


class CliNotFoundError(ToolError):
    """Supabase CLI를 찾을 수 없음"""

    default_code = "CLI_NOT_FOUND"


class ExecutionError(ToolError):
    """DB 쿼리 또는 서브프로세스 실행 실패"""

    default_code = "EXECUTION_FAILED"


class ConfigurationError(Exception):
    """서버 시작 설정 오류"""

    def __init__(self, message: str, missing: list = None):
        super().__init__(message)
        self.message = message
        self.missing = missing or []
