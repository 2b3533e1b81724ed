"""
Table query MCP tool.
"""

import json
import logging
from typing import Annotated, Any, List, Literal, Optional

from pydantic import BaseModel, Field

from adapters.database import MAX_ROWS
from validation.arguments import validate_query_table_args
from validation.errors import ExecutionError, ToolError

logger = logging.getLogger(__name__)


class WhereCondition(BaseModel):
    """WHERE 조건 (도구 스키마 노출용)"""
    column: str = Field(description="Column name")
    operator: Literal["eq", "neq", "gt", "gte", "lt", "lte", "like", "ilike", "is"] = Field(
        description="Comparison operator"
    )
    value: Any = Field(description="Value to compare against")


def _error_message(error: Exception) -> str:
    """postgrest APIError는 message 속성을 우선 사용"""
    message = getattr(error, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(error)


def format_rows(rows) -> str:
    return json.dumps(rows, indent=2, ensure_ascii=False, default=str)


def register_query_tools(mcp, context):
    """조회 관련 도구들을 MCP 서버에 등록"""

    @mcp.tool(
        description="Query a specific table with schema selection and where clause support "
                    f"(returns at most {MAX_ROWS} rows)",
        structured_output=False,
    )
    def query_table(
        table: Annotated[str, Field(description="Name of the table to query")],
        schema: Annotated[Optional[str], Field(description="Database schema (optional, defaults to public)")] = "public",
        select: Annotated[Optional[str], Field(
            description="Comma-separated list of columns to select (optional, defaults to *)"
        )] = "*",
        where: Annotated[Optional[List[WhereCondition]], Field(
            description="Array of where conditions (optional)"
        )] = None,
    ) -> str:
        # 1. 인자 검증
        request = validate_query_table_args({
            "schema": schema,
            "table": table,
            "select": select,
            "where": [condition.model_dump() for condition in where] if where is not None else None,
        })

        # 2. 조회
        try:
            rows = context.database.query_table(request)
        except ToolError:
            raise
        except Exception as e:
            logger.error(f"테이블 조회 실패 ({request.schema}.{request.table}): {_error_message(e)}")
            raise ExecutionError(_error_message(e))

        return format_rows(rows)

    return query_table
