"""
Type generation MCP tool.
"""

import logging
from typing import Annotated, Optional

from pydantic import Field

from validation.arguments import validate_type_gen_args

logger = logging.getLogger(__name__)


def register_type_tools(mcp, context):
    """타입 생성 도구를 MCP 서버에 등록"""

    @mcp.tool(
        description="Generate TypeScript types for your Supabase database schema",
        structured_output=False,
    )
    def generate_types(
        schema: Annotated[Optional[str], Field(description="Database schema (optional, defaults to public)")] = "public",
    ) -> str:
        request = validate_type_gen_args({"schema": schema})
        logger.debug(f"generate_types 요청: schema={request.schema}")
        return context.cli.generate_types(request)

    return generate_types
