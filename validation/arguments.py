"""
도구 인자 검증기
- query_table / generate_types 인자 형식 검증
- WHERE 조건 연산자 화이트리스트
- 검증된 인자를 요청 객체로 변환
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Tuple

from .errors import InvalidParamsError

logger = logging.getLogger(__name__)

DEFAULT_SCHEMA = "public"
DEFAULT_SELECT = "*"

QUERY_TABLE_ARGS_ERROR = "Invalid query table arguments"
TYPE_GEN_ARGS_ERROR = "Invalid type generation arguments"


class WhereOperator(Enum):
    """WHERE 조건 비교 연산자"""
    EQ = "eq"
    NEQ = "neq"
    GT = "gt"
    GTE = "gte"
    LT = "lt"
    LTE = "lte"
    LIKE = "like"
    ILIKE = "ilike"
    IS = "is"

    @classmethod
    def values(cls) -> list:
        return [op.value for op in cls]


@dataclass(frozen=True)
class FilterCondition:
    """단일 WHERE 조건 (column, operator, value)"""
    column: str
    operator: WhereOperator
    value: Any


@dataclass(frozen=True)
class QueryTableRequest:
    """query_table 요청"""
    table: str
    schema: str = DEFAULT_SCHEMA
    select: str = DEFAULT_SELECT
    where: Tuple[FilterCondition, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class TypeGenRequest:
    """generate_types 요청"""
    schema: str = DEFAULT_SCHEMA


def _optional_string(args: Dict[str, Any], key: str, default: str, error_message: str) -> str:
    value = args.get(key)
    if value is None:
        return default
    if not isinstance(value, str):
        raise InvalidParamsError(error_message, reason=f"'{key}' must be a string")
    return value


def _parse_condition(index: int, raw: Any) -> FilterCondition:
    """WHERE 조건 하나를 검증하고 FilterCondition으로 변환"""
    if not isinstance(raw, dict):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason=f"where[{index}] must be an object")

    column = raw.get("column")
    if not isinstance(column, str):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason=f"where[{index}].column must be a string")

    operator = raw.get("operator")
    if not isinstance(operator, str):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason=f"where[{index}].operator must be a string")
    try:
        where_operator = WhereOperator(operator)
    except ValueError:
        raise InvalidParamsError(
            QUERY_TABLE_ARGS_ERROR,
            reason=f"where[{index}].operator '{operator}' is not one of {WhereOperator.values()}"
        )

    # value는 null을 포함한 모든 JSON 값 허용, 키 자체는 필수
    if "value" not in raw:
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason=f"where[{index}].value is required")

    return FilterCondition(column=column, operator=where_operator, value=raw["value"])


def validate_query_table_args(args: Any) -> QueryTableRequest:
    """
    query_table 인자 검증

    Args:
        args: 디코딩된 JSON 인자

    Returns:
        QueryTableRequest: 기본값이 채워진 요청 객체

    Raises:
        InvalidParamsError: 형식이 맞지 않을 때 (외부 호출 전에 발생)
    """
    if not isinstance(args, dict):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason="arguments must be an object")

    table = args.get("table")
    if not isinstance(table, str):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason="'table' is required and must be a string")

    schema = _optional_string(args, "schema", DEFAULT_SCHEMA, QUERY_TABLE_ARGS_ERROR)
    select = _optional_string(args, "select", DEFAULT_SELECT, QUERY_TABLE_ARGS_ERROR)

    raw_where = args.get("where")
    if raw_where is None:
        raw_where = []
    if not isinstance(raw_where, list):
        raise InvalidParamsError(QUERY_TABLE_ARGS_ERROR, reason="'where' must be an array")

    where = tuple(_parse_condition(i, raw) for i, raw in enumerate(raw_where))

    logger.debug(f"query_table 인자 검증 통과: {schema}.{table} (조건 {len(where)}개)")
    return QueryTableRequest(table=table, schema=schema, select=select, where=where)


def validate_type_gen_args(args: Optional[Any]) -> TypeGenRequest:
    """generate_types 인자 검증 (인자가 없으면 빈 객체로 취급)"""
    if args is None:
        args = {}
    if not isinstance(args, dict):
        raise InvalidParamsError(TYPE_GEN_ARGS_ERROR, reason="arguments must be an object")

    schema = _optional_string(args, "schema", DEFAULT_SCHEMA, TYPE_GEN_ARGS_ERROR)
    return TypeGenRequest(schema=schema)
