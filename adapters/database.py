"""
Supabase (PostgREST) database adapter for MCP server.
"""

import logging
from typing import Any, Dict, Iterable, List

from supabase import Client, ClientOptions, create_client

from validation.arguments import FilterCondition, QueryTableRequest, WhereOperator
from validation.errors import UnsupportedOperatorError

logger = logging.getLogger(__name__)

# 요청과 무관하게 고정된 최대 반환 행 수
MAX_ROWS = 25

# 연산자 -> postgrest 필터 메서드
FILTER_METHODS = {
    WhereOperator.EQ: "eq",
    WhereOperator.NEQ: "neq",
    WhereOperator.GT: "gt",
    WhereOperator.GTE: "gte",
    WhereOperator.LT: "lt",
    WhereOperator.LTE: "lte",
    WhereOperator.LIKE: "like",
    WhereOperator.ILIKE: "ilike",
    WhereOperator.IS: "is_",
}


def apply_where_condition(query, condition: FilterCondition):
    """WHERE 조건 하나를 쿼리 빌더에 적용"""
    method_name = FILTER_METHODS.get(condition.operator)
    if method_name is None:
        operator = getattr(condition.operator, "value", condition.operator)
        raise UnsupportedOperatorError(f"Unsupported operator: {operator}")
    return getattr(query, method_name)(condition.column, condition.value)


def apply_where_conditions(query, conditions: Iterable[FilterCondition]):
    """조건들을 순서대로 적용 (모두 AND)"""
    for condition in conditions:
        query = apply_where_condition(query, condition)
    return query


def create_supabase_client(url: str, key: str) -> Client:
    """서비스 키용 클라이언트 생성 (세션 저장/토큰 갱신 없음)"""
    return create_client(
        url,
        key,
        options=ClientOptions(auto_refresh_token=False, persist_session=False),
    )


class SupabaseAdapter:
    """Supabase 어댑터 - 프로세스 전체에서 하나의 클라이언트를 공유"""

    def __init__(self, client: Client):
        self.client = client

    @classmethod
    def from_config(cls, config) -> "SupabaseAdapter":
        client = create_supabase_client(config.supabase_url, config.supabase_key)
        logger.info("Supabase 클라이언트 생성 완료")
        return cls(client)

    def build_query(self, request: QueryTableRequest):
        """select 쿼리 구성 (항상 MAX_ROWS 제한)"""
        query = (
            self.client.schema(request.schema)
            .from_(request.table)
            .select(request.select)
            .limit(MAX_ROWS)
        )
        return apply_where_conditions(query, request.where)

    def query_table(self, request: QueryTableRequest) -> List[Dict[str, Any]]:
        """
        테이블 조회

        Returns:
            List[Dict]: 최대 MAX_ROWS개의 행

        Raises:
            postgrest.exceptions.APIError: DB 측 오류 (권한, 존재하지 않는 테이블/컬럼 등)
        """
        query = self.build_query(request)
        logger.info(f"테이블 조회: {request.schema}.{request.table} "
                    f"(select={request.select}, 조건 {len(request.where)}개)")
        response = query.execute()
        rows = response.data or []
        logger.debug(f"조회 결과 {len(rows)}행")
        return rows
