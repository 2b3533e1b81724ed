"""
Tool argument validation and error types.
"""

from .arguments import (
    FilterCondition,
    QueryTableRequest,
    TypeGenRequest,
    WhereOperator,
    validate_query_table_args,
    validate_type_gen_args,
)
from .errors import (
    CliNotFoundError,
    ConfigurationError,
    ExecutionError,
    InvalidParamsError,
    ToolError,
    UnsupportedOperatorError,
)

__all__ = [
    'WhereOperator',
    'FilterCondition',
    'QueryTableRequest',
    'TypeGenRequest',
    'validate_query_table_args',
    'validate_type_gen_args',
    'ToolError',
    'InvalidParamsError',
    'UnsupportedOperatorError',
    'CliNotFoundError',
    'ExecutionError',
    'ConfigurationError',
]
