"""
MCP tools for Supabase operations.
"""

from .query_tools import register_query_tools
from .type_tools import register_type_tools

__all__ = [
    'register_query_tools',
    'register_type_tools'
]
