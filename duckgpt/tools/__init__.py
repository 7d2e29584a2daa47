"""
Tools module for DuckGPT (engine boundary).
"""

from .executor import QueryTool, SchemaTool, serialize_columns

__all__ = [
    "QueryTool",
    "SchemaTool",
    "serialize_columns",
]
