"""Query engine for DuckGPT."""
from .engine import (
    ColumnDescriptor,
    DuckDBEngine,
    ExecutionOutcome,
    QueryEngine,
    parse_describe_output,
)

__all__ = [
    "ColumnDescriptor",
    "DuckDBEngine",
    "ExecutionOutcome",
    "QueryEngine",
    "parse_describe_output",
]
