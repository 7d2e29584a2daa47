# DuckGPT - natural language questions over local JSON/CSV files
"""
DuckGPT - ask questions, let GPT do the SQL.
"""

__version__ = "0.1.0"

from .agent import run_agent
from .agent_core import Conversation, SessionResult
from .commands import Invalid, Query, Schema, parse_command
from .sql.engine import ColumnDescriptor, DuckDBEngine, ExecutionOutcome
from .tools.executor import QueryTool, SchemaTool

__all__ = [
    "__version__",
    "run_agent",
    "Conversation",
    "SessionResult",
    "Invalid",
    "Query",
    "Schema",
    "parse_command",
    "ColumnDescriptor",
    "DuckDBEngine",
    "ExecutionOutcome",
    "QueryTool",
    "SchemaTool",
]
