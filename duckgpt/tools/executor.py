"""
Tool executors for DuckGPT.

This is the engine boundary: every SCHEMA and QUERY command the agent sends
reaches the query engine through here. Table names and SQL are passed on
exactly as the agent wrote them.
"""
from __future__ import annotations

import json
from typing import List, Sequence

from loguru import logger

from duckgpt.sql.engine import ColumnDescriptor, ExecutionOutcome, QueryEngine


def serialize_columns(columns: Sequence[ColumnDescriptor]) -> str:
    """Compact JSON array of {column_name, column_type}, in engine order."""
    payload = [{"column_name": c.name, "column_type": c.type} for c in columns]
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class SchemaTool:
    """Answers SCHEMA commands. Engine failures propagate (fatal for the session)."""

    def __init__(self, engine: QueryEngine):
        self.engine = engine

    def describe(self, table_name: str) -> List[ColumnDescriptor]:
        columns = list(self.engine.describe(table_name))
        logger.debug("described {}: {} column(s)", table_name, len(columns))
        return columns

    def describe_as_text(self, table_name: str) -> str:
        return serialize_columns(self.describe(table_name))


class QueryTool:
    """Answers QUERY commands. Failures come back as outcomes, never raised."""

    def __init__(self, engine: QueryEngine):
        self.engine = engine

    def execute(self, sql: str) -> ExecutionOutcome:
        outcome = self.engine.execute(sql)
        if not outcome.success:
            logger.debug("query failed: {}", outcome.stderr.strip())
        return outcome
