"""
Command grammar for agent replies.

The agent may only answer with one of two commands:
- SCHEMA <table>   ask for the columns of a table
- QUERY <sql>      run a query and show the result to the user
Anything else parses to Invalid.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

SCHEMA_PREFIX = "SCHEMA "
QUERY_PREFIX = "QUERY "
TRAILING_PUNCTUATION = ".;"


@dataclass(frozen=True)
class Schema:
    table_name: str


@dataclass(frozen=True)
class Query:
    sql: str


@dataclass(frozen=True)
class Invalid:
    raw_text: str


Command = Union[Schema, Query, Invalid]


def trim_command(text: str) -> str:
    return (text or "").rstrip(TRAILING_PUNCTUATION)


def parse_command(text: str) -> Command:
    body = trim_command(text)

    if body.startswith(SCHEMA_PREFIX):
        # Only the first line names the table.
        body = body.split("\n", 1)[0]
        return Schema(table_name=body[len(SCHEMA_PREFIX):])

    if body.startswith(QUERY_PREFIX):
        return Query(sql=body[len(QUERY_PREFIX):])

    return Invalid(raw_text=body)
