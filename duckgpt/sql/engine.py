"""
Query engine boundary.

The engine answers two kinds of requests:
- describe: column names/types of `SELECT * FROM <table>`
- execute: run SQL, print the result table for the human

DuckDBEngine drives the `duckdb` command line. Anything with the same two
methods can stand in for it (tests use an in-memory fake).
"""
from __future__ import annotations

import json
import subprocess
import sys
from dataclasses import dataclass
from typing import IO, List, Optional, Protocol, Sequence

from loguru import logger

from ..errors import EngineError


@dataclass(frozen=True)
class ColumnDescriptor:
    name: str
    type: str


@dataclass(frozen=True)
class ExecutionOutcome:
    success: bool
    stderr: str = ""

    @classmethod
    def ok(cls) -> "ExecutionOutcome":
        return cls(success=True)

    @classmethod
    def failure(cls, stderr: str) -> "ExecutionOutcome":
        return cls(success=False, stderr=stderr)


class QueryEngine(Protocol):
    def describe(self, table_name: str) -> List[ColumnDescriptor]: ...

    def execute(self, sql: str) -> ExecutionOutcome: ...


def parse_describe_output(raw: str) -> List[ColumnDescriptor]:
    """Parse `duckdb -json` DESCRIBE output, keeping column order."""
    try:
        rows = json.loads(raw)
    except json.JSONDecodeError as e:
        raise EngineError(f"could not unmarshal duckdb describe output: {e}") from e
    if not isinstance(rows, list):
        raise EngineError("could not unmarshal duckdb describe output: expected a JSON array")

    columns: List[ColumnDescriptor] = []
    for row in rows:
        if not isinstance(row, dict):
            raise EngineError("could not unmarshal duckdb describe output: expected objects")
        name = row.get("column_name")
        type_ = row.get("column_type")
        if not isinstance(name, str) or not isinstance(type_, str):
            raise EngineError(
                "could not unmarshal duckdb describe output: missing column_name/column_type"
            )
        columns.append(ColumnDescriptor(name=name, type=type_))
    return columns


class DuckDBEngine:
    """Runs one `duckdb` process per request."""

    def __init__(
        self,
        command: Sequence[str] = ("duckdb",),
        mirror: Optional[IO[str]] = None,
        describe_mirror: Optional[IO[str]] = None,
    ):
        self.command = tuple(command)
        # Where engine diagnostics are shown to the human.
        self._mirror = mirror
        self._describe_mirror = describe_mirror

    @property
    def mirror(self) -> IO[str]:
        return self._mirror or sys.stdout

    @property
    def describe_mirror(self) -> IO[str]:
        return self._describe_mirror or sys.stderr

    def describe(self, table_name: str) -> List[ColumnDescriptor]:
        args = [*self.command, "-json", "-c", f"DESCRIBE SELECT * FROM {table_name}"]
        logger.debug("describe: {}", args)
        try:
            proc = subprocess.run(
                args, capture_output=True, text=True, encoding="utf-8", errors="replace"
            )
        except OSError as e:
            raise EngineError(f"could not run duckdb to describe table: {e}") from e

        if proc.stderr:
            self._show(proc.stderr, self.describe_mirror)
        if proc.returncode != 0:
            raise EngineError(
                f"could not run duckdb to describe table: exit status {proc.returncode}"
            )
        return parse_describe_output(proc.stdout)

    def execute(self, sql: str) -> ExecutionOutcome:
        args = [*self.command, "-c", sql]
        logger.debug("execute: {}", args)
        captured: List[str] = []
        try:
            # stdout goes straight to the terminal; stderr is captured and mirrored.
            with subprocess.Popen(
                args, stderr=subprocess.PIPE, text=True, encoding="utf-8", errors="replace"
            ) as proc:
                for line in proc.stderr:
                    captured.append(line)
                    self._show(line)
                returncode = proc.wait()
        except OSError as e:
            message = f"could not run duckdb: {e}\n"
            self._show(message)
            return ExecutionOutcome.failure(message)

        if returncode != 0:
            logger.debug("query failed with exit status {}", returncode)
            return ExecutionOutcome.failure("".join(captured))
        return ExecutionOutcome.ok()

    def _show(self, text: str, stream: Optional[IO[str]] = None) -> None:
        stream = stream or self.mirror
        stream.write(text)
        stream.flush()
