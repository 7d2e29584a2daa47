"""
Pytest configuration and shared fixtures.
"""
import pytest
from pathlib import Path
from typing import List, Optional

from duckgpt.config import Settings
from duckgpt.sql.engine import ColumnDescriptor, ExecutionOutcome
from duckgpt.transcript import ASSISTANT, Message


class FakeEngine:
    """In-memory query engine with canned describe results and outcomes."""

    def __init__(self, tables=None, outcomes=None, describe_error=None):
        self.tables = tables or {}
        self.outcomes = list(outcomes or [])
        self.describe_error = describe_error
        self.described: List[str] = []
        self.executed: List[str] = []

    def describe(self, table_name):
        self.described.append(table_name)
        if self.describe_error is not None:
            raise self.describe_error
        return list(self.tables[table_name])

    def execute(self, sql):
        self.executed.append(sql)
        if self.outcomes:
            return self.outcomes.pop(0)
        return ExecutionOutcome.ok()

    @property
    def calls(self) -> int:
        return len(self.described) + len(self.executed)


class ScriptedModel:
    """Chat model that answers with canned replies and records what it was sent."""

    def __init__(self, replies):
        self.replies = list(replies)
        self.requests: List[List[Message]] = []
        self.params: List[dict] = []

    def complete(self, messages, max_tokens, temperature, top_p):
        self.requests.append(list(messages))
        self.params.append({"max_tokens": max_tokens, "temperature": temperature, "top_p": top_p})
        if not self.replies:
            raise AssertionError("ScriptedModel ran out of replies")
        return Message(role=ASSISTANT, content=self.replies.pop(0))


class ScriptedHuman:
    """Human channel with canned answers; None stands for end of input."""

    def __init__(self, answers=None):
        self.answers = list(answers or [])
        self.prompts: List[str] = []
        self.shown: List[tuple] = []

    def ask(self, prompt) -> Optional[str]:
        self.prompts.append(prompt)
        if not self.answers:
            return None
        return self.answers.pop(0)

    def show(self, text, kind="info"):
        self.shown.append((kind, text))


@pytest.fixture
def project_root():
    """Return project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def papaya_columns():
    return [
        ColumnDescriptor(name="id", type="BIGINT"),
        ColumnDescriptor(name="region", type="VARCHAR"),
        ColumnDescriptor(name="planted_year", type="BIGINT"),
    ]


@pytest.fixture
def fake_engine(papaya_columns):
    return FakeEngine(tables={"papaya_trees.json": papaya_columns})


@pytest.fixture
def settings():
    return Settings(token="test-token")


@pytest.fixture
def table_dir(tmp_path):
    """Directory with a couple of table files and some noise."""
    (tmp_path / "papaya_trees.json").write_text('[{"id": 1, "region": "north"}]')
    (tmp_path / "papayas.csv").write_text("id,papaya_tree_id,size\n1,1,12.5\n")
    (tmp_path / "numbers.json").write_text('[{"i": 1}]')
    (tmp_path / "notes.txt").write_text("not a table")
    return tmp_path


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for var in ("GPTSQL_TOKEN", "GPTSQL_MODEL", "GPTSQL_BASE_URL", "GPTSQL_DEBUG", "GPTSQL_DUCKDB"):
        monkeypatch.delenv(var, raising=False)


# Markers
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: needs a real duckdb binary on PATH")
