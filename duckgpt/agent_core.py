"""
Non-interactive conversation core for DuckGPT.

This module:
- Drives the turn loop between the agent, the query engine and the human
- Contains NO input() or print(); the human is reached through a HumanChannel
- Routes ALL engine access through the tool boundary (SchemaTool / QueryTool)

One turn = one chat completion plus the dispatch of the command it contains.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Sequence

from loguru import logger

from .commands import Query, Schema, parse_command, trim_command
from .config import DEFAULT_MESSAGE_LIMIT, Settings
from .errors import DuckGPTError, ProtocolViolation, Status, TurnLimitExceeded
from .llm import ChatModel
from .prompts import (
    ACCEPT_WORD,
    CHECKPOINT_PROMPT,
    SYSTEM_PROMPT,
    correction_message,
    question_message,
    retry_message,
    schema_message,
)
from .sql.engine import QueryEngine
from .tools.executor import QueryTool, SchemaTool
from .transcript import ASSISTANT, SYSTEM, USER, Transcript

# Kinds of text shown to the human
INFO = "info"
DEBUG_USER = "debug_user"
DEBUG_ASSISTANT = "debug_assistant"


class HumanChannel(Protocol):
    def ask(self, prompt: str) -> Optional[str]:
        """Return one line typed by the human, or None at end of input."""
        ...

    def show(self, text: str, kind: str = INFO) -> None: ...


@dataclass(frozen=True)
class SessionResult:
    status: Status
    turns: int
    last_sql: Optional[str] = None


class Conversation:
    def __init__(
        self,
        model: ChatModel,
        engine: QueryEngine,
        human: HumanChannel,
        message_limit: int = DEFAULT_MESSAGE_LIMIT,
        debug: bool = False,
        max_tokens: int = 512,
        temperature: float = 0.7,
        top_p: float = 1.0,
    ):
        self.model = model
        self.human = human
        self.schema_tool = SchemaTool(engine)
        self.query_tool = QueryTool(engine)
        self.message_limit = message_limit
        self.debug = debug
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.top_p = top_p

        self.transcript = Transcript()
        self.turns = 0
        # Set once the session has ended, however it ended.
        self.status: Optional[Status] = None

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        model: ChatModel,
        engine: QueryEngine,
        human: HumanChannel,
    ) -> "Conversation":
        return cls(
            model,
            engine,
            human,
            message_limit=settings.message_limit,
            debug=settings.debug,
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
            top_p=settings.top_p,
        )

    def start(self, question: str, tables: Sequence[str]) -> None:
        self.transcript.append(SYSTEM, SYSTEM_PROMPT)
        self.transcript.append(USER, question_message(question, tables))

    def run(self, question: str, tables: Sequence[str]) -> SessionResult:
        self.start(question, tables)
        try:
            while self.turns < self.message_limit:
                self.turns += 1
                logger.debug("turn {}/{}", self.turns, self.message_limit)
                result = self.step()
                if result is not None:
                    self.status = result.status
                    return result
            raise TurnLimitExceeded(self.message_limit)
        except DuckGPTError as e:
            self.status = e.status
            raise

    def step(self) -> Optional[SessionResult]:
        """Run one turn. Returns a result once the human accepts a query."""
        if self.debug:
            self.human.show(f"DEBUG User Msg: {self.transcript.latest().content}", DEBUG_USER)

        reply = self.model.complete(
            self.transcript.all(),
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            top_p=self.top_p,
        )
        self.transcript.append(ASSISTANT, reply.content)

        body = trim_command(reply.content)
        if self.debug:
            self.human.show(f"DEBUG Assistant Msg: {body}", DEBUG_ASSISTANT)

        command = parse_command(body)

        if isinstance(command, Schema):
            columns = self.schema_tool.describe_as_text(command.table_name)
            self.transcript.append(USER, schema_message(columns))
            return None

        if isinstance(command, Query):
            self.human.show(f"Running query: {body}")
            outcome = self.query_tool.execute(command.sql)
            if not outcome.success:
                self.transcript.append(USER, retry_message(outcome.stderr))
                return None
            return self._checkpoint(command.sql)

        raise ProtocolViolation(command.raw_text)

    def _checkpoint(self, sql: str) -> Optional[SessionResult]:
        while True:
            line = self.human.ask(CHECKPOINT_PROMPT)
            if line is None:
                return self._accept(sql)
            line = line.strip()
            if line == ACCEPT_WORD:
                return self._accept(sql)
            if line:
                break

        self.transcript.append(USER, correction_message(line))
        return None

    def _accept(self, sql: str) -> SessionResult:
        return SessionResult(status=Status.ACCEPTED, turns=self.turns, last_sql=sql)
