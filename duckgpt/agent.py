from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

import click

from .agent_core import DEBUG_ASSISTANT, DEBUG_USER, INFO, Conversation, HumanChannel, SessionResult
from .config import Settings
from .discovery import discover_tables
from .llm import ChatModel, configure_model
from .prompts import QUESTION_PROMPT
from .sql.engine import DuckDBEngine, QueryEngine


class TerminalChannel:
    """Talks to the human on the terminal: colored prompts, line input."""

    COLORS = {
        INFO: "green",
        DEBUG_USER: "yellow",
        DEBUG_ASSISTANT: "cyan",
    }

    def ask(self, prompt: str) -> Optional[str]:
        click.secho(prompt, fg="green")
        try:
            return input()
        except EOFError:
            return None

    def show(self, text: str, kind: str = INFO) -> None:
        click.secho(text, fg=self.COLORS.get(kind))


def read_question(channel: HumanChannel) -> Optional[str]:
    while True:
        line = channel.ask(QUESTION_PROMPT)
        if line is None:
            return None
        line = line.strip()
        if line:
            return line


def run_agent(
    settings: Settings,
    directory: Union[str, Path, None] = None,
    model: Optional[ChatModel] = None,
    engine: Optional[QueryEngine] = None,
    channel: Optional[HumanChannel] = None,
) -> Optional[SessionResult]:
    """Ask for a question and run one session. Returns None if input ends first."""
    channel = channel or TerminalChannel()

    question = read_question(channel)
    if question is None:
        return None

    tables = discover_tables(directory)
    conversation = Conversation.from_settings(
        settings,
        model=model or configure_model(settings),
        engine=engine or DuckDBEngine(settings.duckdb_command),
        human=channel,
    )
    return conversation.run(question, tables)
