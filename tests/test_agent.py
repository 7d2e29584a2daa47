"""
Tests for the interactive wiring (question prompt, terminal channel).
"""
import pytest

from conftest import FakeEngine, ScriptedHuman, ScriptedModel
from duckgpt.agent import TerminalChannel, read_question, run_agent
from duckgpt.agent_core import DEBUG_USER
from duckgpt.errors import Status
from duckgpt.prompts import QUESTION_PROMPT


class TestReadQuestion:
    """Test reading the opening question."""

    def test_skips_blank_lines(self):
        human = ScriptedHuman(["", "  ", " total papayas? "])
        assert read_question(human) == "total papayas?"
        assert human.prompts == [QUESTION_PROMPT] * 3

    def test_end_of_input(self):
        assert read_question(ScriptedHuman([None])) is None


class TestRunAgent:
    """Test one full session from the question on."""

    def test_runs_session_with_discovered_tables(self, settings, table_dir, fake_engine):
        model = ScriptedModel(["QUERY SELECT COUNT(*) FROM papayas.csv AS p"])
        human = ScriptedHuman(["how many papayas?", "exit"])

        result = run_agent(settings, directory=table_dir, model=model, engine=fake_engine, channel=human)

        assert result.status == Status.ACCEPTED
        seed = model.requests[0][1].content
        assert "User question: how many papayas?" in seed
        assert "Available tables: numbers.json, papaya_trees.json, papayas.csv" in seed

    def test_no_question_no_agent_call(self, settings, table_dir):
        model = ScriptedModel([])
        engine = FakeEngine()
        result = run_agent(settings, directory=table_dir, model=model, engine=engine,
                           channel=ScriptedHuman([None]))
        assert result is None
        assert model.requests == []
        assert engine.calls == 0

    def test_question_is_asked_before_tables_are_listed(self, settings, monkeypatch):
        def no_listing(directory=None):
            raise AssertionError("tables listed before a question was read")
        monkeypatch.setattr("duckgpt.agent.discover_tables", no_listing)

        assert run_agent(settings, model=ScriptedModel([]), engine=FakeEngine(),
                         channel=ScriptedHuman([None])) is None


class TestTerminalChannel:
    """Test terminal input and output."""

    def test_ask_reads_a_line(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda: "exit")
        assert TerminalChannel().ask("Is this satisfactory?") == "exit"
        assert "Is this satisfactory?" in capsys.readouterr().out

    def test_ask_end_of_input(self, monkeypatch):
        def raise_eof():
            raise EOFError
        monkeypatch.setattr("builtins.input", raise_eof)
        assert TerminalChannel().ask("prompt") is None

    def test_show(self, capsys):
        TerminalChannel().show("DEBUG User Msg: hi", DEBUG_USER)
        assert "DEBUG User Msg: hi" in capsys.readouterr().out
