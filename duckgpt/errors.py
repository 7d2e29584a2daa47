"""Errors that end a DuckGPT session."""
from __future__ import annotations

from enum import Enum


class Status(str, Enum):
    ACCEPTED = "accepted"
    LIMIT_EXCEEDED = "limit_exceeded"
    FATAL = "fatal"


class DuckGPTError(Exception):
    """Base class for every fatal condition. Carries the process exit code."""

    exit_code = 1
    status = Status.FATAL


class ConfigurationError(DuckGPTError):
    pass


class AgentCallError(DuckGPTError):
    pass


class EngineError(DuckGPTError):
    pass


class ProtocolViolation(DuckGPTError):
    def __init__(self, text: str):
        super().__init__(f"invalid assistant command: {text}")
        self.text = text


class TurnLimitExceeded(DuckGPTError):
    status = Status.LIMIT_EXCEEDED

    def __init__(self, limit: int):
        super().__init__("message limit reached")
        self.limit = limit


class EmptyTranscript(DuckGPTError):
    pass
