"""Ordered log of the messages exchanged with the agent."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import EmptyTranscript

SYSTEM = "system"
USER = "user"
ASSISTANT = "assistant"
ROLES = (SYSTEM, USER, ASSISTANT)


@dataclass(frozen=True)
class Message:
    role: str
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class Transcript:
    """Append-only message log sent to the agent on every turn."""

    def __init__(self) -> None:
        self._messages: List[Message] = []

    def append(self, role: str, content: str) -> Message:
        if role not in ROLES:
            raise ValueError(f"Unknown role: {role!r}")
        message = Message(role=role, content=content)
        self._messages.append(message)
        return message

    def latest(self) -> Message:
        if not self._messages:
            raise EmptyTranscript("transcript has no messages yet")
        return self._messages[-1]

    def all(self) -> Tuple[Message, ...]:
        return tuple(self._messages)

    def as_dicts(self) -> List[Dict[str, str]]:
        return [m.to_dict() for m in self._messages]

    def __len__(self) -> int:
        return len(self._messages)

    def __iter__(self):
        return iter(self._messages)
