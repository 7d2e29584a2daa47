"""Chat model access: the ChatModel interface and its OpenAI implementation."""
from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

from loguru import logger
from openai import OpenAIError

from .config import Settings
from .errors import AgentCallError
from .transcript import ASSISTANT, Message


class ChatModel(Protocol):
    def complete(
        self,
        messages: Sequence[Message],
        max_tokens: int,
        temperature: float,
        top_p: float,
    ) -> Message: ...


def _openai_client(settings: Settings) -> Any:
    from openai import OpenAI

    kwargs = {"api_key": settings.token}
    if settings.base_url:
        kwargs["base_url"] = settings.base_url
    return OpenAI(**kwargs)


class OpenAIChatModel:
    """Chat completions against the OpenAI API (or a compatible endpoint)."""

    def __init__(self, client: Any, model: str):
        self._client = client
        self.model = model

    def complete(
        self,
        messages: Sequence[Message],
        max_tokens: int,
        temperature: float,
        top_p: float,
    ) -> Message:
        logger.debug("chat completion: model={} messages={}", self.model, len(messages))
        try:
            resp = self._client.chat.completions.create(
                model=self.model,
                messages=[m.to_dict() for m in messages],
                max_tokens=max_tokens,
                temperature=temperature,
                top_p=top_p,
            )
        except OpenAIError as e:
            raise AgentCallError(f"could not create chat completion: {e}") from e

        if not resp.choices:
            raise AgentCallError("could not create chat completion: no choices returned")
        msg = resp.choices[0].message
        return Message(role=msg.role or ASSISTANT, content=msg.content or "")


def configure_model(settings: Settings, client: Optional[Any] = None) -> OpenAIChatModel:
    return OpenAIChatModel(client or _openai_client(settings), settings.model)
