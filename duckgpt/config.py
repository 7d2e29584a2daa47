"""
Settings for DuckGPT.

Values come from the environment (and a .env file in the working directory):
- GPTSQL_TOKEN     required API token
- GPTSQL_MODEL     chat model name
- GPTSQL_BASE_URL  OpenAI-compatible endpoint
- GPTSQL_DEBUG     "1" echoes every message
- GPTSQL_DUCKDB    duckdb command line
"""
from __future__ import annotations

import os
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from dotenv import load_dotenv

from .errors import ConfigurationError

TOKEN_ENV = "GPTSQL_TOKEN"
DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_MESSAGE_LIMIT = 16


@dataclass(frozen=True)
class Settings:
    token: str
    model: str = DEFAULT_MODEL
    base_url: Optional[str] = None
    max_tokens: int = 512
    temperature: float = 0.7
    top_p: float = 1.0
    message_limit: int = DEFAULT_MESSAGE_LIMIT
    debug: bool = False
    duckdb_command: Tuple[str, ...] = ("duckdb",)


def load_settings(
    debug: Optional[bool] = None,
    message_limit: Optional[int] = None,
    env_file: Optional[Path] = None,
) -> Settings:
    """Build settings from the environment (and .env). CLI values win over env."""
    load_dotenv(env_file or Path.cwd() / ".env")

    token = (os.getenv(TOKEN_ENV) or "").strip()
    if not token:
        raise ConfigurationError(
            f"please provide your OpenAI platform token in the {TOKEN_ENV} environment variable"
        )

    limit = DEFAULT_MESSAGE_LIMIT if message_limit is None else message_limit
    if limit < 1:
        raise ConfigurationError(f"message limit must be a positive integer, got {limit}")

    debug = bool(debug) or os.getenv("GPTSQL_DEBUG") == "1"

    duckdb_command = tuple(shlex.split(os.getenv("GPTSQL_DUCKDB") or "duckdb"))
    if not duckdb_command:
        raise ConfigurationError("GPTSQL_DUCKDB must name a duckdb executable")

    return Settings(
        token=token,
        model=os.getenv("GPTSQL_MODEL") or DEFAULT_MODEL,
        base_url=os.getenv("GPTSQL_BASE_URL") or None,
        message_limit=limit,
        debug=debug,
        duckdb_command=duckdb_command,
    )
