from __future__ import annotations

"""
Process-wide settings.

Values come from the environment (optionally a `.env` file) and are read
once; restart the server to pick up changes.

- OPENAI_API_KEY: key for the model backend.
- OPENAI_CHAT_MODEL: model name (default: gpt-4o-mini).
- WORKOUT_LLM_BACKEND: "agents" (Agents SDK) or "openai" (chat completions).
- WORKOUT_API_TIMEOUT_SECONDS: budget for one model call (default: 50).
- CORS_ORIGIN / PORT / LOG_LEVEL: server glue.
"""

import os
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import BaseModel


class Settings(BaseModel):
    openai_api_key: Optional[str] = None
    chat_model: str = "gpt-4o-mini"
    llm_backend: str = "agents"
    api_timeout_seconds: float = 50.0
    temperature: float = 0.7
    cors_origin: str = "http://localhost:3000"
    port: int = 5000
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    return Settings(
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        chat_model=os.getenv("OPENAI_CHAT_MODEL", "gpt-4o-mini"),
        llm_backend=os.getenv("WORKOUT_LLM_BACKEND", "agents").lower(),
        api_timeout_seconds=float(os.getenv("WORKOUT_API_TIMEOUT_SECONDS", "50")),
        temperature=float(os.getenv("WORKOUT_TEMPERATURE", "0.7")),
        cors_origin=os.getenv("CORS_ORIGIN", "http://localhost:3000"),
        port=int(os.getenv("PORT", "5000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
