from __future__ import annotations

"""
Model clients.

Anything with `async generate(prompt) -> str` can produce workout plans.
`get_model_client` builds the configured backend once per process; tests
override it through FastAPI's dependency overrides.
"""

import logging
from functools import lru_cache
from typing import Optional, Protocol

from agents import Agent, Runner, RunResult, set_default_openai_key

from app.agents.trainer import TRAINER_INSTRUCTIONS, trainer_agent
from app.config import get_settings
from app.llm.openai_client import OpenAIModelClient

logger = logging.getLogger(__name__)


class ModelClient(Protocol):
    async def generate(self, prompt: str) -> str:
        ...


class AgentsModelClient:
    """Runs the trainer agent through the Agents SDK."""

    def __init__(self, agent: Agent, api_key: Optional[str], model: Optional[str] = None) -> None:
        self.api_key = api_key
        self.agent = agent.clone(model=model) if model else agent
        if api_key:
            set_default_openai_key(api_key)

    def available(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise RuntimeError("OPENAI_API_KEY not set")
        result: RunResult = await Runner.run(self.agent, input=prompt)
        return str(result.final_output or "")


@lru_cache(maxsize=1)
def get_model_client() -> ModelClient:
    settings = get_settings()
    if settings.llm_backend == "openai":
        return OpenAIModelClient(
            api_key=settings.openai_api_key,
            system=TRAINER_INSTRUCTIONS,
            model=settings.chat_model,
            temperature=settings.temperature,
        )
    if settings.llm_backend != "agents":
        logger.warning("Unknown WORKOUT_LLM_BACKEND %r, using agents", settings.llm_backend)
    return AgentsModelClient(trainer_agent, api_key=settings.openai_api_key, model=settings.chat_model)
