from __future__ import annotations

"""
Thin OpenAI client wrapper.

Usage:
- Set OPENAI_API_KEY in env.
- Select with WORKOUT_LLM_BACKEND=openai; model via OPENAI_CHAT_MODEL (default: gpt-4o-mini).

Returns the raw completion text; JSON recovery happens in
`app.agents.response_parser`.
"""

from typing import Optional

from openai import AsyncOpenAI


class OpenAIModelClient:
    def __init__(
        self,
        api_key: Optional[str],
        system: str,
        model: str = "gpt-4o-mini",
        temperature: float = 0.7,
    ) -> None:
        self.api_key = api_key
        self.system = system
        self.chat_model = model
        self.temperature = temperature
        self.client = AsyncOpenAI(api_key=api_key) if api_key else None

    def available(self) -> bool:
        return self.client is not None

    async def generate(self, prompt: str) -> str:
        """Send the prompt with the trainer system message and return the reply text."""
        if not self.client:
            raise RuntimeError("OPENAI_API_KEY not set")
        resp = await self.client.chat.completions.create(
            model=self.chat_model,
            messages=[
                {"role": "system", "content": self.system},
                {"role": "user", "content": prompt},
            ],
            temperature=self.temperature,
        )
        return resp.choices[0].message.content or ""
