"""Stand-in model clients with deterministic behaviour."""

import asyncio
from typing import List


class CannedClient:
    """Returns fixed text and records every prompt it was given."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.prompts: List[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.text


class HangingClient:
    """Never answers; notes whether it was cancelled."""

    def __init__(self) -> None:
        self.started = False
        self.cancelled = False

    async def generate(self, prompt: str) -> str:
        self.started = True
        try:
            await asyncio.Event().wait()
        except asyncio.CancelledError:
            self.cancelled = True
            raise
        return ""


class FailingClient:
    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    async def generate(self, prompt: str) -> str:
        self.calls += 1
        raise self.exc
