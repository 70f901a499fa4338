from __future__ import annotations

"""
Workout Generator
-----------------
Runs one request end to end: presence checks -> prompt -> model call raced
against a timeout -> response recovery. Every failure leaves here as a
`WorkoutGenerationError` subclass so the HTTP layer only has to render it.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from app.agents.response_parser import parse_workout_response
from app.agents.trainer import build_prompt
from app.config import get_settings
from app.errors import (
    GenerationTimeoutError,
    InternalGenerationError,
    ProfileValidationError,
    ResponseFormatError,
    WorkoutGenerationError,
)
from app.llm.client import ModelClient
from app.models.schemas import TrainingProfile

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "age", "position", "level", "improvement")


def validate_profile(payload: Any) -> TrainingProfile:
    """Check required fields are present and truthy, then build the profile.

    Only presence is checked here. A malformed day entry surfaces as a
    pydantic error, which the caller treats as an internal failure.
    """
    if not isinstance(payload, dict):
        raise ProfileValidationError()
    if any(not payload.get(field) for field in REQUIRED_FIELDS):
        raise ProfileValidationError()
    if not payload.get("availableDays"):
        raise ProfileValidationError()
    return TrainingProfile.model_validate(payload)


async def call_with_timeout(client: ModelClient, prompt: str, timeout_seconds: float) -> str:
    """Race the model call against a timer.

    On timeout the pending call is cancelled rather than left running.
    """
    try:
        return await asyncio.wait_for(client.generate(prompt), timeout=timeout_seconds)
    except asyncio.TimeoutError as e:
        logger.warning("Model call timed out after %.1fs", timeout_seconds)
        raise GenerationTimeoutError() from e


async def generate_workout(
    payload: Any,
    client: ModelClient,
    timeout_seconds: Optional[float] = None,
) -> Dict[str, Any]:
    """Generate a workout plan for a raw request payload.

    Returns the parsed plan unmodified. Raises:
        ProfileValidationError: required fields missing (model not called)
        GenerationTimeoutError: model exceeded `timeout_seconds` (default: configured API timeout)
        ResponseFormatError: reply could not be recovered as a JSON object
        InternalGenerationError: anything else
    """
    if timeout_seconds is None:
        timeout_seconds = get_settings().api_timeout_seconds
    try:
        profile = validate_profile(payload)
        prompt = build_prompt(profile)
        logger.info(
            "Generating workout plan for %s (%d days)", profile.name, len(profile.availableDays)
        )
        text = await call_with_timeout(client, prompt, timeout_seconds)
    except WorkoutGenerationError:
        raise
    except Exception as e:
        logger.exception("Error in generate-workout")
        raise InternalGenerationError.from_exception(e) from e

    plan = parse_workout_response(text)
    if plan is None:
        raise ResponseFormatError()
    return plan
