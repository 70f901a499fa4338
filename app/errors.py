"""
Errors raised while generating a workout plan.

Each error carries the HTTP status and payload it is rendered with; the
FastAPI exception handler in `app.main` turns them into responses.
"""

from typing import Any, Dict, Optional


class WorkoutGenerationError(Exception):
    status_code: int = 500
    error: str = "Failed to generate workout plan"
    details: Optional[str] = None

    def __init__(self, details: Optional[str] = None) -> None:
        if details is not None:
            self.details = details
        super().__init__(self.details or self.error)

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"error": self.error}
        if self.details is not None:
            payload["details"] = self.details
        return payload


class ProfileValidationError(WorkoutGenerationError):
    """Required profile fields are missing or empty."""

    status_code = 400
    error = "Missing required fields"


class GenerationTimeoutError(WorkoutGenerationError):
    status_code = 504
    error = "Request timed out"
    details = "The workout plan generation is taking too long. Please try again."


class ResponseFormatError(WorkoutGenerationError):
    """The model replied, but nothing in the reply could be parsed as a JSON object."""

    status_code = 500
    error = "Failed to generate a valid workout plan"
    details = "The AI generated an invalid response format"


class InternalGenerationError(WorkoutGenerationError):
    status_code = 500
    error = "Failed to generate workout plan"

    @classmethod
    def from_exception(cls, exc: BaseException) -> "InternalGenerationError":
        return cls(str(exc) or "Unknown error")
