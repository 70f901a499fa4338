from typing import Any, List, Optional, Union
from pydantic import BaseModel, Field


# Input fields are left untyped: values are rendered into the prompt exactly as sent.
class DaySlot(BaseModel):
    day: Any  # e.g., "monday"
    hours: Any  # e.g., 1.5 or "1.50"
    timeOfDay: List[Any]  # e.g., ["Morning", "Evening"]


class TrainingProfile(BaseModel):
    name: Any
    age: Any
    position: Any
    level: Any
    improvement: Any
    availableDays: List[DaySlot]


class Exercise(BaseModel):
    name: str
    duration: str  # e.g., "15 minutes"
    description: str


class ScheduledDay(BaseModel):
    day: str
    hours: Union[int, float]
    timeOfDay: List[str] = Field(default_factory=list)
    exercises: List[Exercise] = Field(default_factory=list)


class WorkoutPlan(BaseModel):
    """Shape the model is asked to return.

    Documentation only: generated plans are passed through as plain dicts and
    are never validated against this model.
    """

    name: str
    age: Union[int, float, str]
    position: str
    level: str
    focusAreas: str
    workoutSchedule: List[ScheduledDay]


class ErrorResponse(BaseModel):
    error: str = Field(..., description="Short error summary")
    details: Optional[str] = Field(default=None, description="What went wrong, when known")


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
