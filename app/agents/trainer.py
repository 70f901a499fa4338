from __future__ import annotations

"""
Basketball Trainer Agent (Agents SDK)
-------------------------------------
Holds the trainer persona and renders a `TrainingProfile` into the prompt
sent to the model. The JSON layout described in the prompt is what
`app.agents.response_parser` expects back; keep the two in step.
"""

from typing import Any

from agents import Agent

from app.models.schemas import DaySlot, TrainingProfile


TRAINER_INSTRUCTIONS = (
    "You are a professional basketball trainer specializing in creating personalized workout plans. "
    "Create a detailed basketball workout plan based on the user's profile information."
)

trainer_agent = Agent(
    name="Basketball Trainer",
    instructions=TRAINER_INSTRUCTIONS,
)


def _capitalize_day(value: Any) -> str:
    # Only the first letter changes; "monday" -> "Monday", "tUESDAY" -> "TUESDAY".
    day = str(value)
    return day[:1].upper() + day[1:]


def format_day_slot(slot: DaySlot) -> str:
    """Render one availability line, e.g. `- Monday: 1 hours, Time: Evening`."""
    times = ", ".join(str(label) for label in slot.timeOfDay)
    return f"- {_capitalize_day(slot.day)}: {slot.hours} hours, Time: {times}"


def build_prompt(profile: TrainingProfile) -> str:
    """Render the profile into the instruction prompt for the trainer model."""
    days = "\n".join(format_day_slot(slot) for slot in profile.availableDays)
    return f"""
Create a detailed basketball workout plan for a player with the following profile:

Name: {profile.name}
Age: {profile.age}
Position: {profile.position}
Level: {profile.level}
Areas for improvement: {profile.improvement}

Available days for training:
{days}

For each day, create specific exercises with durations and descriptions. Describe the exercises in detail, including the equipment needed, the specific movements, and the target muscle groups.
Specify each workout separately with amount of repetitions and sets.
Return your response as a properly formatted JSON object with the following structure:
{{
  "name": "{profile.name}",
  "age": "{profile.age}",
  "position": "{profile.position}",
  "level": "{profile.level}",
  "focusAreas": "Brief summary of focus areas based on their improvement needs",
  "workoutSchedule": [
    {{
      "day": "day name",
      "hours": number of hours,
      "timeOfDay": ["Morning", "Afternoon", "Evening"],
      "exercises": [
        {{
          "name": "Exercise Name",
          "duration": "Duration in minutes",
          "description": "Detailed description of the exercise"
        }}
        // more exercises...
      ]
    }}
    // more days...
  ]
}}

IMPORTANT: Ensure the response is a valid JSON object. Use standard JSON format without any markdown or code blocks.
Make the exercises specific to basketball skills and appropriate for their position, level, and improvement areas.
Keep the response concise and optimized for performance.
""".strip()
