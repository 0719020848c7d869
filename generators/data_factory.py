"""
Plan data for the Schedule Enumerator.

A plan is one enumeration request: the declared slots, the candidate
activities and how many activities each schedule must hold. Plans are
stored as JSON and re-hydrated into Pydantic models.
"""

import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator, ConfigDict

from models import Activity, Slot
from scheduler.exceptions import PlanFileError

logger = logging.getLogger(__name__)


class SchedulingRequest(BaseModel):
    """Inputs of one enumeration run."""

    slots: Tuple[Slot, ...] = Field(default=(), description="Declared slot pool; repeated names are extra units")
    activities: Tuple[Activity, ...] = Field(default=(), description="Candidate activities")
    count: int = Field(ge=0, description="Number of activities per schedule")

    model_config = ConfigDict(json_schema_extra={
        "example": {
            "slots": ["mon 19h", "mon 20h", "sat"],
            "activities": [
                {"name": "Projects", "slots_to_use": ["mon 19h", "mon 20h"]},
                {"name": "Problem Solving", "slots_to_use": ["sat"]}
            ],
            "count": 2
        }
    })

    @field_validator("slots", mode="before")
    @classmethod
    def coerce_slots(cls, v):
        """Plan files list slots as plain names."""
        if isinstance(v, (str, bytes)):
            raise ValueError("slots must be a list of slot names, not a single string")
        if v is None:
            return ()
        return tuple(Slot(item) if isinstance(item, str) else item for item in v)

    @model_validator(mode="after")
    def warn_undeclared_slots(self):
        """Activities asking for undeclared slots are legal but never schedulable."""
        declared = {slot.name for slot in self.slots}
        for activity in self.activities:
            undeclared = [name for name in activity.required_slot_names if name not in declared]
            if undeclared:
                logger.warning(
                    f"Activity {activity.name!r} uses undeclared slot(s) {undeclared}; it can never be scheduled"
                )
        return self

    def to_json_dict(self) -> dict:
        """Plain JSON shape: slots and activity slots as bare names."""
        return {
            "slots": [slot.name for slot in self.slots],
            "activities": [
                {"name": a.name, "slots_to_use": [slot.name for slot in a.slots_to_use]}
                for a in self.activities
            ],
            "count": self.count
        }


def load_request(path: Union[str, Path]) -> SchedulingRequest:
    """
    Load a plan file. Every failure (missing file, bad JSON, invalid content)
    is reported as PlanFileError.
    """
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise PlanFileError(f"Cannot read plan file {path}: {e}") from e

    if not isinstance(data, dict):
        raise PlanFileError(f"Plan file {path} must contain a JSON object")

    try:
        request = SchedulingRequest.model_validate(data)
    except ValidationError as e:
        raise PlanFileError(f"Invalid plan file {path}: {e}") from e

    logger.info(
        f"📂 Loaded plan {path}: {len(request.activities)} activities, "
        f"{len(request.slots)} slots, count={request.count}"
    )
    return request


def save_request(request: SchedulingRequest, path: Union[str, Path]) -> None:
    """Write a plan so it can be re-run later."""
    path = Path(path)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(request.to_json_dict(), f, indent=2, ensure_ascii=False)
    logger.info(f"💾 Saved plan to {path}")


def sample_request() -> SchedulingRequest:
    """
    Built-in demo plan: a week of evening classes (two periods Monday to
    Friday plus Saturday), six courses, pick four.
    """
    slots: List[Slot] = [
        Slot(f"{day} {hour}h")
        for day in ("mon", "tue", "wed", "thu", "fri")
        for hour in (19, 20)
    ]
    slots.append(Slot("sat"))
    by_name = {slot.name: slot for slot in slots}

    def course(name: str, *slot_names: str) -> Activity:
        return Activity.with_slots(name, [by_name[s] for s in slot_names])

    activities = [
        course("Projects", "mon 19h", "mon 20h"),
        course("Information Organization and Retrieval", "tue 19h", "thu 20h"),
        course("Project Management", "tue 20h", "wed 19h"),
        course("Financial Mathematics", "fri 19h", "fri 20h"),
        course("Software Development I", "fri 19h", "wed 20h"),
        course("Problem Solving", "sat"),
    ]
    return SchedulingRequest(slots=tuple(slots), activities=tuple(activities), count=4)
