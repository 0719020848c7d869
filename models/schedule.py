"""
Schedule data model for the Schedule Enumerator.

This module defines the 'Output' of the enumeration pipeline:
an ordered pick of activities that fits the declared slots.
"""

from typing import List, Tuple
from pydantic import BaseModel, Field, ConfigDict

from .activity import Activity


class Schedule(BaseModel):
    """
    A sequence of activities in the order their slots are consumed.

    Two schedules are equal when they hold the same activities, whatever
    the order: [A, B] == [B, A]. Hashing sorts the activities first so it
    stays consistent with that equality.
    """

    activities: Tuple[Activity, ...] = Field(
        default=(),
        description="Activities in consumption order"
    )

    model_config = ConfigDict(frozen=True)

    @property
    def names(self) -> List[str]:
        """Activity names in consumption order."""
        return [activity.name for activity in self.activities]

    @property
    def sort_key(self) -> Tuple:
        return tuple(sorted(activity.sort_key for activity in self.activities))

    def canonical(self) -> "Schedule":
        """Copy of this schedule with activities sorted by name (then slots)."""
        return Schedule(activities=tuple(sorted(self.activities, key=lambda a: a.sort_key)))

    def __len__(self) -> int:
        return len(self.activities)

    def __eq__(self, other):
        if not isinstance(other, Schedule):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __hash__(self):
        return hash(self.sort_key)

    def __str__(self):
        lines = ["Schedule"]
        lines.extend(f"\t{activity.name}" for activity in self.activities)
        return "\n".join(lines) + "\n"
