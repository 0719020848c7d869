"""
Activity data model for the Schedule Enumerator.
"""

from typing import Any, Container, Iterable, Tuple, Union
from pydantic import BaseModel, Field, field_validator, ConfigDict

from .slot import Slot


class Activity(BaseModel):
    """
    Represents a single task to be scheduled.
    An activity needs every slot listed in `slots_to_use` to be free at the
    moment it is placed in a schedule.
    """

    name: str = Field(min_length=1, description="Human-readable name")
    slots_to_use: Tuple[Slot, ...] = Field(
        default=(),
        description="Slots this activity consumes. Order and duplicates do not affect identity."
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "name": "Project Management",
                "slots_to_use": [{"name": "tue 20h"}, {"name": "wed 19h"}]
            }
        }
    )

    @classmethod
    def with_slots(cls, name: str, slots: Iterable[Union[Slot, str]] = ()) -> "Activity":
        """Convenience constructor: Activity.with_slots("PDS1", [slot_a, "fri 19h"])."""
        return cls(name=name, slots_to_use=tuple(slots))

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Activity name cannot be blank")
        return v

    @field_validator("slots_to_use", mode="before")
    @classmethod
    def coerce_slots(cls, v: Any) -> Any:
        """Accept plain slot names next to Slot objects and {'name': ...} mappings."""
        if isinstance(v, (str, bytes)):
            raise ValueError("slots_to_use must be a list of slots, not a single string")
        if v is None:
            return ()
        return tuple(Slot(item) if isinstance(item, str) else item for item in v)

    @property
    def required_slot_names(self) -> Tuple[str, ...]:
        """Distinct slot names this activity needs, sorted."""
        return tuple(sorted({slot.name for slot in self.slots_to_use}))

    @property
    def sort_key(self) -> Tuple[str, Tuple[str, ...]]:
        """Total order key: name first, required slots break ties."""
        return (self.name, self.required_slot_names)

    def can_be_allocated_in(self, pool: Container[Slot]) -> bool:
        """
        True if every required slot is present (by name) in `pool`.
        `pool` can be any container of Slots or a SlotPool.
        """
        return all(slot in pool for slot in self.slots_to_use)

    def __eq__(self, other):
        if not isinstance(other, Activity):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __hash__(self):
        return hash(self.sort_key)

    def __str__(self):
        return self.name
