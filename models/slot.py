"""
Slot data model for the Schedule Enumerator.

A slot is a named unit of scheduling capacity (e.g. "mon 19h").
Identity is the name alone: two Slot instances with the same name
are the same slot for every allocation purpose.
"""

from pydantic import BaseModel, Field, field_validator, ConfigDict


class Slot(BaseModel):
    """A named, reusable unit of scheduling capacity."""

    name: str = Field(min_length=1, description="Unique name of the slot, e.g. 'mon 19h'")

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={"example": {"name": "mon 19h"}},
    )

    def __init__(self, name: str = None, **data):
        # Allow Slot("mon 19h") as well as Slot(name="mon 19h")
        if name is not None:
            data["name"] = name
        super().__init__(**data)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Strip surrounding whitespace and reject blank names."""
        v = v.strip()
        if not v:
            raise ValueError("Slot name cannot be blank")
        return v

    def __eq__(self, other):
        if not isinstance(other, Slot):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self):
        return self.name
