"""
Hard Constraint Validation Logic.

This module answers the binary question: "Can this ordering of activities
be allocated in the declared slots?"
Each activity takes its slots in turn; two activities never share a slot unit.
"""

from typing import Iterable, List, Optional, Tuple
from dataclasses import dataclass, field

from models import Activity, Schedule, Slot
from .pool import SlotPool

@dataclass
class AllocationViolation:
    """Detailed reason for rejection."""
    constraint_type: str  # "MissingSlot" or "SlotTaken"
    activity_name: str
    position: int
    slot_names: List[str] = field(default_factory=list)

    @property
    def reason(self) -> str:
        # Built on demand; most rejections are only counted
        if self.constraint_type == FeasibilityChecker.MISSING_SLOT:
            return f"{self.activity_name} needs undeclared slot(s): {', '.join(self.slot_names)}"
        return f"{self.activity_name} needs slot(s) already taken: {', '.join(self.slot_names)}"

class FeasibilityChecker:
    """
    Validates slot allocation for candidate orderings.
    """

    MISSING_SLOT = "MissingSlot"
    SLOT_TAKEN = "SlotTaken"

    def __init__(self, slots: Iterable[Slot]):
        self.slots: Tuple[Slot, ...] = tuple(slots)
        # Pristine pool, copied for every check
        self._pool = SlotPool(self.slots)

    def check_schedule(self, schedule: Schedule) -> Optional[AllocationViolation]:
        """
        Master validation function. Returns None if Valid, Violation object if Invalid.

        Single pass in schedule order with no backtracking: the first activity
        that does not fit rejects the whole ordering.
        """
        pool = self._pool.copy()

        for position, activity in enumerate(schedule.activities):
            if not activity.can_be_allocated_in(pool):
                return self._explain(activity, position, pool)
            pool.consume(activity)

        return None # All clear!

    def is_feasible(self, schedule: Schedule) -> bool:
        return self.check_schedule(schedule) is None

    def _explain(self, activity: Activity, position: int, pool: SlotPool) -> AllocationViolation:
        """Tell apart slots that were never declared from slots already used up."""
        missing = pool.missing_for(activity)
        undeclared = [name for name in missing if self._pool.count(name) == 0]

        if undeclared:
            return AllocationViolation(self.MISSING_SLOT, activity.name, position, undeclared)
        return AllocationViolation(self.SLOT_TAKEN, activity.name, position, missing)
