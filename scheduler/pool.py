"""
Working slot pool.

A SlotPool is the only mutable piece of the pipeline. One is built per
feasibility check and thrown away afterwards, so Slot and Activity objects
never carry consumption state.
"""

from collections import Counter
from typing import Iterable, List, Union

from models import Activity, Slot


class SlotPool:
    """Multiset of free slot names. Same-named slots count as separate units."""

    def __init__(self, slots: Iterable[Union[Slot, str]] = ()):
        self._free: Counter = Counter(self._name_of(slot) for slot in slots)

    @staticmethod
    def _name_of(slot: Union[Slot, str]) -> str:
        return slot.name if isinstance(slot, Slot) else slot

    def __contains__(self, slot) -> bool:
        if not isinstance(slot, (Slot, str)):
            return False
        return self._free[self._name_of(slot)] > 0

    def __len__(self) -> int:
        return sum(self._free.values())

    def count(self, slot: Union[Slot, str]) -> int:
        """Free units left for this slot name."""
        return self._free[self._name_of(slot)]

    def missing_for(self, activity: Activity) -> List[str]:
        """Required slot names with no free unit left, sorted."""
        return [name for name in activity.required_slot_names if self._free[name] <= 0]

    def consume(self, activity: Activity) -> None:
        """
        Take one unit of every distinct slot the activity needs.
        Raises ValueError if the activity does not fit; callers check first.
        """
        missing = self.missing_for(activity)
        if missing:
            raise ValueError(f"Cannot allocate {activity.name}: no free {', '.join(missing)}")
        for name in activity.required_slot_names:
            self._free[name] -= 1

    def remaining(self) -> List[str]:
        """Free slot names, one entry per unit, sorted."""
        return sorted(self._free.elements())

    def copy(self) -> "SlotPool":
        pool = SlotPool()
        pool._free = self._free.copy()
        return pool
