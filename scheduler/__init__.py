"""
Enumeration pipeline package: generation, feasibility filtering and deduplication.
"""

from .exceptions import SchedulingError, InvalidCountError, PlanFileError
from .pool import SlotPool
from .permutations import generate_orderings, count_orderings
from .constraints import FeasibilityChecker, AllocationViolation
from .dedup import iter_unique
from .state import EnumerationState, BlockedActivity
from .engine import ScheduleEnumerator, enumerate_schedules

__all__ = [
    "SchedulingError",
    "InvalidCountError",
    "PlanFileError",
    "SlotPool",
    "generate_orderings",
    "count_orderings",
    "FeasibilityChecker",
    "AllocationViolation",
    "iter_unique",
    "EnumerationState",
    "BlockedActivity",
    "ScheduleEnumerator",
    "enumerate_schedules",
]
