"""
The Schedule Enumeration Engine.

This module implements the core pipeline. It chains three stages:
1. Generation (every ordering of `count` activities) - order decides who gets a contested slot.
2. Feasibility (sequential slot consumption) - drops orderings that cannot be allocated.
3. Deduplication (order-independent equality) - keeps one schedule per activity set.

Every stage is lazy, so callers can stop early or cap the number of results.
"""

import logging
from typing import Iterator, Optional, Sequence, Set

from models import Activity, Schedule, Slot
from .constraints import FeasibilityChecker
from .dedup import iter_unique
from .permutations import count_orderings, generate_orderings, validate_count
from .state import EnumerationState

logger = logging.getLogger(__name__)

class ScheduleEnumerator:
    """
    Main enumeration engine.
    Ingests Demand (Activities) and Supply (Slots), outputs the distinct valid Schedules.
    """

    def __init__(
        self,
        activities: Sequence[Activity],
        slots: Sequence[Slot],
        count: int,
        max_results: Optional[int] = None
    ):
        self.activities = tuple(activities)
        self.slots = tuple(slots)
        self.count = validate_count(count)
        if max_results is not None and max_results < 0:
            raise ValueError("max_results cannot be negative")
        self.max_results = max_results

        # Initialize Helpers
        self.checker = FeasibilityChecker(self.slots)
        self.state = EnumerationState()

    def iter_schedules(self) -> Iterator[Schedule]:
        """
        Lazily yield each new distinct feasible schedule.
        The run state is reset when iteration starts.
        """
        self.state.clear()
        total = count_orderings(len(self.activities), self.count)
        logger.info(
            f"Examining {total} orderings of {self.count} out of "
            f"{len(self.activities)} activities over {len(self.slots)} slots"
        )

        if self.max_results == 0:
            return

        found = 0
        # The run state holds the only copy of the distinct schedules
        for schedule in iter_unique(self._feasible_orderings(), seen=self.state.unique_schedules):
            yield schedule
            found += 1
            if self.max_results is not None and found >= self.max_results:
                logger.info(f"Stopping after {found} schedules (max_results reached)")
                return

    def _feasible_orderings(self) -> Iterator[Schedule]:
        """Generation and feasibility stages: orderings that can be allocated, in generation order."""
        for candidate in generate_orderings(self.activities, self.count):
            self.state.record_ordering()

            violation = self.checker.check_schedule(candidate)
            if violation is not None:
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug("Rejected %s: %s", candidate.names, violation.reason)
                self.state.record_rejection(violation)
                continue

            self.state.record_feasible()
            yield candidate

    def run(self) -> Set[Schedule]:
        """
        Execute the whole pipeline and return the distinct valid schedules.
        """
        logger.info("Starting Schedule Enumerator...")
        schedules = set(self.iter_schedules())
        logger.info(f"Found {len(schedules)} distinct schedules")
        return schedules


def enumerate_schedules(
    activities: Sequence[Activity],
    slots: Sequence[Slot],
    count: int
) -> Set[Schedule]:
    """
    Every distinct way to pick `count` activities that fits in `slots`.

    Infeasible requests (too few slots, count larger than the number of
    activities) give an empty set. A negative count raises InvalidCountError.
    """
    return ScheduleEnumerator(activities, slots, count).run()
