"""
Collapse orderings that hold the same activities into one schedule.
"""

from typing import Iterable, Iterator, Optional, Set

from models import Schedule


def iter_unique(schedules: Iterable[Schedule], seen: Optional[Set[Schedule]] = None) -> Iterator[Schedule]:
    """
    Yield each schedule the first time its activity set shows up.

    `seen` is filled in place, so a caller that passes its own set ends up
    holding every distinct schedule without keeping a second copy.
    Output order follows input order; equality ignores activity order.
    """
    if seen is None:
        seen = set()
    for schedule in schedules:
        if schedule in seen:
            continue
        seen.add(schedule)
        yield schedule
