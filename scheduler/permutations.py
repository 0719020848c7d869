"""
Candidate generation.

Order matters here: an activity placed earlier can take a slot that a later
activity also asks for, so every ordering is a separate candidate.
"""

import math
from itertools import permutations
from typing import Iterator, Sequence

from models import Activity, Schedule
from .exceptions import InvalidCountError


def validate_count(count) -> int:
    """Reject negative and non-integer counts (bools included)."""
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidCountError(f"count must be an integer, got {count!r}")
    if count < 0:
        raise InvalidCountError(f"count cannot be negative, got {count}")
    return count


def count_orderings(n: int, count: int) -> int:
    """Number of ordered picks of `count` items out of `n`: n!/(n-count)!."""
    validate_count(count)
    if count > n:
        return 0
    return math.perm(n, count)


def generate_orderings(activities: Sequence[Activity], count: int) -> Iterator[Schedule]:
    """
    Lazily yield every ordered arrangement of `count` activities, drawn
    without repetition (by position) from `activities`.

    count == 0 yields one empty schedule; count > len(activities) yields nothing.
    The count is checked straight away, not on first iteration.
    """
    validate_count(count)
    return (Schedule(activities=ordering) for ordering in permutations(activities, count))
