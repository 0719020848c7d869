import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from models import Activity, Schedule
from scheduler.exceptions import InvalidCountError
from scheduler.permutations import count_orderings, generate_orderings


def make_activities(n):
    return [Activity.with_slots(f"atv{i}", [f"s{i}"]) for i in range(n)]


def test_orderings_are_all_injective_arrangements():
    activities = make_activities(3)
    orderings = list(generate_orderings(activities, 2))

    assert len(orderings) == 6
    as_names = {tuple(o.names) for o in orderings}
    assert ("atv0", "atv1") in as_names
    assert ("atv1", "atv0") in as_names
    assert all(len(set(names)) == 2 for names in as_names)


def test_count_orderings_matches_generator():
    activities = make_activities(5)
    for k in range(0, 7):
        assert count_orderings(5, k) == len(list(generate_orderings(activities, k)))


def test_zero_count_yields_one_empty_ordering():
    assert list(generate_orderings(make_activities(3), 0)) == [Schedule()]
    assert list(generate_orderings([], 0)) == [Schedule()]


def test_count_larger_than_pool_yields_nothing():
    assert list(generate_orderings(make_activities(2), 3)) == []
    assert count_orderings(2, 3) == 0


def test_generation_is_lazy():
    orderings = generate_orderings(make_activities(10), 10)
    first = next(orderings)
    assert len(first) == 10


@pytest.mark.parametrize("bad", [-1, 1.5, "2", True])
def test_invalid_count_fails_immediately(bad):
    with pytest.raises(InvalidCountError):
        generate_orderings(make_activities(2), bad)
