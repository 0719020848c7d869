import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import json
import logging

import pytest
from pydantic import ValidationError

from generators.data_factory import SchedulingRequest, load_request, sample_request, save_request
from models import Activity, Slot
from scheduler import enumerate_schedules
from scheduler.exceptions import PlanFileError


def write_plan(tmp_path, data):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_request_from_plain_names(tmp_path):
    path = write_plan(tmp_path, {
        "slots": ["s1", "s2"],
        "activities": [
            {"name": "X", "slots_to_use": ["s1"]},
            {"name": "Y", "slots_to_use": ["s2"]},
        ],
        "count": 2,
    })

    request = load_request(path)

    assert request.slots == (Slot("s1"), Slot("s2"))
    assert request.activities[0] == Activity.with_slots("X", ["s1"])
    assert request.count == 2


def test_save_then_load_keeps_the_plan(tmp_path):
    path = tmp_path / "saved.json"
    save_request(sample_request(), path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["count"] == 4
    assert saved["slots"][0] == "mon 19h"
    assert load_request(path) == sample_request()


def test_missing_plan_file(tmp_path):
    with pytest.raises(PlanFileError):
        load_request(tmp_path / "nope.json")


def test_plan_file_with_bad_json(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(PlanFileError):
        load_request(path)


@pytest.mark.parametrize("data", [
    [1, 2, 3],
    {"slots": ["s1"], "activities": [], "count": -1},
    {"slots": ["s1"], "activities": [{"name": "", "slots_to_use": ["s1"]}], "count": 1},
    {"slots": ["s1"], "activities": []},
])
def test_invalid_plan_content(tmp_path, data):
    with pytest.raises(PlanFileError):
        load_request(write_plan(tmp_path, data))


def test_slots_given_as_one_string_are_rejected(tmp_path):
    with pytest.raises(ValidationError):
        SchedulingRequest(slots="sat", activities=[], count=0)
    with pytest.raises(PlanFileError):
        load_request(write_plan(tmp_path, {"slots": "sat", "activities": [], "count": 0}))


def test_undeclared_slot_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="generators.data_factory"):
        SchedulingRequest(
            slots=["s1"],
            activities=[Activity.with_slots("Ghost", ["s9"])],
            count=1,
        )
    assert "Ghost" in caplog.text
    assert "s9" in caplog.text


def test_sample_plan_enumeration():
    request = sample_request()
    assert len(request.slots) == 11
    assert len(request.activities) == 6

    result = enumerate_schedules(request.activities, request.slots, request.count)

    # Financial Mathematics and Software Development I both need "fri 19h"
    assert len(result) == 9
    for schedule in result:
        assert not {"Financial Mathematics", "Software Development I"} <= set(schedule.names)
