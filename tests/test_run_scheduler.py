import sys
from pathlib import Path

# Ensure project root is on PYTHONPATH
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import json
import logging

import pytest

import run_scheduler


def test_main_prints_schedules_from_plan(tmp_path, capsys):
    path = tmp_path / "plan.json"
    path.write_text(json.dumps({
        "slots": ["s1", "s2"],
        "activities": [
            {"name": "X", "slots_to_use": ["s1"]},
            {"name": "Y", "slots_to_use": ["s2"]},
            {"name": "Z", "slots_to_use": ["s1"]},
        ],
        "count": 2,
    }), encoding="utf-8")

    assert run_scheduler.main([str(path)]) == 0

    out = capsys.readouterr().out
    assert "Distinct schedules:    2" in out
    assert "Schedule\n\tX\n\tY\n" in out
    assert "Schedule\n\tY\n\tZ\n" in out


def test_main_falls_back_to_sample(tmp_path, capsys):
    assert run_scheduler.main([str(tmp_path / "missing.json")]) == 0
    assert "Distinct schedules:    9" in capsys.readouterr().out


def test_main_reports_broken_plan(tmp_path):
    path = tmp_path / "plan.json"
    path.write_text("[]", encoding="utf-8")
    assert run_scheduler.main([str(path)]) == 1


def test_main_honours_max_results(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(run_scheduler, "MAX_RESULTS", "3")
    assert run_scheduler.main([str(tmp_path / "missing.json")]) == 0
    assert "Distinct schedules:    3" in capsys.readouterr().out


@pytest.mark.parametrize("raw, expected", [(None, None), ("", None), ("5", 5)])
def test_parse_max_results(raw, expected):
    assert run_scheduler.parse_max_results(raw) == expected


@pytest.mark.parametrize("raw", ["many", "-2"])
def test_parse_max_results_rejects_bad_values(raw):
    with pytest.raises(ValueError):
        run_scheduler.parse_max_results(raw)


@pytest.mark.parametrize("configured, expected", [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("bogus", logging.INFO)])
def test_log_level_comes_from_configuration(monkeypatch, configured, expected):
    calls = []
    monkeypatch.setattr(run_scheduler, "LOG_LEVEL", configured)
    monkeypatch.setattr(run_scheduler.logging, "basicConfig", lambda **kwargs: calls.append(kwargs))

    run_scheduler.configure_logging()

    assert calls[0]["level"] == expected
