"""
Main Execution Script for the Schedule Enumerator.

Loads a plan file (or the built-in sample), enumerates every distinct
valid schedule and prints a report followed by the schedules themselves.

Usage: python run_scheduler.py [plan.json]
"""

import os
import sys
import logging
from pathlib import Path
from typing import List, Optional

# Add current directory to path so imports work
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from generators.data_factory import SchedulingRequest, load_request, sample_request
from scheduler.engine import ScheduleEnumerator
from scheduler.exceptions import PlanFileError

logger = logging.getLogger("Main")

# --- CONFIGURATION ---
PLAN_FILENAME = os.environ.get("SCHEDULE_PLAN_FILE", "plan.json")
MAX_RESULTS = os.environ.get("SCHEDULE_MAX_RESULTS")  # None = no cap
LOG_LEVEL = os.environ.get("SCHEDULE_LOG_LEVEL", "INFO")
# ---------------------


def configure_logging(level: Optional[str] = None) -> None:
    level = LOG_LEVEL if level is None else level
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def parse_max_results(raw: Optional[str]) -> Optional[int]:
    """Read the result cap from configuration. Empty means no cap."""
    if raw is None or str(raw).strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"SCHEDULE_MAX_RESULTS must be an integer, got {raw!r}")
    if value < 0:
        raise ValueError("SCHEDULE_MAX_RESULTS cannot be negative")
    return value


def load_plan(filename: str) -> SchedulingRequest:
    """
    Load the plan file if it exists, otherwise fall back to the sample plan.
    An existing but broken plan file is an error, not a fallback.
    """
    if not Path(filename).exists():
        logger.warning(f"⚠️ Plan file {filename} not found. Falling back to the sample plan.")
        return sample_request()
    return load_request(filename)


def print_report(enumerator: ScheduleEnumerator, schedules) -> None:
    stats = enumerator.state.get_statistics()

    print("\n" + "="*50)
    print("📊 ENUMERATION REPORT")
    print("="*50)
    print(f"Orderings examined:    {stats['orderings_examined']}")
    print(f"  - Rejected:          {stats['orderings_rejected']}")
    print(f"  - Feasible:          {stats['feasible_orderings']} ({stats['acceptance_rate']}%)")
    print(f"Duplicates collapsed:  {stats['duplicates_collapsed']}")
    print(f"Distinct schedules:    {stats['unique_schedules']}")

    report = enumerator.state.get_failure_report()
    if report:
        print("\n🔍 BLOCKING ANALYSIS")
        for entry in report:
            print(f"❌ {entry['activity_name']} blocked {entry['total_rejections']} orderings")
            print(f"   Reason: {entry['sample_reason']}")

    print("\n" + "="*50)
    print("🗓 SCHEDULES")
    print("="*50)
    # Sets have no order; sort so the listing is stable between runs
    for schedule in sorted((s.canonical() for s in schedules), key=lambda s: s.sort_key):
        print(schedule)


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    configure_logging()

    plan_filename = argv[0] if argv else PLAN_FILENAME

    try:
        request = load_plan(plan_filename)
        max_results = parse_max_results(MAX_RESULTS)
    except (PlanFileError, ValueError) as e:
        logger.error(f"❌ {e}")
        return 1

    logger.info(f"🚀 Enumerating schedules of {request.count} activities...")
    enumerator = ScheduleEnumerator(
        activities=request.activities,
        slots=request.slots,
        count=request.count,
        max_results=max_results
    )
    schedules = enumerator.run()

    print_report(enumerator, schedules)
    return 0


if __name__ == "__main__":
    sys.exit(main())
