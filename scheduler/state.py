"""
Enumeration State Management.

This module acts as the 'Memory' of one enumeration run.
It tracks:
1. The distinct schedules found so far.
2. How many orderings were examined, rejected and collapsed as duplicates.
3. Detailed Failure Reporting (which activities blocked orderings, and why).
"""

from typing import Any, Dict, List, Optional, Set
from collections import Counter
from dataclasses import dataclass, field

from models import Schedule
from .constraints import AllocationViolation


@dataclass
class BlockedActivity:
    """
    Aggregated record of the orderings an activity could not be allocated in.
    Only counts and the first reason are kept, never the violations themselves.
    """
    activity_name: str
    rejections: int = 0
    violation_counts: Counter = field(default_factory=Counter)
    slot_counts: Counter = field(default_factory=Counter)
    sample_reason: Optional[str] = None

    def add(self, violation: AllocationViolation) -> None:
        self.rejections += 1
        self.violation_counts[violation.constraint_type] += 1
        self.slot_counts.update(violation.slot_names)
        if self.sample_reason is None:
            self.sample_reason = violation.reason


class EnumerationState:
    """
    Maintains the mutable state of one enumeration run.
    Nothing here is shared between runs.
    """

    def __init__(self):
        """Initialize empty state."""
        # Distinct schedules kept so far; the deduplication stage adds to it
        self.unique_schedules: Set[Schedule] = set()

        # Counters
        self.orderings_examined: int = 0
        self.orderings_rejected: int = 0
        self.feasible_orderings: int = 0

        # Failure Tracking
        self.blocked_activities: Dict[str, BlockedActivity] = {}

    def record_ordering(self) -> None:
        self.orderings_examined += 1

    def record_feasible(self) -> None:
        self.feasible_orderings += 1

    @property
    def duplicates_collapsed(self) -> int:
        """Feasible orderings that repeated an activity set already kept."""
        return self.feasible_orderings - len(self.unique_schedules)

    def record_rejection(self, violation: AllocationViolation) -> None:
        """
        Log a rejected ordering against the activity that could not be placed.
        Repeated rejections for the same activity are folded into counters.
        """
        self.orderings_rejected += 1

        blocked = self.blocked_activities.get(violation.activity_name)
        if blocked is None:
            blocked = BlockedActivity(activity_name=violation.activity_name)
            self.blocked_activities[violation.activity_name] = blocked
        blocked.add(violation)

    # --- Reporting Methods ---

    def get_statistics(self) -> Dict[str, Any]:
        """Summary numbers for the final report."""
        acceptance_rate = (self.feasible_orderings / self.orderings_examined * 100) if self.orderings_examined else 0.0

        return {
            "orderings_examined": self.orderings_examined,
            "orderings_rejected": self.orderings_rejected,
            "feasible_orderings": self.feasible_orderings,
            "duplicates_collapsed": self.duplicates_collapsed,
            "unique_schedules": len(self.unique_schedules),
            "acceptance_rate": round(acceptance_rate, 1),
            "blocked_activities": len(self.blocked_activities),
        }

    def get_failure_report(self) -> List[Dict]:
        """
        Generate a human-readable list of which activities blocked orderings and why.
        Most frequently blocking activities come first.
        """
        report = []

        for name, blocked in self.blocked_activities.items():
            slot_summary = blocked.slot_counts

            report.append({
                "activity_name": name,
                "total_rejections": blocked.rejections,
                "primary_failure_cause": blocked.violation_counts.most_common(1)[0][0],
                "violation_breakdown": dict(blocked.violation_counts),
                "most_contested_slot": slot_summary.most_common(1)[0][0] if slot_summary else None,
                "sample_reason": blocked.sample_reason or "Unknown"
            })

        report.sort(key=lambda x: (-x["total_rejections"], x["activity_name"]))
        return report

    def clear(self) -> None:
        """Reset state (useful for testing or re-running)."""
        self.unique_schedules.clear()
        self.orderings_examined = 0
        self.orderings_rejected = 0
        self.feasible_orderings = 0
        self.blocked_activities.clear()
