"""
Data models package for the Schedule Enumerator.

This package exports the three entities of the data architecture:
1. Supply (Slot)
2. Demand (Activity)
3. Output (Schedule)
"""

from .slot import Slot

from .activity import Activity

from .schedule import Schedule

__all__ = [
    # --- Resource Models ---
    "Slot",

    # --- Demand Models ---
    "Activity",

    # --- Output Models ---
    "Schedule",
]
