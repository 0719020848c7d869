"""
Plan data: JSON plan files and the built-in sample plan.
"""

from .data_factory import (
    SchedulingRequest,
    load_request,
    save_request,
    sample_request
)

__all__ = [
    "SchedulingRequest",
    "load_request",
    "save_request",
    "sample_request",
]
