class SchedulingError(Exception):
    """Base class for errors raised by the schedule enumerator."""

    pass


class InvalidCountError(SchedulingError, ValueError):
    """Raised when the number of activities per schedule is negative or not an integer."""

    pass


class PlanFileError(SchedulingError):
    """Raised when a plan file cannot be read or does not describe a valid request."""

    pass
