"""
Rate Engine Exceptions

Errors raised by the Exhibit G rate calculation engine. Everything else
the engine is handed produces a best-effort number.
"""


class RateEngineError(Exception):
    """Base class for rate engine errors."""


class InvalidTimeRelationship(RateEngineError):
    """Raised when reported times break a contractual timing rule."""


class UnknownAgreementType(RateEngineError):
    """Raised when a work status has no rate table entry."""

    def __init__(self, work_status: str):
        self.work_status = work_status
        super().__init__(f"Unknown agreement type: {work_status}")


class InvalidTimeFormat(RateEngineError, ValueError):
    """Raised when a wall-clock time is not a valid 24-hour "HH:MM" string."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Invalid time {value!r}; expected 24-hour HH:MM")
