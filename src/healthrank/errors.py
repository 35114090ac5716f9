"""Exceptions raised by the healthrank engine."""


class HealthRankError(ValueError):
    """Base class for all engine errors."""


class InvalidDateError(HealthRankError):
    """Date of birth could not be parsed or lies in the future."""


class UnsupportedDemographicError(HealthRankError):
    """No reference data exists for the subject's age/sex combination."""


class InvalidMetricRangeError(HealthRankError):
    """A reading is outside its documented domain."""

    def __init__(self, field: str, value, expected: str):
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"{field}={value!r} is out of range (expected {expected})")
