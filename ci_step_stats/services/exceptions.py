"""Custom exceptions for step timing extraction."""

from __future__ import annotations


class StepTimingError(Exception):
    """Base exception for step timing failures."""


class TimestampParseError(StepTimingError):
    """Raised when a step timestamp is missing or not RFC 3339."""

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class MissingStepError(StepTimingError):
    """Raised when a job does not contain the step being timed."""

    def __init__(self, message: str, job_name: str | None = None):
        super().__init__(message)
        self.job_name = job_name
