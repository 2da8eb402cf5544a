"""Typed domain errors for the flight results pipeline.

Only caller mistakes and I/O failures are raised. Data-shape anomalies in
the itinerary payload (absent legs, absent prices, unparseable timestamps)
are recovered where they are found and never surface as errors.

All errors inherit from FlightResultsError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class FlightResultsError(Exception):
    """Base error for the flight results domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidArgumentError(FlightResultsError):
    """A caller passed a parameter outside its contract.

    Raised for negative durations, page sizes below one and unknown
    column names.

    Attributes:
        argument: Name of the offending parameter
        value: The rejected value
    """

    argument: str = ""
    value: Any = None


@dataclass
class SourceError(FlightResultsError):
    """The itinerary payload could not be read or decoded.

    Attributes:
        path: Path of the payload file if relevant
    """

    path: Optional[str] = None


@dataclass
class ConfigurationError(FlightResultsError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
