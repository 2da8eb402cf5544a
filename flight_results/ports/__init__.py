"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the pipeline and external adapters.
They enable dependency injection and make the system testable.
"""

from .cache import CachePort
from .rendering import ResultsRendererPort
from .source import ItinerarySourcePort

__all__ = [
    "CachePort",
    "ItinerarySourcePort",
    "ResultsRendererPort",
]
