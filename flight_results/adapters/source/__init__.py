"""Source adapters - Implementations of ItinerarySourcePort.

Available implementations:
- JSONItinerarySource: Search payload stored as a JSON file
- StaticItinerarySource: Collection already in memory
"""

from .json_source import JSONItinerarySource, StaticItinerarySource, parse_payload

__all__ = ["JSONItinerarySource", "StaticItinerarySource", "parse_payload"]
