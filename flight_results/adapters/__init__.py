"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Itinerary sources (JSON payload files)
- Results renderers (Markdown, plain text)
- Caching systems (in-memory, null)
"""
