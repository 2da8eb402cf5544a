"""Rendering adapters - Implementations of ResultsRendererPort.

Available implementations:
- MarkdownResultsRenderer: Markdown cards, used by the Gradio app
- PlainTextResultsRenderer: One line per leg
"""

from .cards import LegCard, build_cards
from .markdown_renderer import MarkdownResultsRenderer
from .text_renderer import PlainTextResultsRenderer

__all__ = [
    "LegCard",
    "build_cards",
    "MarkdownResultsRenderer",
    "PlainTextResultsRenderer",
]
