"""Services layer - Application orchestration.

Available services:
- ResultsViewService: Sort, paginate and render itineraries for a ViewState
"""

from .results_view import ResultsView, ResultsViewService

__all__ = ["ResultsView", "ResultsViewService"]
