"""Column visibility state.

The map is advisory: it only tells the renderer which fields of a leg to
show. It never affects ordering or paging.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Union

from ..domain.models import Column, VisibilityMap

DEFAULT_VISIBILITY = VisibilityMap()


def toggle(visibility: VisibilityMap, attribute: Union[Column, str]) -> VisibilityMap:
    """Return a copy of ``visibility`` with ``attribute`` flipped.

    Raises:
        InvalidArgumentError: If ``attribute`` is not a known column.
    """
    column = Column.parse(attribute)
    return replace(visibility, **{column.value: not visibility.is_visible(column)})


def from_visible(columns: Iterable[Union[Column, str]]) -> VisibilityMap:
    """Build a map where exactly ``columns`` are shown."""
    shown = {Column.parse(c) for c in columns}
    return VisibilityMap(**{column.value: column in shown for column in Column})
