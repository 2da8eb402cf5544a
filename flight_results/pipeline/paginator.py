"""Fixed-size pagination over an ordered sequence."""

from __future__ import annotations

import logging
from typing import Optional, Sequence, TypeVar

from ..domain.errors import InvalidArgumentError
from ..domain.models import Page

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 20


def paginate(
    items: Optional[Sequence[T]],
    page: int,
    page_size: int = DEFAULT_PAGE_SIZE,
    *,
    lookahead: bool = False,
) -> Page[T]:
    """Cut page ``page`` out of ``items``.

    Parameters
    ----------
    items:
        Ordered sequence; ``None`` is treated as empty.
    page:
        Zero-based page index. Negative values are clamped to 0; values
        past the end give an empty page.
    page_size:
        Maximum number of items per page, at least 1.
    lookahead:
        When False (default), ``has_next`` is true whenever the page is
        full, so it reports a next page that turns out empty when the
        length is an exact multiple of ``page_size``. When True it compares
        against the total length instead.

    Raises
    ------
    InvalidArgumentError
        If ``page_size`` is below 1.
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise InvalidArgumentError(
            f"Page size must be a positive integer, got {page_size!r}",
            argument="page_size",
            value=page_size,
        )

    sequence = items if items is not None else ()
    page = max(int(page), 0)
    total = len(sequence)

    start = page * page_size
    end = start + page_size
    visible = tuple(sequence[start:end]) if start < total else ()

    if lookahead:
        has_next = end < total
    else:
        has_next = len(visible) == page_size

    logger.debug(
        "Page computed",
        extra={"page": page, "page_size": page_size, "visible": len(visible), "total": total},
    )

    return Page(
        items=visible,
        page=page,
        page_size=page_size,
        has_previous=page > 0,
        has_next=has_next,
        total_items=total,
    )
