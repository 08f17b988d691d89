"""Offset pagination for list endpoints."""

from __future__ import annotations

import logging
from typing import Callable, TypeVar

logger = logging.getLogger(__name__)

PAGE_SIZE = 50

T = TypeVar("T")


def fetch_all(fetch_page: Callable[[int, int], list[T]], page_size: int = PAGE_SIZE) -> list[T]:
    """Collect every record from a paged list endpoint.

    ``fetch_page(limit, offset)`` is called with offsets 0, page_size,
    2 * page_size, ... until it returns fewer than ``page_size`` records.
    When the total is an exact multiple of the page size the final call
    returns an empty page, which ends the loop like any other short page.
    """
    results: list[T] = []
    offset = 0
    while True:
        page = fetch_page(page_size, offset)
        logger.debug("Fetched %d records at offset %d", len(page), offset)
        results.extend(page)
        if len(page) < page_size:
            return results
        offset += page_size
