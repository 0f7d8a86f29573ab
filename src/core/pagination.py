"""
Offset/limit windows and page metadata for listings.

Pages are zero-based. Without a size every row is returned and the page is
ignored. Listings always end with the primary key ascending so that rows
sharing sort values keep a stable position between calls.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

from sqlalchemy.orm import Query

from src.core.exceptions import InvalidPaginationError
from src.core.sorting import order_by_clauses

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageWindow:
    offset: int = 0
    limit: Optional[int] = None

    @property
    def unbounded(self) -> bool:
        return self.limit is None


def page_window(page: Optional[int] = None, size: Optional[int] = None) -> PageWindow:
    if page is not None and page < 0:
        raise InvalidPaginationError("page", page)
    if size is not None and size < 1:
        raise InvalidPaginationError("size", size)

    if size is None:
        return PageWindow()

    return PageWindow(offset=(page or 0) * size, limit=size)


def total_pages(total: int, size: Optional[int] = None) -> int:
    if size is None:
        return 1
    return math.ceil(total / size)


def page_links(
    base: str,
    page: Optional[int],
    size: Optional[int],
    pages: Optional[int],
    sort: Optional[str] = None,
) -> Dict[str, str]:
    """
    Navigation links for a listing at ``base``.
    Only ``self`` is produced for unpaged listings.
    """
    links = {"self": base}
    if size is None:
        return links

    p = page or 0
    t = pages if pages is not None else 1
    sort_query = f"&sort={quote(sort, safe=',;')}" if sort else ""

    links["self"] = f"{base}?page={p}&size={size}{sort_query}"
    links["first"] = f"{base}?page=0&size={size}{sort_query}"
    if p - 1 >= 0:
        links["prev"] = f"{base}?page={p - 1}&size={size}{sort_query}"
    if p + 1 < t:
        links["next"] = f"{base}?page={p + 1}&size={size}{sort_query}"
    links["last"] = f"{base}?page={max(t - 1, 0)}&size={size}{sort_query}"
    return links


def apply_listing(query: Query, id_column, ordering: list, window: PageWindow) -> Query:
    """Apply caller ordering, the id tiebreaker and the page window to ``query``."""
    query = query.order_by(*order_by_clauses(ordering), id_column.asc())

    if window.unbounded:
        return query

    logger.debug(f"Listing window offset={window.offset} limit={window.limit}")
    return query.offset(window.offset).limit(window.limit)
