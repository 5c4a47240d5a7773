"""Pagination resolver — turns raw query parameters into fetch bounds and response metadata.

Out-of-range pages are tolerated rather than rejected: the fetch uses the
page the caller asked for (and so comes back empty), while the metadata
clamps ``page`` to the nearest valid one so pagers never render an
impossible position.
"""

import math
from collections.abc import Mapping

from app.domain.entities import ListQuery, PageBounds, PaginationMeta

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Keeps (page - 1) * page_size inside a signed 64-bit OFFSET.
MAX_PAGE = (2**63 - 1) // MAX_PAGE_SIZE


def _positive_int(raw: str | None) -> int | None:
    """Parse ``raw`` as a number and floor it; None unless the result is > 0."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value) or value <= 0:
        return None
    floored = math.floor(value)
    return floored if floored > 0 else None


def parse_list_query(params: Mapping[str, str]) -> ListQuery:
    """Read ``page``, ``pageSize``, ``q``, ``all`` and ``dropdown`` from query params."""
    page = min(_positive_int(params.get("page")) or DEFAULT_PAGE, MAX_PAGE)
    page_size = _positive_int(params.get("pageSize"))
    page_size = min(page_size, MAX_PAGE_SIZE) if page_size else DEFAULT_PAGE_SIZE

    return ListQuery(
        page=page,
        page_size=page_size,
        search=(params.get("q") or "").strip(),
        all=params.get("all") == "true",
        dropdown=params.get("dropdown") == "true",
    )


def resolve_pagination(total: int, query: ListQuery) -> PageBounds:
    """Compute the fetch window for ``query`` given the matching row count.

    In ``all`` mode the fetch is unbounded and the reported page size is the
    number of rows actually returned (falling back to the requested size when
    there are none, so it is never zero).
    """
    if query.all:
        return PageBounds(
            skip=0,
            take=None,
            page=1,
            page_size=total if total > 0 else query.page_size,
        )

    return PageBounds(
        skip=(query.page - 1) * query.page_size,
        take=query.page_size,
        page=query.page,
        page_size=query.page_size,
    )


def get_pagination_meta(total: int, page: int, page_size: int) -> PaginationMeta:
    if total <= 0 or page_size <= 0:
        return PaginationMeta(
            page=1,
            page_size=page_size,
            total=total,
            total_pages=0,
            has_next=False,
            has_prev=False,
        )

    total_pages = math.ceil(total / page_size)
    normalized_page = min(max(page, 1), total_pages)

    return PaginationMeta(
        page=normalized_page,
        page_size=page_size,
        total=total,
        total_pages=total_pages,
        has_next=normalized_page < total_pages,
        has_prev=normalized_page > 1,
    )
