"""
Pagination helpers
"""

import math

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10


def normalize_page(page, limit, default_limit=DEFAULT_LIMIT):
    """Coerce page to >= 1 and limit to the default when below 1"""
    page = page if page and page >= 1 else DEFAULT_PAGE
    limit = limit if limit and limit >= 1 else default_limit
    return page, limit


def total_pages(total_items: int, limit: int) -> int:
    """Number of pages for ``total_items``; an empty result is still one page"""
    return max(1, math.ceil(total_items / limit))


def build_pagination(page: int, limit: int, total_items: int) -> dict:
    return {
        'page': page,
        'limit': limit,
        'total_pages': total_pages(total_items, limit),
        'total_items': total_items
    }
