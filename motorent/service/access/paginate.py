"""
Pagination
----------
"""

from typing import NamedTuple, Optional, Dict, Any

from tortoise.queryset import QuerySet


class Paginate(NamedTuple):
    page: int = 1
    per_page: int = 10


class FilterQuery(NamedTuple):
    """A search made up of field filters and the page to fetch."""

    filters: Optional[Dict[str, Any]]
    paginate: Paginate


def build_paginate(paginate: Paginate, query: QuerySet) -> QuerySet:
    """Limits the query to the requested page."""
    return query.offset((paginate.page - 1) * paginate.per_page).limit(paginate.per_page)
