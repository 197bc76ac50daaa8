"""Helpers for reading aggregates through a repository's DAO query."""

import math
from dataclasses import dataclass

DEFAULT_BATCH_SIZE = 100


@dataclass(frozen=True)
class Page:
    items: list
    page: int
    limit: int
    total: int

    @property
    def pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    def pagination(self) -> dict:
        return {"page": self.page, "limit": self.limit, "total": self.total, "pages": self.pages}


def paginate(query, page: int, limit: int) -> Page:
    """Fetch one page (1-based) of ``query``."""
    results = query.offset((page - 1) * limit).limit(limit).all()
    return Page(items=list(results.items), page=page, limit=limit, total=results.total)


def fetch_all(query, batch_size: int = DEFAULT_BATCH_SIZE) -> list:
    """Read every record matched by ``query``, batch by batch.

    Queries are capped at a default limit, so "all reviews for a product"
    has to walk the result set explicitly.
    """
    records = []
    offset = 0
    while True:
        results = query.offset(offset).limit(batch_size).all()
        records.extend(results.items)
        offset += batch_size
        if not results.items or offset >= results.total:
            return records
