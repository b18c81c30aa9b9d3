"""Search query and aggregate models."""

from dataclasses import dataclass
from datetime import datetime

from hmo_finder.models.enums import SortKey


@dataclass(frozen=True)
class SearchFilters:
    """Listing query.

    ``radius`` is carried through for the client but plays no part in
    filtering.
    """

    query: str = ""
    radius: float = 10
    max_price: int | None = None
    min_size: int | None = None
    exclude_article4: bool = False
    sort_by: SortKey | None = None


@dataclass(frozen=True)
class Search:
    """A submitted search as kept in the search log."""

    search_id: str
    query: str
    radius: float
    max_price: int | None
    min_size: int | None
    exclude_article4: bool
    sort_by: SortKey | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class PropertyStats:
    """Aggregate figures over the current snapshot."""

    total_properties: int
    non_article4_properties: int
    average_price: float
    average_size: float
