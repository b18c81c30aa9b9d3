"""Domain models for property listings."""

from hmo_finder.models.enums import ListingSource, SortKey
from hmo_finder.models.property import PropertyInput, PropertyRecord
from hmo_finder.models.search import PropertyStats, Search, SearchFilters

__all__ = [
    "ListingSource",
    "PropertyInput",
    "PropertyRecord",
    "PropertyStats",
    "Search",
    "SearchFilters",
    "SortKey",
]
