"""In-memory stores for listings and searches."""

from hmo_finder.store.memory import PropertyStore
from hmo_finder.store.searches import SearchLog

__all__ = ["PropertyStore", "SearchLog"]
