"""In-memory log of submitted searches."""

from __future__ import annotations

import threading
import uuid
from collections import deque
from datetime import datetime

from hmo_finder.models.search import Search, SearchFilters


class SearchLog:
    """Bounded record of searches, newest kept when full."""

    def __init__(self, max_entries: int = 500) -> None:
        self._lock = threading.Lock()
        self._searches: deque[Search] = deque(maxlen=max_entries)

    def __len__(self) -> int:
        with self._lock:
            return len(self._searches)

    def record(self, filters: SearchFilters) -> Search:
        """Log a search and return the stored entry."""
        search = Search(
            search_id=str(uuid.uuid4()),
            query=filters.query,
            radius=filters.radius,
            max_price=filters.max_price,
            min_size=filters.min_size,
            exclude_article4=filters.exclude_article4,
            sort_by=filters.sort_by,
            created_at=datetime.now(),
        )
        with self._lock:
            self._searches.append(search)
        return search

    def recent(self, limit: int = 10) -> list[Search]:
        """Return up to ``limit`` searches, most recent first."""
        with self._lock:
            searches = list(reversed(self._searches))
        searches.sort(key=lambda s: s.created_at or datetime.min, reverse=True)
        return searches[:limit]
