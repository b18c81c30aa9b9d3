"""Relaxed filtering, backfill and ranking of listings."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from hmo_finder.config import SearchPolicy
from hmo_finder.models.enums import SortKey
from hmo_finder.models.property import PropertyRecord
from hmo_finder.models.search import PropertyStats, SearchFilters
from hmo_finder.search.stats import compute_stats
from hmo_finder.store.memory import PropertyStore

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1)

_SORT_KEYS: dict[SortKey, tuple[Callable[[PropertyRecord], object], bool]] = {
    SortKey.PROFIT: (lambda p: p.yearly_profit or 0, True),
    SortKey.PRICE: (lambda p: p.price, False),
    SortKey.SIZE: (lambda p: p.size or 0, True),
    SortKey.RECENT: (lambda p: p.created_at or EPOCH, True),
}


class PropertySearch:
    """Answer listing queries over a ``PropertyStore``.

    Filters are applied loosely: each narrowing step is kept only if it
    leaves enough results, and a thin result set is padded from the rest of
    the snapshot so a client never sees an empty grid while listings exist.

    Parameters
    ----------
    store : PropertyStore
        Store holding the current snapshot.
    refill : Callable[[], object] | None
        Called when the store is empty before a query. Exceptions it raises
        are logged and the query proceeds on whatever the store holds.
    policy : SearchPolicy | None
        Relaxation thresholds.
    """

    def __init__(
        self,
        store: PropertyStore,
        refill: Callable[[], object] | None = None,
        policy: SearchPolicy | None = None,
    ) -> None:
        self.store = store
        self.policy = policy or SearchPolicy()
        self._refill = refill

    def query(self, filters: SearchFilters | None = None) -> list[PropertyRecord]:
        """Return listings matching ``filters`` as closely as the snapshot allows.

        Parameters
        ----------
        filters : SearchFilters | None
            Query to apply. ``None`` returns the snapshot unfiltered.

        Returns
        -------
        list[PropertyRecord]
            Filtered, backfilled and sorted listings.
        """
        snapshot = self._snapshot()
        if filters is None:
            return snapshot

        working = self._narrow(snapshot, filters)
        working = self._backfill(working, snapshot)
        return sort_properties(working, filters.sort_by)

    def stats(self) -> PropertyStats:
        """Aggregate figures over the current snapshot."""
        return compute_stats(self.store.list())

    def _snapshot(self) -> list[PropertyRecord]:
        snapshot = self.store.list()
        if snapshot or self._refill is None:
            return snapshot

        logger.info("No properties in store, generating fresh properties")
        try:
            self._refill()
        except Exception:
            logger.exception("Refill of empty store failed")
        return self.store.list()

    def _narrow(
        self,
        working: list[PropertyRecord],
        filters: SearchFilters,
    ) -> list[PropertyRecord]:
        policy = self.policy

        if filters.max_price is not None:
            ceiling = filters.max_price + policy.price_tolerance
            working = self._accept_if_enough(working, [p for p in working if p.price <= ceiling])

        if filters.min_size is not None:
            floor = max(policy.size_floor, filters.min_size - policy.size_relaxation)
            working = self._accept_if_enough(working, [p for p in working if p.size >= floor])

        if filters.exclude_article4:
            working = self._accept_if_enough(working, [p for p in working if not p.is_article4])

        if filters.query:
            needle = filters.query.lower()
            matched = [p for p in working if _matches_text(p, needle)]
            if matched:
                working = matched

        return working

    def _accept_if_enough(
        self,
        current: list[PropertyRecord],
        narrowed: list[PropertyRecord],
    ) -> list[PropertyRecord]:
        if len(narrowed) >= self.policy.min_narrowed_results:
            return narrowed
        return current

    def _backfill(
        self,
        working: list[PropertyRecord],
        snapshot: list[PropertyRecord],
    ) -> list[PropertyRecord]:
        policy = self.policy
        if len(working) >= policy.min_results:
            return working

        logger.debug(
            "Only %d properties after filtering, backfilling to %d",
            len(working),
            policy.min_results,
        )
        included = {p.property_id for p in working}
        needed = max(policy.min_results - len(working), policy.min_backfill)
        extra = [p for p in snapshot if p.property_id not in included][:needed]
        working = working + extra

        if len(working) < policy.min_results:
            # Whole store is smaller than the minimum; hand back what exists
            working = snapshot[: max(policy.small_store_cap, len(working))]
        return working


def sort_properties(
    properties: list[PropertyRecord],
    sort_by: SortKey | None,
) -> list[PropertyRecord]:
    """Return ``properties`` ordered by ``sort_by``; unchanged order if ``None``."""
    if sort_by is None:
        return list(properties)
    key, descending = _SORT_KEYS[SortKey(sort_by)]
    return sorted(properties, key=key, reverse=descending)


def _matches_text(prop: PropertyRecord, needle: str) -> bool:
    return (
        needle in prop.address.lower()
        or needle in prop.postcode.lower()
        or (prop.description is not None and needle in prop.description.lower())
    )
