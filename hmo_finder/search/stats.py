"""Aggregate statistics over a listing snapshot."""

from typing import Sequence

from hmo_finder.models.property import PropertyRecord
from hmo_finder.models.search import PropertyStats


def compute_stats(properties: Sequence[PropertyRecord]) -> PropertyStats:
    """Count listings and average their price and size.

    The averages of an empty snapshot are ``0.0``.
    """
    total = len(properties)
    if not total:
        return PropertyStats(0, 0, 0.0, 0.0)

    return PropertyStats(
        total_properties=total,
        non_article4_properties=sum(1 for p in properties if not p.is_article4),
        average_price=sum(p.price for p in properties) / total,
        average_size=sum(p.size or 0 for p in properties) / total,
    )
