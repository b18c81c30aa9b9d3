"""Listing search and aggregation."""

from hmo_finder.search.pipeline import PropertySearch, sort_properties
from hmo_finder.search.stats import compute_stats

__all__ = ["PropertySearch", "compute_stats", "sort_properties"]
