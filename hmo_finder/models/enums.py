"""Enumeration types for listing entities."""

from enum import Enum


class SortKey(str, Enum):
    PROFIT = "profit"
    PRICE = "price"
    SIZE = "size"
    RECENT = "recent"


class ListingSource(str, Enum):
    RIGHTMOVE = "rightmove"
    ZOOPLA = "zoopla"
    ONTHEMARKET = "onthemarket"
