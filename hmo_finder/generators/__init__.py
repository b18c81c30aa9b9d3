"""Listing generators."""

from hmo_finder.generators.base import BaseGenerator, RecordGenerator
from hmo_finder.generators.cities import CityAddressFactory, available_cities
from hmo_finder.generators.curated import CuratedPropertySource
from hmo_finder.generators.property import PropertyGenerator

__all__ = [
    "BaseGenerator",
    "CityAddressFactory",
    "CuratedPropertySource",
    "PropertyGenerator",
    "RecordGenerator",
    "available_cities",
]
