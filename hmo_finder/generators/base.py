"""Base generator class and the record generator interface."""

from __future__ import annotations

import random
from abc import ABC
from typing import Protocol

from faker import Faker

from hmo_finder.models.property import PropertyInput


class RecordGenerator(Protocol):
    """Anything that can produce candidate listings for a city."""

    def generate(self, city: str, max_price: int, min_size: int) -> list[PropertyInput]:
        ...


class BaseGenerator(ABC):
    """Base class for listing generators.

    Provides common initialization: a UK Faker instance and seed-based
    reproducibility.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_GB``).
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_GB",
    ) -> None:
        self.fake = Faker(locale)
        self.random = random.Random(seed)
        if seed is not None:
            self.fake.seed_instance(seed)
