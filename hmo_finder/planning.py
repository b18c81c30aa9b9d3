"""Article 4 direction lookups."""

from __future__ import annotations

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Article4Result:
    latitude: float
    longitude: float
    is_article4: bool

    @property
    def message(self) -> str:
        if self.is_article4:
            return "Property is within an Article 4 direction area"
        return "Property is not within an Article 4 direction area"


class Article4Checker:
    """Mock Article 4 lookup.

    No boundary data is consulted: a point falls inside an Article 4 area
    with probability ``article4_rate``.
    """

    def __init__(self, article4_rate: float = 0.2, seed: int | None = None) -> None:
        self.article4_rate = article4_rate
        self.random = random.Random(seed)

    def check(self, latitude: float, longitude: float) -> Article4Result:
        return Article4Result(
            latitude=latitude,
            longitude=longitude,
            is_article4=self.random.random() < self.article4_rate,
        )
