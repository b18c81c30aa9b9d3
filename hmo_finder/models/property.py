"""Property listing models."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, fields
from datetime import datetime


@dataclass(frozen=True)
class PropertyInput:
    """Candidate listing as produced by a generator or submitted by a client."""

    address: str
    postcode: str
    price: int  # Whole pounds
    size: int  # Square meters
    bedrooms: int
    bathrooms: int
    latitude: float | None = None
    longitude: float | None = None
    image_url: str | None = None
    prime_location_url: str | None = None
    description: str | None = None
    has_garden: bool = False
    has_parking: bool = False
    is_article4: bool = False
    yearly_profit: int | None = None
    left_in_deal: int | None = None


@dataclass(frozen=True)
class PropertyRecord:
    """Stored listing with its id and creation timestamp."""

    property_id: str
    address: str
    postcode: str
    price: int
    size: int
    bedrooms: int
    bathrooms: int
    latitude: float | None = None
    longitude: float | None = None
    image_url: str | None = None
    prime_location_url: str | None = None
    description: str | None = None
    has_garden: bool = False
    has_parking: bool = False
    is_article4: bool = False
    yearly_profit: int | None = None
    left_in_deal: int | None = None
    created_at: datetime | None = None

    @classmethod
    def create(
        cls,
        candidate: PropertyInput,
        created_at: datetime | None = None,
    ) -> PropertyRecord:
        """Build a record from a candidate, assigning a fresh id and timestamp."""
        values = {f.name: getattr(candidate, f.name) for f in fields(PropertyInput)}
        return cls(
            property_id=str(uuid.uuid4()),
            created_at=created_at or datetime.now(),
            **values,
        )


INPUT_FIELDS: frozenset[str] = frozenset(f.name for f in fields(PropertyInput))
