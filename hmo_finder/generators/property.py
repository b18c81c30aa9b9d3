"""Randomized HMO listing generator."""

from __future__ import annotations

from typing import Iterator
from urllib.parse import quote

from hmo_finder.generators.base import BaseGenerator
from hmo_finder.generators.cities import CityAddressFactory
from hmo_finder.generators.rates import left_in_deal, yearly_profit
from hmo_finder.models.enums import ListingSource
from hmo_finder.models.property import PropertyInput


class PropertyGenerator(BaseGenerator):
    """Generate synthetic HMO listings for a city.

    Stands in for scraping the listing portals: each call produces a batch
    of plausible listings priced under ``max_price`` and at least
    ``min_size`` square metres, with profit figures from the LHA model.
    """

    BATCH_SIZE_RANGE = (8, 10)
    PRICE_FLOOR = 200_000
    SIZE_SPREAD = 79
    BEDROOM_RANGE = (3, 5)
    BATHROOM_RANGE = (1, 2)

    GARDEN_RATE = 0.6
    PARKING_RATE = 0.7
    ARTICLE4_RATE = 0.25

    LISTING_ID_RANGES = {
        ListingSource.RIGHTMOVE: (85_000_000, 95_000_000),
        ListingSource.ZOOPLA: (70_000_000, 80_000_000),
        ListingSource.ONTHEMARKET: (55_000_000, 65_000_000),
    }

    DESCRIPTIONS = [
        "Victorian terrace with excellent HMO potential in popular area",
        "Spacious house ideal for HMO conversion with planning permission",
        "Large property perfect for HMO investment near universities",
        "Well-presented house with existing HMO license",
        "Investment opportunity with established HMO potential",
        "Multi-bedroom property suitable for HMO licensing",
        "House with HMO planning permission in student area",
        "Victorian house ideal for buy-to-let HMO investment",
    ]

    def __init__(self, seed: int | None = None) -> None:
        super().__init__(seed)
        self._addresses = CityAddressFactory(self.fake, self.random)

    def generate(
        self,
        city: str,
        max_price: int = 500_000,
        min_size: int = 90,
    ) -> list[PropertyInput]:
        """Generate a batch of listings for ``city``.

        Parameters
        ----------
        city : str
            City to place the listings in.
        max_price : int
            Upper bound for asking prices.
        min_size : int
            Lower bound for floor area in square metres.

        Returns
        -------
        list[PropertyInput]
            Between 8 and 10 candidate listings.
        """
        count = self.random.randint(*self.BATCH_SIZE_RANGE)
        return list(self.generate_batch(city, count, max_price, min_size))

    def generate_batch(
        self,
        city: str,
        count: int,
        max_price: int = 500_000,
        min_size: int = 90,
    ) -> Iterator[PropertyInput]:
        """Generate exactly ``count`` listings.

        Yields
        ------
        PropertyInput
            Generated listings.
        """
        for index in range(count):
            yield self._generate_one(city, index, max_price, min_size)

    def _generate_one(
        self,
        city: str,
        index: int,
        max_price: int,
        min_size: int,
    ) -> PropertyInput:
        """Generate a single listing."""
        low = min(self.PRICE_FLOOR, max_price)
        price = self.random.randint(low, max(low, max_price))
        size = self.random.randint(min_size, min_size + self.SIZE_SPREAD)
        bedrooms = self.random.randint(*self.BEDROOM_RANGE)
        bathrooms = self.random.randint(*self.BATHROOM_RANGE)
        latitude, longitude = self._addresses.coordinates(city)

        profit = yearly_profit(bedrooms, city)
        description = (
            f"{self.random.choice(self.DESCRIPTIONS)} with {bedrooms} bedrooms "
            f"and {bathrooms} bathrooms, {size}sqm."
        )

        return PropertyInput(
            address=self._addresses.address(city),
            postcode=self._addresses.postcode(city),
            price=price,
            size=size,
            bedrooms=bedrooms,
            bathrooms=bathrooms,
            latitude=latitude,
            longitude=longitude,
            image_url=f"https://placehold.co/800x600?text={quote(f'{city} HMO {index + 1}')}",
            prime_location_url=self._listing_url(),
            description=description[:200],
            has_garden=self.random.random() < self.GARDEN_RATE,
            has_parking=self.random.random() < self.PARKING_RATE,
            is_article4=self.random.random() < self.ARTICLE4_RATE,
            yearly_profit=profit,
            left_in_deal=left_in_deal(price, profit),
        )

    def _listing_url(self) -> str:
        """Return a portal URL with an id in the portal's usual range."""
        source = self.random.choice(list(ListingSource))
        listing_id = self.random.randint(*self.LISTING_ID_RANGES[source])
        if source == ListingSource.RIGHTMOVE:
            return f"https://www.rightmove.co.uk/properties/{listing_id}#/"
        if source == ListingSource.ZOOPLA:
            return f"https://www.zoopla.co.uk/for-sale/details/{listing_id}/"
        return f"https://www.onthemarket.com/details/{listing_id}/"
