"""Hand-picked listings used to seed the store at start-up."""

from __future__ import annotations

import random
import re
from dataclasses import replace

from hmo_finder.models.property import PropertyInput


def _listing(
    address: str,
    postcode: str,
    price: int,
    size: int,
    bedrooms: int,
    bathrooms: int,
    coordinates: tuple[float, float],
    url: str,
    description: str,
    garden: bool,
    parking: bool,
    yearly_profit: int,
    left_in_deal: int,
) -> PropertyInput:
    return PropertyInput(
        address=address,
        postcode=postcode,
        price=price,
        size=size,
        bedrooms=bedrooms,
        bathrooms=bathrooms,
        latitude=coordinates[0],
        longitude=coordinates[1],
        prime_location_url=url,
        description=description,
        has_garden=garden,
        has_parking=parking,
        is_article4=False,
        yearly_profit=yearly_profit,
        left_in_deal=left_in_deal,
    )


CURATED_LISTINGS: dict[str, list[PropertyInput]] = {
    "Birmingham": [
        _listing(
            "45 Soho Road, Handsworth, Birmingham", "B21 9DT", 450_000, 120, 5, 2,
            (52.5105, -1.9026),
            "https://www.rightmove.co.uk/properties/145628421#/",
            "Large Victorian terrace with HMO potential in popular Handsworth area.",
            True, True, 32_400, 12_600,
        ),
        _listing(
            "128 Stratford Road, Sparkhill, Birmingham", "B11 1AR", 385_000, 95, 4, 2,
            (52.4592, -1.8633),
            "https://www.zoopla.co.uk/for-sale/details/13456789/",
            "Four bedroom semi-detached property ideal for HMO conversion in Sparkhill.",
            False, True, 28_800, 15_200,
        ),
        _listing(
            "67 Moseley Road, Balsall Heath, Birmingham", "B12 9QY", 420_000, 110, 5, 3,
            (52.4595, -1.8856),
            "https://www.onthemarket.com/details/14567890/",
            "Spacious Victorian terrace with planning permission for HMO conversion.",
            True, False, 35_100, 18_900,
        ),
    ],
    "Manchester": [
        _listing(
            "89 Oxford Road, Longsight, Manchester", "M13 9GP", 375_000, 105, 4, 2,
            (53.4572, -2.2051),
            "https://www.rightmove.co.uk/properties/146892345#/",
            "Four bedroom terrace close to the universities with HMO potential.",
            True, True, 30_400, 13_600,
        ),
        _listing(
            "156 Wilmslow Road, Fallowfield, Manchester", "M14 6UH", 465_000, 130, 6, 3,
            (53.4421, -2.2231),
            "https://www.zoopla.co.uk/for-sale/details/15678901/",
            "Six bedroom house in the heart of the Fallowfield student market.",
            False, True, 38_400, 22_800,
        ),
    ],
    "Sheffield": [
        _listing(
            "234 Ecclesall Road, Sheffield", "S11 8PR", 325_000, 98, 4, 2,
            (53.3661, -1.4961),
            "https://www.rightmove.co.uk/properties/147936521#/",
            "Period house on Ecclesall Road suited to professional HMO letting.",
            True, True, 28_400, 11_100,
        ),
        _listing(
            "45 Crookes Valley Road, Crookes, Sheffield", "S10 1NA", 285_000, 105, 5, 2,
            (53.3928, -1.5021),
            "https://www.zoopla.co.uk/for-sale/details/17890123/",
            "Five bedroom student house a short walk from the university.",
            False, True, 32_500, 18_000,
        ),
    ],
}

# Mixed into any city's seed with the city name swapped in
ADDITIONAL_LISTINGS: list[PropertyInput] = [
    _listing(
        "45 Woodhouse Lane, Leeds", "LS2 9JT", 315_000, 100, 4, 2,
        (53.8034, -1.5498),
        "https://www.rightmove.co.uk/properties/150597864#/",
        "Four bedroom house close to the city centre with HMO potential.",
        True, False, 28_800, 13_200,
    ),
    _listing(
        "78 Mauldeth Road, Fallowfield, Manchester", "M14 6HP", 395_000, 115, 5, 3,
        (53.4351, -2.2198),
        "https://www.zoopla.co.uk/for-sale/details/23456789/",
        "Large five bedroom house with existing HMO planning.",
        False, True, 33_600, 19_100,
    ),
    _listing(
        "89 Hyde Park Road, Hyde Park, Leeds", "LS6 1AD", 295_000, 95, 4, 2,
        (53.8051, -1.5698),
        "https://www.zoopla.co.uk/for-sale/details/21234567/",
        "Four bedroom terrace in Hyde Park, let to students until next summer.",
        False, False, 27_600, 12_100,
    ),
]

_SWAPPABLE_CITY = re.compile(r"Leeds|Manchester")


class CuratedPropertySource:
    """Serve the curated listings through the record generator interface.

    Cities without curated listings yield an empty list, which callers treat
    as "fall back to the randomized generator".
    """

    def __init__(self, seed: int | None = None) -> None:
        self.random = random.Random(seed)

    def generate(
        self,
        city: str,
        max_price: int = 500_000,
        min_size: int = 90,
    ) -> list[PropertyInput]:
        """Return the city's curated listings plus one to three extras."""
        listings = list(CURATED_LISTINGS.get(city, []))
        if not listings:
            return []

        extras = self.random.sample(
            ADDITIONAL_LISTINGS, self.random.randint(1, len(ADDITIONAL_LISTINGS))
        )
        for extra in extras:
            listings.append(_relocate(extra, city))
        return listings


def _relocate(listing: PropertyInput, city: str) -> PropertyInput:
    """Return a copy of ``listing`` with its address moved to ``city``."""
    return replace(listing, address=_SWAPPABLE_CITY.sub(city, listing.address, count=1))
