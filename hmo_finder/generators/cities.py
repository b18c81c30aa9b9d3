"""UK city profiles for listing address generation."""

from __future__ import annotations

import random
import string
from dataclasses import dataclass

from faker import Faker


@dataclass(frozen=True)
class CityProfile:
    """Street, area and postcode material for one city.

    Parameters
    ----------
    name : str
        City name as shown in addresses.
    latitude, longitude : float
        Approximate city centre.
    streets : tuple[str, ...]
        Street names typical of the city's HMO stock.
    areas : tuple[str, ...]
        Neighbourhoods appended to addresses.
    districts : tuple[str, ...]
        Outward postcode districts (e.g. ``B29``).
    """

    name: str
    latitude: float
    longitude: float
    streets: tuple[str, ...]
    areas: tuple[str, ...]
    districts: tuple[str, ...]


CITY_PROFILES: dict[str, CityProfile] = {
    "Birmingham": CityProfile(
        name="Birmingham",
        latitude=52.4862,
        longitude=-1.8904,
        streets=(
            "Soho Road", "Stratford Road", "Moseley Road", "Pershore Road",
            "Kings Heath High Street", "Handsworth Wood Road", "Lozells Road",
            "Villa Road", "Bristol Road", "Hagley Road",
        ),
        areas=(
            "Handsworth", "Sparkhill", "Balsall Heath", "Selly Oak",
            "Kings Heath", "Moseley", "Erdington", "Aston",
        ),
        districts=("B1", "B11", "B12", "B14", "B21", "B29"),
    ),
    "Manchester": CityProfile(
        name="Manchester",
        latitude=53.4808,
        longitude=-2.2426,
        streets=(
            "Oxford Road", "Wilmslow Road", "Dickenson Road", "Portland Street",
            "Mauldeth Road", "Chorlton Road", "Princess Street", "Deansgate",
        ),
        areas=(
            "Longsight", "Fallowfield", "Rusholme", "City Centre",
            "Whalley Range", "Chorlton", "Didsbury", "Withington",
        ),
        districts=("M1", "M13", "M14", "M16"),
    ),
    "Leeds": CityProfile(
        name="Leeds",
        latitude=53.8008,
        longitude=-1.5491,
        streets=(
            "Cardigan Road", "Hyde Park Road", "Brudenell Road", "Woodhouse Lane",
            "Otley Road", "Kirkstall Road", "Burley Road", "Headingley Lane",
        ),
        areas=(
            "Headingley", "Hyde Park", "Burley", "City Centre",
            "Woodhouse", "Holbeck", "Kirkstall", "Chapel Allerton",
        ),
        districts=("LS2", "LS4", "LS6", "LS11"),
    ),
    "Sheffield": CityProfile(
        name="Sheffield",
        latitude=53.3811,
        longitude=-1.4701,
        streets=(
            "Ecclesall Road", "Crookes Valley Road", "Commonside", "London Road",
            "Abbeydale Road", "Fulwood Road", "Glossop Road", "Sharrow Vale Road",
        ),
        areas=(
            "City Centre", "Crookes", "Walkley", "Nether Edge",
            "Broomhill", "Heeley", "Sharrow", "Fulwood",
        ),
        districts=("S1", "S6", "S7", "S10", "S11"),
    ),
    "Liverpool": CityProfile(
        name="Liverpool",
        latitude=53.4084,
        longitude=-2.9916,
        streets=(
            "Smithdown Road", "Mulgrave Street", "Ullet Road", "Aigburth Road",
            "Penny Lane", "Bold Street", "Hope Street", "Rodney Street",
        ),
        areas=(
            "Wavertree", "Toxteth", "Sefton Park", "Aigburth",
            "Mossley Hill", "Kensington", "Edge Hill", "Fairfield",
        ),
        districts=("L8", "L15", "L17", "L18"),
    ),
    "Nottingham": CityProfile(
        name="Nottingham",
        latitude=52.9548,
        longitude=-1.1581,
        streets=(
            "Mansfield Road", "Radford Road", "University Boulevard", "Derby Road",
            "Carlton Road", "Alfreton Road", "Woodborough Road", "Forest Road",
        ),
        areas=(
            "Carrington", "Hyson Green", "Radford", "Forest Fields",
            "Lenton", "Beeston", "West Bridgford", "Mapperley",
        ),
        districts=("NG5", "NG7"),
    ),
    "Leicester": CityProfile(
        name="Leicester",
        latitude=52.6369,
        longitude=-1.1398,
        streets=(
            "Narborough Road", "Evington Road", "Hinckley Road", "Belgrave Road",
            "London Road", "Melton Road", "Aylestone Road", "Welford Road",
        ),
        areas=(
            "City Centre", "Evington", "Clarendon Park", "Stoneygate",
            "Aylestone", "Highfields", "West End", "Belgrave",
        ),
        districts=("LE1", "LE3", "LE5"),
    ),
    "Newcastle": CityProfile(
        name="Newcastle",
        latitude=54.9783,
        longitude=-1.6178,
        streets=(
            "Chillingham Road", "Sandyford Road", "Gosforth High Street",
            "Westgate Road", "Jesmond Road", "Osborne Road", "Grainger Street",
        ),
        areas=(
            "Heaton", "Jesmond", "Gosforth", "City Centre",
            "Byker", "Walker", "Fenham", "Elswick",
        ),
        districts=("NE2", "NE3", "NE6"),
    ),
}

# Used for cities without a profile
DEFAULT_CENTRE = (51.5074, -0.1278)


def available_cities() -> list[str]:
    """Return the cities that have a generation profile."""
    return list(CITY_PROFILES)


class CityAddressFactory:
    """Generate addresses, postcodes and coordinates for UK cities.

    Cities with a profile use its street and area lists; any other city
    falls back to Faker ``en_GB`` street names and postcodes.

    Parameters
    ----------
    fake : Faker
        Faker instance used for the fallback path.
    rng : random.Random
        Random source shared with the owning generator.
    """

    def __init__(self, fake: Faker, rng: random.Random) -> None:
        self._fake = fake
        self._rng = rng

    def address(self, city: str) -> str:
        """Return ``"<number> <street>, <area>, <city>"``."""
        number = self._rng.randint(1, 200)
        profile = CITY_PROFILES.get(city)
        if profile is None:
            return f"{number} {self._fake.street_name()}, {city}"

        street = self._rng.choice(profile.streets)
        area = self._rng.choice(profile.areas)
        return f"{number} {street}, {area}, {city}"

    def postcode(self, city: str) -> str:
        """Return a postcode inside one of the city's districts."""
        profile = CITY_PROFILES.get(city)
        if profile is None:
            return self._fake.postcode()

        district = self._rng.choice(profile.districts)
        sector = self._rng.randint(1, 9)
        unit = "".join(self._rng.choice(string.ascii_uppercase) for _ in range(2))
        return f"{district} {sector}{unit}"

    def coordinates(self, city: str, spread: float = 0.02) -> tuple[float, float]:
        """Return a point jittered around the city centre."""
        profile = CITY_PROFILES.get(city)
        lat, lng = (profile.latitude, profile.longitude) if profile else DEFAULT_CENTRE
        return (
            lat + (self._rng.random() - 0.5) * spread,
            lng + (self._rng.random() - 0.5) * spread,
        )
