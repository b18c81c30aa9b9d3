"""Tests for listing generators, city profiles and LHA rates."""

import random

import pytest
from faker import Faker

from hmo_finder.generators import (
    CityAddressFactory,
    CuratedPropertySource,
    PropertyGenerator,
    RecordGenerator,
    available_cities,
)
from hmo_finder.generators.cities import CITY_PROFILES, DEFAULT_CENTRE
from hmo_finder.generators.curated import ADDITIONAL_LISTINGS, CURATED_LISTINGS
from hmo_finder.generators.rates import (
    AREA_RATES,
    CITY_RATES,
    DEFAULT_CITY_RATE,
    LhaRate,
    left_in_deal,
    lha_rates_for_city,
    lha_rates_for_postcode,
    yearly_profit,
)
from hmo_finder.models.property import PropertyInput


class TestPropertyGenerator:
    """Tests for PropertyGenerator."""

    def test_batch_size(self, seed: int) -> None:
        """Test that a refresh batch holds 8 to 10 listings."""
        gen = PropertyGenerator(seed=seed)

        for _ in range(20):
            assert 8 <= len(gen.generate("Birmingham")) <= 10

    def test_generate_batch_count(self, seed: int) -> None:
        gen = PropertyGenerator(seed=seed)

        assert len(list(gen.generate_batch("Leeds", 25))) == 25

    def test_price_and_size_bounds(self, seed: int) -> None:
        """Test that listings respect the price ceiling and size floor."""
        gen = PropertyGenerator(seed=seed)

        for listing in gen.generate_batch("Manchester", 100, max_price=350_000, min_size=110):
            assert 200_000 <= listing.price <= 350_000
            assert 110 <= listing.size <= 110 + PropertyGenerator.SIZE_SPREAD

    def test_ceiling_below_price_floor(self, seed: int) -> None:
        """Test that a ceiling under the usual floor pins the price to it."""
        gen = PropertyGenerator(seed=seed)

        prices = {listing.price for listing in gen.generate_batch("Leeds", 10, max_price=150_000)}

        assert prices == {150_000}

    def test_listing_fields(self, seed: int) -> None:
        """Test the shape of a generated listing."""
        gen = PropertyGenerator(seed=seed)

        for listing in gen.generate_batch("Birmingham", 30):
            assert isinstance(listing, PropertyInput)
            assert listing.address.endswith(", Birmingham")
            assert listing.postcode.split()[0] in CITY_PROFILES["Birmingham"].districts
            assert 3 <= listing.bedrooms <= 5
            assert 1 <= listing.bathrooms <= 2
            assert listing.yearly_profit == yearly_profit(listing.bedrooms, "Birmingham")
            assert listing.left_in_deal == left_in_deal(listing.price, listing.yearly_profit)
            assert listing.description is not None
            assert len(listing.description) <= 200
            assert listing.image_url is not None
            assert listing.image_url.startswith("https://placehold.co/")
            assert listing.prime_location_url is not None
            assert listing.prime_location_url.startswith(
                (
                    "https://www.rightmove.co.uk/properties/",
                    "https://www.zoopla.co.uk/for-sale/details/",
                    "https://www.onthemarket.com/details/",
                )
            )

    def test_article4_mix(self, seed: int) -> None:
        """Test that some but not all listings fall in Article 4 areas."""
        gen = PropertyGenerator(seed=seed)

        flags = [listing.is_article4 for listing in gen.generate_batch("Leeds", 200)]

        assert any(flags)
        assert not all(flags)

    def test_reproducibility(self, seed: int) -> None:
        """Test that the same seed yields the same listings."""
        first = PropertyGenerator(seed=seed).generate("Sheffield")
        second = PropertyGenerator(seed=seed).generate("Sheffield")

        assert first == second

    def test_unknown_city(self, seed: int) -> None:
        """Test generation for a city without a profile."""
        gen = PropertyGenerator(seed=seed)

        for listing in gen.generate_batch("Bristol", 10):
            assert listing.address.endswith(", Bristol")
            assert listing.postcode
            assert listing.yearly_profit == yearly_profit(listing.bedrooms, "Bristol")

    def test_satisfies_record_generator(self, seed: int) -> None:
        source: RecordGenerator = PropertyGenerator(seed=seed)

        assert source.generate("Leeds", 400_000, 90)


class TestCityAddressFactory:
    """Tests for CityAddressFactory."""

    @pytest.fixture
    def factory(self, seed: int) -> CityAddressFactory:
        fake = Faker("en_GB")
        fake.seed_instance(seed)
        return CityAddressFactory(fake, random.Random(seed))

    def test_available_cities(self) -> None:
        cities = available_cities()

        assert "Birmingham" in cities
        assert "Manchester" in cities
        assert cities == list(CITY_PROFILES)

    def test_profiled_address(self, factory: CityAddressFactory) -> None:
        """Test "<number> <street>, <area>, <city>" for a profiled city."""
        profile = CITY_PROFILES["Leeds"]

        for _ in range(20):
            street_part, area, city = factory.address("Leeds").split(", ")
            number, street = street_part.split(" ", 1)
            assert 1 <= int(number) <= 200
            assert street in profile.streets
            assert area in profile.areas
            assert city == "Leeds"

    def test_profiled_postcode(self, factory: CityAddressFactory) -> None:
        profile = CITY_PROFILES["Manchester"]

        for _ in range(20):
            district, inward = factory.postcode("Manchester").split()
            assert district in profile.districts
            assert len(inward) == 3
            assert inward[0].isdigit()
            assert inward[1:].isalpha() and inward[1:].isupper()

    def test_coordinates_near_centre(self, factory: CityAddressFactory) -> None:
        profile = CITY_PROFILES["Nottingham"]

        for _ in range(20):
            lat, lng = factory.coordinates("Nottingham")
            assert abs(lat - profile.latitude) <= 0.01
            assert abs(lng - profile.longitude) <= 0.01

    def test_fallback_city(self, factory: CityAddressFactory) -> None:
        """Test Faker fallback for a city without a profile."""
        assert factory.address("Truro").endswith(", Truro")
        assert factory.postcode("Truro")

        lat, lng = factory.coordinates("Truro")
        assert abs(lat - DEFAULT_CENTRE[0]) <= 0.01
        assert abs(lng - DEFAULT_CENTRE[1]) <= 0.01


class TestCuratedPropertySource:
    """Tests for CuratedPropertySource."""

    def test_city_listings_with_extras(self, seed: int) -> None:
        """Test that a curated city gets its listings plus one to three extras."""
        source = CuratedPropertySource(seed=seed)

        listings = source.generate("Birmingham")

        curated = CURATED_LISTINGS["Birmingham"]
        assert listings[: len(curated)] == curated
        assert 1 <= len(listings) - len(curated) <= len(ADDITIONAL_LISTINGS)

    def test_extras_relocated(self, seed: int) -> None:
        """Test that extras carry the requested city in their address."""
        source = CuratedPropertySource(seed=seed)

        for _ in range(10):
            listings = source.generate("Sheffield")
            for extra in listings[len(CURATED_LISTINGS["Sheffield"]):]:
                assert extra.address.endswith("Sheffield")
                assert "Leeds" not in extra.address
                assert "Manchester" not in extra.address

    def test_unknown_city_is_empty(self, seed: int) -> None:
        assert CuratedPropertySource(seed=seed).generate("Leeds") == []

    def test_curated_listings_pass_default_filters(self) -> None:
        """Test that seed listings are outside Article 4 areas and at least 95 sqm."""
        everything = [*ADDITIONAL_LISTINGS]
        for listings in CURATED_LISTINGS.values():
            everything.extend(listings)

        assert all(not listing.is_article4 for listing in everything)
        assert all(listing.size >= 95 for listing in everything)


class TestRates:
    """Tests for LHA rate lookups and the profit model."""

    def test_for_bedrooms(self) -> None:
        rate = LhaRate(1, 2, 3, 4)

        assert rate.for_bedrooms(0) == 1
        assert rate.for_bedrooms(1) == 1
        assert rate.for_bedrooms(2) == 2
        assert rate.for_bedrooms(3) == 3
        assert rate.for_bedrooms(6) == 4

    def test_city_lookup(self) -> None:
        assert lha_rates_for_city("Manchester") == CITY_RATES["Manchester"]
        assert lha_rates_for_city("Leeds") == DEFAULT_CITY_RATE

    def test_postcode_lookup(self) -> None:
        """Test lookup by the first two postcode characters."""
        assert lha_rates_for_postcode("b29 6AA") == AREA_RATES["B2"]
        assert lha_rates_for_postcode(" B5 7RX") == AREA_RATES["B5"]
        assert lha_rates_for_postcode("M14 6UH") == AREA_RATES["B1"]

    def test_yearly_profit(self) -> None:
        """Test rent for every bedroom less operating costs."""
        assert yearly_profit(4, "Birmingham") == 21_840
        assert yearly_profit(3, "Leeds") == 500 * 3 * 12 * 70 // 100

    def test_left_in_deal(self) -> None:
        """Test deposit plus a year's profit less mortgage interest."""
        assert left_in_deal(300_000, 21_840) == 30_000 + 21_840 - 13_500
        assert left_in_deal(0, 0) == 0
