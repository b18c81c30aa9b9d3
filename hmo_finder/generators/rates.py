"""Local Housing Allowance room rates and the deal profit model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LhaRate:
    """Monthly room rates by number of rooms."""

    one_room: int
    two_room: int
    three_room: int
    four_room: int

    def for_bedrooms(self, bedrooms: int) -> int:
        """Rate applied per room for a house with ``bedrooms`` bedrooms."""
        if bedrooms <= 1:
            return self.one_room
        if bedrooms == 2:
            return self.two_room
        if bedrooms == 3:
            return self.three_room
        return self.four_room


# Mock figures; the published rates come from the VOA
CITY_RATES: dict[str, LhaRate] = {
    "Birmingham": LhaRate(350, 450, 550, 650),
    "Manchester": LhaRate(380, 480, 580, 680),
    "London": LhaRate(950, 1250, 1450, 1650),
}
DEFAULT_CITY_RATE = LhaRate(300, 400, 500, 600)

AREA_RATES: dict[str, LhaRate] = {
    "B1": LhaRate(350, 450, 550, 650),
    "B2": LhaRate(330, 430, 530, 630),
    "B3": LhaRate(320, 420, 520, 620),
    "B4": LhaRate(340, 440, 540, 640),
    "B5": LhaRate(310, 410, 510, 610),
    "B6": LhaRate(360, 460, 560, 660),
}
DEFAULT_AREA = "B1"

OPERATING_COST_PERCENT = 30
DEPOSIT_PERCENT = 10
MORTGAGE_RATE_PERCENT = 5


def lha_rates_for_city(city: str) -> LhaRate:
    """Return the rate table for a city, or the default table."""
    return CITY_RATES.get(city, DEFAULT_CITY_RATE)


def lha_rates_for_postcode(postcode: str) -> LhaRate:
    """Return the rate table for the first two characters of a postcode."""
    area = postcode.strip()[:2].upper()
    return AREA_RATES.get(area, AREA_RATES[DEFAULT_AREA])


def yearly_profit(bedrooms: int, city: str) -> int:
    """Estimate yearly profit from letting every bedroom at the LHA rate.

    Examples
    --------
    >>> yearly_profit(4, "Birmingham")
    21840
    """
    monthly_rent = lha_rates_for_city(city).for_bedrooms(bedrooms) * bedrooms
    yearly_rent = monthly_rent * 12
    return yearly_rent * (100 - OPERATING_COST_PERCENT) // 100


def left_in_deal(price: int, profit: int) -> int:
    """Cash left in the deal after one year on an interest-only mortgage."""
    # Ten-thousandths of a pound keep the arithmetic exact
    deposit = price * DEPOSIT_PERCENT * 100
    mortgage_payment = price * (100 - DEPOSIT_PERCENT) * MORTGAGE_RATE_PERCENT
    return (deposit + profit * 10_000 - mortgage_payment) // 10_000
