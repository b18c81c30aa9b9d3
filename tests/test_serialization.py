"""Tests for JSON serialization."""

import json
from datetime import date, datetime

from hmo_finder.generators.rates import LhaRate
from hmo_finder.models.enums import SortKey
from hmo_finder.models.property import PropertyInput, PropertyRecord
from hmo_finder.models.search import PropertyStats, Search
from hmo_finder.serialization import serialize_value, to_camel, to_dict, to_dicts


class TestToCamel:
    """Tests for to_camel."""

    def test_single_word(self) -> None:
        assert to_camel("price") == "price"

    def test_multiple_words(self) -> None:
        assert to_camel("prime_location_url") == "primeLocationUrl"

    def test_digits(self) -> None:
        assert to_camel("is_article4") == "isArticle4"
        assert to_camel("exclude_article4") == "excludeArticle4"


class TestSerializeValue:
    """Tests for serialize_value."""

    def test_datetime(self) -> None:
        assert serialize_value(datetime(2024, 1, 15, 10, 30)) == "2024-01-15T10:30:00"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 1, 15)) == "2024-01-15"

    def test_enum(self) -> None:
        assert serialize_value(SortKey.PROFIT) == "profit"

    def test_nested(self) -> None:
        assert serialize_value({"rates": [LhaRate(1, 2, 3, 4)]}) == {
            "rates": [{"oneRoom": 1, "twoRoom": 2, "threeRoom": 3, "fourRoom": 4}]
        }

    def test_passthrough(self) -> None:
        assert serialize_value(None) is None
        assert serialize_value(42) == 42
        assert serialize_value("x") == "x"


class TestToDict:
    """Tests for to_dict."""

    def test_property_record(self, sample_input: PropertyInput) -> None:
        """Test camelCase keys and the id alias."""
        record = PropertyRecord.create(sample_input, created_at=datetime(2024, 3, 1, 9, 0))

        data = to_dict(record)

        assert data["id"] == record.property_id
        assert "propertyId" not in data
        assert data["primeLocationUrl"] is None
        assert data["isArticle4"] is False
        assert data["yearlyProfit"] == 32_400
        assert data["leftInDeal"] == 12_600
        assert data["createdAt"] == "2024-03-01T09:00:00"
        json.dumps(data)

    def test_search(self) -> None:
        search = Search("s-1", "Leeds", 10, 400_000, None, True, SortKey.PRICE)

        data = to_dict(search)

        assert data["id"] == "s-1"
        assert data["sortBy"] == "price"
        assert data["minSize"] is None
        assert data["createdAt"] is None

    def test_stats(self) -> None:
        assert to_dict(PropertyStats(3, 2, 1.5, 2.5)) == {
            "totalProperties": 3,
            "nonArticle4Properties": 2,
            "averagePrice": 1.5,
            "averageSize": 2.5,
        }

    def test_dict(self) -> None:
        assert to_dict({"when": date(2024, 1, 1)}) == {"when": "2024-01-01"}

    def test_other(self) -> None:
        assert to_dict(5) == {"value": "5"}

    def test_to_dicts(self) -> None:
        assert to_dicts([PropertyStats(0, 0, 0.0, 0.0)] * 2) == [
            {
                "totalProperties": 0,
                "nonArticle4Properties": 0,
                "averagePrice": 0.0,
                "averageSize": 0.0,
            }
        ] * 2
