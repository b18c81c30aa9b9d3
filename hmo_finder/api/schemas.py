"""Request bodies for the HTTP API."""

from pydantic import BaseModel, ConfigDict, Field

from hmo_finder.models.enums import SortKey
from hmo_finder.models.property import PropertyInput
from hmo_finder.models.search import SearchFilters
from hmo_finder.serialization import to_camel


class CamelModel(BaseModel):
    """Accept camelCase JSON keys as well as the snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PropertyIn(CamelModel):
    address: str = Field(min_length=1)
    postcode: str = Field(min_length=1)
    price: int = Field(ge=0)
    size: int = Field(ge=0)
    bedrooms: int = Field(ge=0)
    bathrooms: int = Field(ge=0)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    image_url: str | None = None
    prime_location_url: str | None = None
    description: str | None = None
    has_garden: bool = False
    has_parking: bool = False
    is_article4: bool = False
    yearly_profit: int | None = None
    left_in_deal: int | None = None

    def to_input(self) -> PropertyInput:
        return PropertyInput(**self.model_dump())


class PropertyPatch(CamelModel):
    """Partial property; omitted and null fields are left unchanged.

    Unknown keys are passed through so the store can reject them.
    """

    model_config = ConfigDict(extra="allow")

    address: str | None = Field(default=None, min_length=1)
    postcode: str | None = Field(default=None, min_length=1)
    price: int | None = Field(default=None, ge=0)
    size: int | None = Field(default=None, ge=0)
    bedrooms: int | None = Field(default=None, ge=0)
    bathrooms: int | None = Field(default=None, ge=0)
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    image_url: str | None = None
    prime_location_url: str | None = None
    description: str | None = None
    has_garden: bool | None = None
    has_parking: bool | None = None
    is_article4: bool | None = None
    yearly_profit: int | None = None
    left_in_deal: int | None = None

    def changes(self) -> dict[str, object]:
        return self.model_dump(exclude_none=True)


class SearchRequest(CamelModel):
    query: str = ""
    radius: float = Field(default=10, ge=0)
    max_price: int | None = Field(default=500_000, ge=0)
    min_size: int | None = Field(default=90, ge=0)
    exclude_article4: bool = True
    sort_by: SortKey | None = None

    def to_filters(self) -> SearchFilters:
        return SearchFilters(
            query=self.query,
            radius=self.radius,
            max_price=self.max_price,
            min_size=self.min_size,
            exclude_article4=self.exclude_article4,
            sort_by=self.sort_by,
        )


class RefreshRequest(CamelModel):
    """Refresh criteria; omitted values fall back to the refresh config."""

    city: str | None = None
    max_price: int | None = Field(default=None, ge=0)
    min_area: int | None = Field(default=None, ge=0)


class ScrapeRequest(RefreshRequest):
    city: str = Field(min_length=1)


class Article4CheckRequest(BaseModel):
    latitude: float = Field(ge=-90, le=90)
    longitude: float = Field(ge=-180, le=180)
