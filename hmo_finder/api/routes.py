"""HTTP routes for listings, searches, stats and refreshes."""

import logging
from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, Depends, Query, Request, Response

from hmo_finder.api.schemas import (
    Article4CheckRequest,
    PropertyIn,
    PropertyPatch,
    RefreshRequest,
    ScrapeRequest,
    SearchRequest,
)
from hmo_finder.api.services import Services
from hmo_finder.exceptions import PropertyNotFoundError
from hmo_finder.generators.rates import lha_rates_for_postcode
from hmo_finder.models.enums import SortKey
from hmo_finder.models.search import SearchFilters
from hmo_finder.serialization import to_dict, to_dicts

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def get_services(request: Request) -> Services:
    return request.app.state.services


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/properties")
def list_properties(
    query: str = "",
    radius: float = Query(10, ge=0),
    max_price: int | None = Query(None, alias="maxPrice", ge=0),
    min_size: int | None = Query(None, alias="minSize", ge=0),
    exclude_article4: bool = Query(False, alias="excludeArticle4"),
    sort_by: SortKey | None = Query(None, alias="sortBy"),
    services: Services = Depends(get_services),
) -> list[dict[str, Any]]:
    filters = SearchFilters(
        query=query,
        radius=radius,
        max_price=max_price,
        min_size=min_size,
        exclude_article4=exclude_article4,
        sort_by=sort_by,
    )
    return to_dicts(services.search.query(filters))


@router.get("/properties/{property_id}")
def get_property(property_id: str, services: Services = Depends(get_services)) -> dict[str, Any]:
    return to_dict(services.store.get(property_id))


@router.post("/properties", status_code=201)
def create_property(
    body: PropertyIn,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    return to_dict(services.store.create(body.to_input()))


@router.patch("/properties/{property_id}")
def update_property(
    property_id: str,
    body: PropertyPatch,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    return to_dict(services.store.update(property_id, body.changes()))


@router.delete("/properties/{property_id}", status_code=204)
def delete_property(property_id: str, services: Services = Depends(get_services)) -> Response:
    if not services.store.delete(property_id):
        raise PropertyNotFoundError(property_id)
    return Response(status_code=204)


@router.post("/properties/refresh")
def refresh_properties(
    body: RefreshRequest | None = None,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    body = body or RefreshRequest()
    result = services.refresh.refresh(body.city, body.max_price, body.min_area)
    return {
        "message": f"Successfully refreshed with {len(result.properties)} new properties from {result.city}",
        "properties": to_dicts(result.properties),
        "count": len(result.properties),
    }


@router.post("/properties/scrape")
def scrape_properties(
    body: ScrapeRequest,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    logger.info(
        "Searching HMO properties in %s with max price %s and min area %s sqm",
        body.city,
        body.max_price,
        body.min_area,
    )
    result = services.refresh.refresh(body.city, body.max_price, body.min_area)
    stored = result.properties
    return {
        "message": f"Successfully found {len(stored)} suitable HMO properties in {result.city}",
        "properties": to_dicts(stored),
        "count": len(stored),
        "criteria": {
            "city": result.city,
            "maxPrice": result.max_price,
            "minArea": result.min_size,
            "excludedArticle4": sum(1 for p in stored if not p.is_article4),
        },
    }


@router.get("/refresh/status")
def refresh_status(services: Services = Depends(get_services)) -> dict[str, Any]:
    status = services.auto_refresher.status()
    return {
        "running": status["running"],
        "currentCity": status["current_city"],
        "secondsUntilNext": status["seconds_until_next"],
        "intervalSeconds": status["interval_seconds"],
        "refreshInProgress": services.refresh.in_progress,
    }


@router.post("/search")
def search(body: SearchRequest, services: Services = Depends(get_services)) -> dict[str, Any]:
    filters = body.to_filters()
    logged = services.searches.record(filters)
    properties = services.search.query(filters)
    return {
        "search": to_dict(logged),
        "properties": to_dicts(properties),
        "count": len(properties),
    }


@router.get("/searches")
def recent_searches(
    limit: int = Query(10, ge=1, le=100),
    services: Services = Depends(get_services),
) -> list[dict[str, Any]]:
    return to_dicts(services.searches.recent(limit))


@router.get("/stats")
def stats(services: Services = Depends(get_services)) -> dict[str, Any]:
    return to_dict(services.search.stats())


@router.post("/check-article4")
def check_article4(
    body: Article4CheckRequest,
    services: Services = Depends(get_services),
) -> dict[str, Any]:
    result = services.article4.check(body.latitude, body.longitude)
    return {
        "latitude": result.latitude,
        "longitude": result.longitude,
        "isArticle4": result.is_article4,
        "message": result.message,
    }


@router.get("/lha-rates/{postcode}")
def lha_rates(postcode: str) -> dict[str, Any]:
    return {
        "postcode": postcode,
        "rates": to_dict(lha_rates_for_postcode(postcode)),
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
