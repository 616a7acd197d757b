"""
Route Search Module

Public route search and fare lookup for the minibus network:

- Search of active departures between two cities
- City lists for the search form
- Per-passenger price lookup with a default fare for unlisted routes

Key Components:
- service.py: Schedule-backed route search
- fare_service.py: Price lookup and booking total quotes
- router.py: FastAPI endpoints for search and quotes
- schemas.py: Pydantic models for request/response structures
"""

from .router import router
from .service import RouteService
from .fare_service import FareCalculationService, lookup_price
from .schemas import RouteSearchResult, RouteSearchResponse, CityList, FareQuote

__all__ = [
    "router",
    "RouteService",
    "FareCalculationService",
    "lookup_price",
    "RouteSearchResult",
    "RouteSearchResponse",
    "CityList",
    "FareQuote"
]
