from pydantic import BaseModel, Field
from typing import List, Optional

class RouteSearchResult(BaseModel):
    """Bookable departure for a city pair"""
    schedule_id: str
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    pickup_time: str
    category: str
    price: int

class RouteSearchResponse(BaseModel):
    route_from: str
    route_to: str
    results: List[RouteSearchResult]
    total_results: int

class CityList(BaseModel):
    origins: List[str]
    destinations: List[str]

class FareQuote(BaseModel):
    """Per-passenger price and total for a city pair"""
    route_from: str
    route_to: str
    price_per_passenger: int
    passengers: int = Field(..., ge=1)
    total_price: int
    is_fallback: bool = False
