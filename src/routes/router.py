import logging
from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List

from src.database import get_db
from src.routes.schemas import RouteSearchResponse, RouteSearchResult, CityList, FareQuote
from src.routes.service import RouteService
from src.routes.fare_service import FareCalculationService

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/search", response_model=RouteSearchResponse)
def search_routes(
    route_from: str = Query(..., alias="from", min_length=1, description="Origin city"),
    route_to: str = Query(..., alias="to", min_length=1, description="Destination city"),
    db: Session = Depends(get_db)
):
    """Search active departures between two cities"""
    try:
        return RouteService(db).search(route_from, route_to)
    except SQLAlchemyError:
        logger.exception("Route search failed for %s -> %s", route_from, route_to)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search routes"
        )

@router.get("/cities", response_model=CityList)
def list_cities(db: Session = Depends(get_db)):
    """Origin and destination cities with at least one active schedule"""
    return RouteService(db).list_cities()

@router.get("/popular", response_model=List[RouteSearchResult])
def popular_routes(
    limit: int = Query(6, ge=1, le=20),
    db: Session = Depends(get_db)
):
    """One departure per city pair, cheapest first"""
    return RouteService(db).popular_routes(limit)

@router.get("/quote", response_model=FareQuote)
def quote_fare(
    route_from: str = Query(..., alias="from", min_length=1),
    route_to: str = Query(..., alias="to", min_length=1),
    passengers: int = Query(1, ge=1, le=20),
    db: Session = Depends(get_db)
):
    """Price per passenger and total for a city pair"""
    try:
        return FareCalculationService(db).quote(route_from, route_to, passengers)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
