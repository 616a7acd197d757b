from typing import List
from sqlalchemy import func
from sqlalchemy.orm import Session
from src.models import Schedule
from src.reports.aggregation import parse_pickup_time
from src.routes.schemas import RouteSearchResult, RouteSearchResponse, CityList

def _pickup_sort_key(schedule: Schedule):
    try:
        return parse_pickup_time(schedule.pickup_time)
    except ValueError:
        return (99, 99)

class RouteService:
    """Public route search over the active schedule table"""

    def __init__(self, db: Session):
        self.db = db

    def search(self, route_from: str, route_to: str) -> RouteSearchResponse:
        """Active departures for a city pair, case-insensitive, earliest pickup first"""
        schedules = (
            self.db.query(Schedule)
            .filter(
                Schedule.is_active.is_(True),
                func.lower(Schedule.route_from) == route_from.strip().lower(),
                func.lower(Schedule.route_to) == route_to.strip().lower()
            )
            .all()
        )
        schedules.sort(key=_pickup_sort_key)

        results = [
            RouteSearchResult(
                schedule_id=s.id,
                route_from=s.route_from,
                route_to=s.route_to,
                route_via=s.route_via,
                pickup_time=s.pickup_time,
                category=s.category,
                price=s.price
            )
            for s in schedules
        ]

        return RouteSearchResponse(
            route_from=route_from,
            route_to=route_to,
            results=results,
            total_results=len(results)
        )

    def list_cities(self) -> CityList:
        active = self.db.query(Schedule.route_from, Schedule.route_to).filter(Schedule.is_active.is_(True))
        origins = sorted({row.route_from for row in active})
        destinations = sorted({row.route_to for row in active})
        return CityList(origins=origins, destinations=destinations)

    def popular_routes(self, limit: int = 6) -> List[RouteSearchResult]:
        """Cheapest departure of each distinct city pair"""
        schedules = (
            self.db.query(Schedule)
            .filter(Schedule.is_active.is_(True))
            .order_by(Schedule.price, Schedule.route_from, Schedule.route_to)
            .all()
        )
        seen = set()
        routes = []
        for s in schedules:
            pair = (s.route_from, s.route_to)
            if pair in seen:
                continue
            seen.add(pair)
            routes.append(RouteSearchResult(
                schedule_id=s.id,
                route_from=s.route_from,
                route_to=s.route_to,
                route_via=s.route_via,
                pickup_time=s.pickup_time,
                category=s.category,
                price=s.price
            ))
        return routes[:limit]
