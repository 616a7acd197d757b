import logging
from typing import List, Optional, Sequence
from sqlalchemy.orm import Session
from src.config import settings
from src.models import Schedule
from src.routes.schemas import FareQuote

logger = logging.getLogger(__name__)

def lookup_price(
    schedules: Sequence,
    route_from: str,
    route_to: str,
    default: Optional[int]
) -> Optional[int]:
    """Price of the first active schedule for the city pair, else ``default``.

    City names are compared exactly as stored.
    """
    for schedule in schedules:
        if not schedule.is_active:
            continue
        if schedule.route_from == route_from and schedule.route_to == route_to:
            return int(schedule.price)
    return default

class FareCalculationService:
    """Service for looking up per-passenger prices from the schedule table"""

    def __init__(self, db: Session, default_fare: Optional[int] = None):
        self.db = db
        self.default_fare = settings.DEFAULT_FARE if default_fare is None else default_fare
        self._schedules: List[Schedule] = self._load_schedules()

    def _load_schedules(self) -> List[Schedule]:
        """Load active schedules in a stable order so 'first match' is deterministic"""
        return (
            self.db.query(Schedule)
            .filter(Schedule.is_active.is_(True))
            .order_by(Schedule.route_from, Schedule.route_to, Schedule.pickup_time, Schedule.id)
            .all()
        )

    def get_price(self, route_from: str, route_to: str) -> int:
        return lookup_price(self._schedules, route_from, route_to, self.default_fare)

    def has_schedule(self, route_from: str, route_to: str) -> bool:
        return lookup_price(self._schedules, route_from, route_to, None) is not None

    def quote(self, route_from: str, route_to: str, passengers: int) -> FareQuote:
        """Total fare for a booking; falls back to the default fare for unknown routes"""
        if passengers < 1:
            raise ValueError("At least one passenger is required")

        is_fallback = not self.has_schedule(route_from, route_to)
        price = self.get_price(route_from, route_to)
        if is_fallback:
            logger.info("No schedule for %s -> %s, using default fare %s", route_from, route_to, price)

        return FareQuote(
            route_from=route_from,
            route_to=route_to,
            price_per_passenger=price,
            passengers=passengers,
            total_price=price * passengers,
            is_fallback=is_fallback
        )
