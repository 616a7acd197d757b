"""
Manifest grouping and promotion.

Bookings that share a travel date, pickup time and route (including the
waypoint) ride in the same vehicle. A group can be promoted once into a
TripOperation carrying the passenger count, the paid income and the
driver commission; a second promotion of the same departure is rejected.
"""

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Dict, List, Optional, Sequence, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session

from src.config import settings
from src.exceptions import DuplicateTripOperationError, NotFoundError
from src.models import Booking, TripOperation
from src.bookings.schemas import BookingResponse, PaymentStatus
from src.documents import ManifestDocument, build_manifest_document
from src.operations.schemas import (
    ManifestKey, ManifestProcessRequest, ManifestGroupResponse, TripOperationCreate
)
from src.reports.aggregation import parse_pickup_time

logger = logging.getLogger(__name__)

GroupKey = Tuple[date, str, str, str, str]

def booking_key(booking) -> GroupKey:
    return (
        booking.travel_date,
        (booking.pickup_time or "").strip(),
        booking.route_from,
        booking.route_via or "",
        booking.route_to,
    )

def _sort_key(key: GroupKey):
    travel_date, pickup_time, route_from, route_via, route_to = key
    try:
        time_order = parse_pickup_time(pickup_time)
    except ValueError:
        time_order = (24, 0)
    return (travel_date, time_order, pickup_time, route_from, route_to, route_via)

@dataclass
class ManifestGroup:
    """Bookings riding the same departure"""
    travel_date: date
    pickup_time: str
    route_from: str
    route_via: Optional[str]
    route_to: str
    bookings: List = field(default_factory=list)

    @property
    def key(self) -> GroupKey:
        return (self.travel_date, self.pickup_time, self.route_from, self.route_via or "", self.route_to)

    @property
    def total_passengers(self) -> int:
        return sum(int(booking.passengers or 0) for booking in self.bookings)

    @property
    def paid(self) -> List:
        return [b for b in self.bookings if b.payment_status == PaymentStatus.PAID.value]

    @property
    def paid_bookings(self) -> int:
        return len(self.paid)

    @property
    def paid_income(self) -> int:
        return sum(int(booking.total_price or 0) for booking in self.paid)

def group_bookings(bookings: Sequence) -> List[ManifestGroup]:
    """Group bookings by departure, ordered by date, pickup time and route"""
    groups: Dict[GroupKey, ManifestGroup] = {}
    for booking in bookings:
        key = booking_key(booking)
        if key not in groups:
            groups[key] = ManifestGroup(
                travel_date=booking.travel_date,
                pickup_time=key[1],
                route_from=booking.route_from,
                route_via=booking.route_via or None,
                route_to=booking.route_to
            )
        groups[key].bookings.append(booking)
    return [groups[key] for key in sorted(groups, key=_sort_key)]

def driver_commission(income: int, percent: int) -> int:
    """``income * percent / 100`` rounded half up to whole rupiah"""
    return (income * percent + 50) // 100

def build_trip_operation(
    group: ManifestGroup,
    driver_name: Optional[str] = None,
    driver_phone: Optional[str] = None,
    vehicle_number: Optional[str] = None,
    commission_percent: Optional[int] = None
) -> TripOperationCreate:
    """Trip operation fields for a manifest group.

    All bookings count toward passengers; only paid bookings count toward
    ticket income. Expenses other than the driver commission start at zero.
    """
    if not group.bookings:
        raise ValueError("Manifest group has no bookings")
    if any(booking_key(booking) != group.key for booking in group.bookings):
        raise ValueError("Manifest group mixes bookings from different departures")

    if commission_percent is None:
        commission_percent = settings.DRIVER_COMMISSION_PERCENT

    income = group.paid_income
    return TripOperationCreate(
        trip_date=group.travel_date,
        route_from=group.route_from,
        route_to=group.route_to,
        route_via=group.route_via,
        pickup_time=group.pickup_time,
        total_passengers=group.total_passengers,
        income_tickets=income,
        expense_driver_commission=driver_commission(income, commission_percent),
        driver_name=driver_name or None,
        driver_phone=driver_phone or None,
        vehicle_number=vehicle_number or None,
        notes=(
            f"Auto-generated from manifest. {len(group.bookings)} booking(s), "
            f"{group.paid_bookings} paid."
        )
    )

class ManifestService:
    """Manifest listing and promotion into trip operations"""

    def __init__(self, db: Session):
        self.db = db

    def _active_bookings(self, travel_date: date):
        return (
            self.db.query(Booking)
            .filter(Booking.travel_date == travel_date)
            .filter(Booking.payment_status != PaymentStatus.CANCELLED.value)
            .order_by(Booking.created_at, Booking.order_id)
        )

    def list_manifests(
        self,
        travel_date: date,
        route_from: Optional[str] = None,
        route_to: Optional[str] = None
    ) -> List[ManifestGroupResponse]:
        """Departure groups for a date, each flagged when already processed"""
        query = self._active_bookings(travel_date)
        if route_from:
            query = query.filter(Booking.route_from == route_from)
        if route_to:
            query = query.filter(Booking.route_to == route_to)

        manifests = []
        for group in group_bookings(query.all()):
            operation = self.find_matching_operation(
                group.travel_date, group.route_from, group.route_to, group.pickup_time
            )
            manifests.append(ManifestGroupResponse(
                travel_date=group.travel_date,
                route_from=group.route_from,
                route_to=group.route_to,
                route_via=group.route_via,
                pickup_time=group.pickup_time,
                bookings=[BookingResponse.model_validate(b) for b in group.bookings],
                total_passengers=group.total_passengers,
                paid_bookings=group.paid_bookings,
                total_bookings=len(group.bookings),
                paid_income=group.paid_income,
                processed=operation is not None,
                operation_id=operation.id if operation else None,
                driver_name=operation.driver_name if operation else None,
                driver_phone=operation.driver_phone if operation else None,
                vehicle_number=operation.vehicle_number if operation else None
            ))
        return manifests

    def find_matching_operation(
        self,
        trip_date: date,
        route_from: str,
        route_to: str,
        pickup_time: str
    ) -> Optional[TripOperation]:
        return (
            self.db.query(TripOperation)
            .filter(
                TripOperation.trip_date == trip_date,
                TripOperation.route_from == route_from,
                TripOperation.route_to == route_to,
                TripOperation.pickup_time == pickup_time
            )
            .first()
        )

    def load_group(self, key: ManifestKey) -> ManifestGroup:
        bookings = (
            self._active_bookings(key.travel_date)
            .filter(
                Booking.route_from == key.route_from,
                Booking.route_to == key.route_to,
                func.trim(Booking.pickup_time) == key.pickup_time
            )
            .all()
        )
        via = key.route_via or ""
        bookings = [b for b in bookings if (b.route_via or "") == via]
        if not bookings:
            raise NotFoundError("No bookings found for this departure")
        return group_bookings(bookings)[0]

    def promote(self, request: ManifestProcessRequest) -> TripOperation:
        """Create the trip operation for a departure unless one already exists"""
        group = self.load_group(request)
        data = build_trip_operation(
            group,
            driver_name=request.driver_name,
            driver_phone=request.driver_phone,
            vehicle_number=request.vehicle_number
        )

        existing = self.find_matching_operation(
            data.trip_date, data.route_from, data.route_to, data.pickup_time
        )
        if existing:
            logger.warning(
                "Manifest %s %s -> %s at %s already processed as %s",
                data.trip_date, data.route_from, data.route_to, data.pickup_time, existing.id
            )
            raise DuplicateTripOperationError(existing.id)

        operation = TripOperation(**data.model_dump())
        self.db.add(operation)
        self.db.commit()
        self.db.refresh(operation)

        logger.info(
            "Manifest promoted to operation %s: %d passengers, income %d",
            operation.id, operation.total_passengers, operation.income_tickets
        )
        return operation

    def manifest_document(self, request: ManifestProcessRequest) -> ManifestDocument:
        """Printable manifest; driver details fall back to the processed operation"""
        group = self.load_group(request)
        operation = self.find_matching_operation(
            group.travel_date, group.route_from, group.route_to, group.pickup_time
        )
        driver_name = request.driver_name or (operation.driver_name if operation else None)
        driver_phone = request.driver_phone or (operation.driver_phone if operation else None)
        vehicle_number = request.vehicle_number or (operation.vehicle_number if operation else None)
        return build_manifest_document(group, driver_name, driver_phone, vehicle_number)
