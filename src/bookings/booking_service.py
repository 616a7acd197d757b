import logging
import os
from datetime import date, datetime
from typing import Dict, List, Optional, Set

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.config import settings
from src.exceptions import NotFoundError, InvalidStatusTransition
from src.models import Booking, Schedule
from src.routes.fare_service import FareCalculationService
from src.bookings.schemas import (
    BookingCreateRequest, OfflineBookingRequest, BookingStats, PaymentStatus
)
from src.bookings.validation import (
    clean_order_id, compose_address, generate_order_id, is_valid_order_id,
    is_valid_phone, normalize_phone, validate_payment_proof
)

logger = logging.getLogger(__name__)

# Payment status changes an admin may make; paid is terminal
ADMIN_TRANSITIONS: Dict[PaymentStatus, Set[PaymentStatus]] = {
    PaymentStatus.PENDING: {PaymentStatus.PAID, PaymentStatus.CANCELLED},
    PaymentStatus.WAITING_VERIFICATION: {
        PaymentStatus.PAID, PaymentStatus.PENDING, PaymentStatus.CANCELLED
    },
    PaymentStatus.CANCELLED: {PaymentStatus.PENDING},
    PaymentStatus.PAID: set(),
}

# Statuses in which the customer may (re)upload a payment proof
PROOF_UPLOAD_STATUSES = {PaymentStatus.PENDING, PaymentStatus.WAITING_VERIFICATION}

PROOF_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/webp": ".webp",
    "application/pdf": ".pdf",
}

ORDER_ID_ATTEMPTS = 5

class BookingService:
    """Service for customer and back office booking records"""

    def __init__(self, db: Session, upload_dir: Optional[str] = None):
        self.db = db
        self.upload_dir = upload_dir or settings.UPLOAD_DIR

    # Creation
    def create_booking(self, request: BookingCreateRequest) -> Booking:
        """Create a pending booking priced from the schedule table"""
        quote = FareCalculationService(self.db).quote(
            request.route_from, request.route_to, request.passengers
        )

        booking = Booking(
            order_id=self._new_order_id(),
            customer_name=request.customer_name.strip(),
            customer_phone=request.customer_phone,
            customer_email=request.customer_email,
            route_from=request.route_from,
            route_to=request.route_to,
            route_via=request.route_via or None,
            travel_date=request.travel_date,
            pickup_time=request.pickup_time,
            passengers=request.passengers,
            price_per_passenger=quote.price_per_passenger,
            total_price=quote.total_price,
            payment_status=PaymentStatus.PENDING.value,
            pickup_address=compose_address(
                request.pickup_address, request.pickup_latitude, request.pickup_longitude
            ),
            dropoff_address=compose_address(
                request.dropoff_address, request.dropoff_latitude, request.dropoff_longitude
            ) or None,
            notes=request.notes,
            has_large_luggage=request.has_large_luggage,
            luggage_description=request.luggage_description if request.has_large_luggage else None,
            has_package_delivery=request.has_package_delivery,
            package_description=request.package_description if request.has_package_delivery else None,
            special_requests=request.special_requests
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info(
            "Booking %s created: %s -> %s on %s, %d pax, total %d",
            booking.order_id, booking.route_from, booking.route_to,
            booking.travel_date, booking.passengers, booking.total_price
        )
        return booking

    def create_offline_booking(self, request: OfflineBookingRequest) -> Booking:
        """Admin-entered booking against an existing schedule"""
        schedule = self.db.query(Schedule).filter(Schedule.id == request.schedule_id).first()
        if not schedule:
            raise NotFoundError("Schedule not found")

        notes = "[OFFLINE]"
        if request.notes:
            notes = f"[OFFLINE] {request.notes}"

        booking = Booking(
            order_id=self._new_order_id(),
            customer_name=request.customer_name.strip(),
            customer_phone=request.customer_phone,
            customer_email=request.customer_email,
            route_from=schedule.route_from,
            route_to=schedule.route_to,
            route_via=schedule.route_via,
            travel_date=request.travel_date,
            pickup_time=schedule.pickup_time,
            passengers=request.passengers,
            price_per_passenger=int(schedule.price),
            total_price=int(schedule.price) * request.passengers,
            payment_status=request.payment_status.value,
            pickup_address=request.pickup_address,
            dropoff_address=request.dropoff_address,
            notes=notes
        )
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)

        logger.info("Offline booking %s created with status %s", booking.order_id, booking.payment_status)
        return booking

    # Customer access
    def lookup_booking(self, order_id: str, phone: str) -> Booking:
        """Find a booking by order id, authorized by the phone used when booking"""
        order_id = clean_order_id(order_id)
        if not is_valid_order_id(order_id):
            raise ValueError("Invalid order ID format. Use TRV-YYYYMMDD-XXXX")
        if not is_valid_phone(phone):
            raise ValueError("Invalid phone number")

        booking = self.db.query(Booking).filter(Booking.order_id == order_id).first()
        if not booking or normalize_phone(booking.customer_phone) != normalize_phone(phone):
            raise NotFoundError("Booking not found. Check the order ID and phone number")
        return booking

    def attach_payment_proof(
        self,
        order_id: str,
        phone: str,
        filename: Optional[str],
        content_type: Optional[str],
        data: bytes
    ) -> Booking:
        """Store a transfer receipt and move the booking to waiting_verification"""
        validate_payment_proof(content_type, len(data), settings.MAX_UPLOAD_BYTES)
        booking = self.lookup_booking(order_id, phone)

        current = PaymentStatus(booking.payment_status)
        if current not in PROOF_UPLOAD_STATUSES:
            raise InvalidStatusTransition(current.value, PaymentStatus.WAITING_VERIFICATION.value)

        os.makedirs(self.upload_dir, exist_ok=True)
        stored_name = f"{booking.order_id}-{datetime.now().strftime('%Y%m%d%H%M%S')}{PROOF_EXTENSIONS[content_type]}"
        with open(os.path.join(self.upload_dir, stored_name), "wb") as handle:
            handle.write(data)

        booking.payment_proof_drive_id = stored_name
        booking.payment_proof_url = f"{settings.API_V1_STR}/bookings/{booking.order_id}/payment-proof"
        booking.payment_status = PaymentStatus.WAITING_VERIFICATION.value
        self.db.commit()
        self.db.refresh(booking)

        logger.info("Payment proof %s uploaded for %s (%s)", filename, booking.order_id, content_type)
        return booking

    # Back office
    def get_booking(self, order_id: str) -> Booking:
        booking = self.db.query(Booking).filter(Booking.order_id == clean_order_id(order_id)).first()
        if not booking:
            raise NotFoundError("Booking not found")
        return booking

    def payment_proof_path(self, order_id: str) -> str:
        booking = self.get_booking(order_id)
        if not booking.payment_proof_drive_id:
            raise NotFoundError("No payment proof uploaded for this booking")
        path = os.path.join(self.upload_dir, booking.payment_proof_drive_id)
        if not os.path.isfile(path):
            raise NotFoundError("Payment proof file is missing")
        return path

    def update_status(self, order_id: str, new_status: PaymentStatus) -> Booking:
        """Apply an admin payment status change"""
        booking = self.get_booking(order_id)
        current = PaymentStatus(booking.payment_status)

        if new_status not in ADMIN_TRANSITIONS[current]:
            logger.warning("Rejected status change for %s: %s -> %s", order_id, current.value, new_status.value)
            raise InvalidStatusTransition(current.value, new_status.value)

        booking.payment_status = new_status.value
        self.db.commit()
        self.db.refresh(booking)

        logger.info("Booking %s status changed %s -> %s", booking.order_id, current.value, new_status.value)
        return booking

    def list_bookings(
        self,
        payment_status: Optional[PaymentStatus] = None,
        travel_date: Optional[date] = None,
        search: Optional[str] = None
    ) -> List[Booking]:
        query = self.db.query(Booking)
        if payment_status:
            query = query.filter(Booking.payment_status == payment_status.value)
        if travel_date:
            query = query.filter(Booking.travel_date == travel_date)
        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(or_(
                func.lower(Booking.order_id).like(pattern),
                func.lower(Booking.customer_name).like(pattern),
                Booking.customer_phone.like(pattern),
                func.lower(Booking.route_from).like(pattern),
                func.lower(Booking.route_to).like(pattern)
            ))
        return query.order_by(Booking.created_at.desc(), Booking.order_id.desc()).all()

    def booking_stats(self) -> BookingStats:
        rows = (
            self.db.query(Booking.payment_status, func.count(Booking.id))
            .group_by(Booking.payment_status)
            .all()
        )
        counts = {status: count for status, count in rows}
        return BookingStats(
            total=sum(counts.values()),
            pending=counts.get(PaymentStatus.PENDING.value, 0),
            waiting_verification=counts.get(PaymentStatus.WAITING_VERIFICATION.value, 0),
            paid=counts.get(PaymentStatus.PAID.value, 0),
            cancelled=counts.get(PaymentStatus.CANCELLED.value, 0)
        )

    def delete_booking(self, order_id: str):
        booking = self.get_booking(order_id)
        self.db.delete(booking)
        self.db.commit()
        logger.info("Booking %s deleted", booking.order_id)

    def _new_order_id(self) -> str:
        for _ in range(ORDER_ID_ATTEMPTS):
            order_id = generate_order_id()
            exists = self.db.query(Booking.id).filter(Booking.order_id == order_id).first()
            if not exists:
                return order_id
        raise RuntimeError("Could not allocate a unique order ID")
