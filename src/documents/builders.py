"""
Document builders.

Turn stored records into document models. Every number placed on a
document comes from the stored record, the pricing quote or the
aggregation helpers; renderers only lay the values out.
"""

from typing import Optional, Sequence

from src.config import settings
from src.documents.schemas import (
    DocumentRow, TicketDocument, OperationReceiptDocument, ManifestDocument,
    ManifestPassenger
)
from src.documents.formatting import format_rupiah
from src.reports.aggregation import (
    EXPENSE_CATEGORIES, trip_income, trip_expense, trip_profit
)

def tracking_link(order_id: str, base_url: Optional[str] = None) -> str:
    return f"{base_url or settings.TRACKING_URL}?orderId={order_id}"

def build_ticket_document(booking, agent_name: Optional[str] = None) -> TicketDocument:
    """Ticket for a stored booking, using the prices recorded when it was made"""
    passengers = int(booking.passengers or 1)
    total_price = int(booking.total_price or 0)

    return TicketDocument(
        agent_name=agent_name or settings.AGENT_NAME,
        order_id=booking.order_id,
        customer_name=booking.customer_name,
        customer_phone=booking.customer_phone,
        customer_email=booking.customer_email,
        route_from=booking.route_from,
        route_to=booking.route_to,
        route_via=booking.route_via,
        travel_date=booking.travel_date,
        pickup_time=booking.pickup_time,
        pickup_address=booking.pickup_address,
        dropoff_address=booking.dropoff_address,
        notes=booking.notes,
        passengers=passengers,
        price_per_passenger=int(booking.price_per_passenger or 0),
        total_price=total_price,
        payment_status=booking.payment_status,
        tracking_url=tracking_link(booking.order_id)
    )

def build_operation_receipt(operation, agent_name: Optional[str] = None) -> OperationReceiptDocument:
    expense_rows = [
        DocumentRow(
            label=label,
            value=format_rupiah(int(getattr(operation, field) or 0)),
            amount=int(getattr(operation, field) or 0)
        )
        for field, label in EXPENSE_CATEGORIES
    ]

    return OperationReceiptDocument(
        agent_name=agent_name or settings.AGENT_NAME,
        trip_date=operation.trip_date,
        route_from=operation.route_from,
        route_to=operation.route_to,
        route_via=operation.route_via,
        pickup_time=operation.pickup_time,
        total_passengers=int(operation.total_passengers or 0),
        driver_name=operation.driver_name,
        vehicle_number=operation.vehicle_number,
        notes=operation.notes,
        income_tickets=int(operation.income_tickets or 0),
        income_other=int(operation.income_other or 0),
        total_income=trip_income(operation),
        expense_rows=expense_rows,
        total_expense=trip_expense(operation),
        profit=trip_profit(operation)
    )

def build_manifest_document(
    group,
    driver_name: Optional[str] = None,
    driver_phone: Optional[str] = None,
    vehicle_number: Optional[str] = None,
    agent_name: Optional[str] = None
) -> ManifestDocument:
    """Manifest for one booking group (see ``operations.manifest_service.group_bookings``)"""
    bookings: Sequence = group.bookings
    passengers = [
        ManifestPassenger(
            name=booking.customer_name,
            phone=booking.customer_phone,
            pickup_address=booking.pickup_address,
            dropoff_address=booking.dropoff_address,
            passengers=int(booking.passengers or 0),
            notes=booking.notes,
            has_large_luggage=bool(booking.has_large_luggage),
            luggage_description=booking.luggage_description,
            has_package_delivery=bool(booking.has_package_delivery),
            package_description=booking.package_description,
            special_requests=booking.special_requests,
            payment_status=booking.payment_status
        )
        for booking in bookings
    ]

    return ManifestDocument(
        agent_name=agent_name or settings.AGENT_NAME,
        trip_date=group.travel_date,
        pickup_time=group.pickup_time,
        route_from=group.route_from,
        route_to=group.route_to,
        route_via=group.route_via,
        vehicle_number=vehicle_number,
        driver_name=driver_name,
        driver_phone=driver_phone,
        passengers=passengers,
        total_passengers=group.total_passengers,
        paid_bookings=group.paid_bookings,
        total_bookings=len(bookings)
    )
