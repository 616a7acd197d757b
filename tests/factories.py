"""Plain record builders for the pure-function tests."""

from datetime import date
from types import SimpleNamespace


def make_trip(trip_date, **fields):
    """Trip operation record with every money field defaulting to zero."""
    values = dict(
        trip_date=trip_date,
        route_from="Surabaya",
        route_to="Denpasar",
        route_via=None,
        pickup_time="19.00",
        total_passengers=0,
        income_tickets=0,
        income_other=0,
        expense_fuel=0,
        expense_ferry=0,
        expense_snack=0,
        expense_meals=0,
        expense_driver_commission=0,
        expense_driver_meals=0,
        expense_toll=0,
        expense_parking=0,
        expense_other=0,
        notes=None,
        driver_name=None,
        driver_phone=None,
        vehicle_number=None,
    )
    values.update(fields)
    return SimpleNamespace(**values)


def make_booking(**fields):
    """Booking record as the manifest and document builders read it."""
    values = dict(
        order_id="TRV-20260112-AB12",
        customer_name="Budi",
        customer_phone="081234567890",
        customer_email=None,
        route_from="Surabaya",
        route_to="Denpasar",
        route_via=None,
        travel_date=date(2026, 1, 12),
        pickup_time="19.00",
        passengers=1,
        price_per_passenger=250000,
        total_price=250000,
        payment_status="pending",
        pickup_address="Jl. Darmo 1, Surabaya",
        dropoff_address=None,
        notes=None,
        has_large_luggage=False,
        luggage_description=None,
        has_package_delivery=False,
        package_description=None,
        special_requests=None,
    )
    values.update(fields)
    return SimpleNamespace(**values)
