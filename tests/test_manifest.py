"""Tests for manifest grouping and promotion into trip operations."""

from datetime import date

import pytest

from src.exceptions import DuplicateTripOperationError, NotFoundError
from src.models import Booking, TripOperation
from src.operations.manifest_service import (
    ManifestGroup,
    ManifestService,
    build_trip_operation,
    driver_commission,
    group_bookings,
)
from src.operations.schemas import ManifestProcessRequest
from tests.factories import make_booking

TRAVEL_DATE = date(2026, 1, 12)


@pytest.mark.parametrize(
    "income, percent, expected",
    [(500000, 15, 75000), (0, 15, 0), (100003, 15, 15000), (100010, 15, 15002)],
)
def test_driver_commission_rounds_half_up(income, percent, expected) -> None:
    assert driver_commission(income, percent) == expected


def test_group_counts_every_booking_but_only_paid_income() -> None:
    bookings = [
        make_booking(order_id="TRV-20260112-AAA1", passengers=2, total_price=200000, payment_status="paid"),
        make_booking(order_id="TRV-20260112-AAA2", passengers=3, total_price=300000, payment_status="paid"),
        make_booking(order_id="TRV-20260112-AAA3", passengers=1, total_price=100000, payment_status="pending"),
    ]
    groups = group_bookings(bookings)

    assert len(groups) == 1
    operation = build_trip_operation(groups[0], driver_name="Pak Slamet", commission_percent=15)
    assert operation.total_passengers == 6
    assert operation.income_tickets == 500000
    assert operation.expense_driver_commission == 75000
    assert operation.expense_fuel == 0
    assert operation.driver_name == "Pak Slamet"
    assert "3 booking(s), 2 paid" in operation.notes


def test_groups_are_split_by_waypoint_and_sorted_by_time() -> None:
    bookings = [
        make_booking(pickup_time="19.00"),
        make_booking(pickup_time="19.00", route_via="Probolinggo"),
        make_booking(pickup_time="8.00"),
        make_booking(pickup_time="16.00"),
    ]
    groups = group_bookings(bookings)

    assert [(g.pickup_time, g.route_via) for g in groups] == [
        ("8.00", None), ("16.00", None), ("19.00", None), ("19.00", "Probolinggo")
    ]


def test_groups_are_ordered_by_date_first() -> None:
    bookings = [
        make_booking(travel_date=date(2026, 1, 13), pickup_time="05.00"),
        make_booking(travel_date=date(2026, 1, 12), pickup_time="19.00"),
    ]

    assert [g.travel_date for g in group_bookings(bookings)] == [date(2026, 1, 12), date(2026, 1, 13)]


def test_mixed_group_is_rejected() -> None:
    group = ManifestGroup(
        travel_date=TRAVEL_DATE,
        pickup_time="19.00",
        route_from="Surabaya",
        route_via=None,
        route_to="Denpasar",
        bookings=[make_booking(), make_booking(pickup_time="16.00")],
    )

    with pytest.raises(ValueError):
        build_trip_operation(group)


def test_empty_group_is_rejected() -> None:
    group = ManifestGroup(TRAVEL_DATE, "19.00", "Surabaya", None, "Denpasar")

    with pytest.raises(ValueError):
        build_trip_operation(group)


def _add_booking(db, order_id, **fields):
    values = dict(
        order_id=order_id,
        customer_name="Budi",
        customer_phone="081234567890",
        route_from="Surabaya",
        route_to="Denpasar",
        travel_date=TRAVEL_DATE,
        pickup_time="19.00",
        passengers=1,
        total_price=250000,
        payment_status="paid",
        pickup_address="Jl. Darmo 1, Surabaya",
    )
    values.update(fields)
    booking = Booking(**values)
    db.add(booking)
    db.commit()
    return booking


@pytest.fixture
def departure(db):
    _add_booking(db, "TRV-20260112-AB01", passengers=2, total_price=500000)
    _add_booking(db, "TRV-20260112-AB02", passengers=1, total_price=250000, payment_status="pending")
    _add_booking(db, "TRV-20260112-AB03", passengers=4, total_price=1000000, payment_status="cancelled")
    return ManifestProcessRequest(
        travel_date=TRAVEL_DATE,
        route_from="Surabaya",
        route_to="Denpasar",
        pickup_time="19.00",
        driver_name="Pak Slamet",
        vehicle_number="L 1234 AB",
    )


def test_list_manifests_skips_cancelled_bookings(db, departure) -> None:
    manifests = ManifestService(db).list_manifests(TRAVEL_DATE)

    assert len(manifests) == 1
    assert manifests[0].total_bookings == 2
    assert manifests[0].total_passengers == 3
    assert manifests[0].paid_income == 500000
    assert not manifests[0].processed


def test_promote_creates_operation_once(db, departure) -> None:
    service = ManifestService(db)
    operation = service.promote(departure)

    assert operation.total_passengers == 3
    assert operation.income_tickets == 500000
    assert operation.expense_driver_commission == 75000
    assert operation.vehicle_number == "L 1234 AB"

    with pytest.raises(DuplicateTripOperationError) as excinfo:
        service.promote(departure)
    assert excinfo.value.operation_id == operation.id
    assert db.query(TripOperation).count() == 1

    listed = service.list_manifests(TRAVEL_DATE)[0]
    assert listed.processed
    assert listed.operation_id == operation.id


def test_promote_unknown_departure(db, departure) -> None:
    request = departure.model_copy(update={"pickup_time": "05.00"})

    with pytest.raises(NotFoundError):
        ManifestService(db).promote(request)


def test_manifest_document_uses_processed_driver(db, departure) -> None:
    service = ManifestService(db)
    service.promote(departure)
    request = departure.model_copy(update={"driver_name": None, "vehicle_number": None})

    document = service.manifest_document(request)
    assert document.driver_name == "Pak Slamet"
    assert document.vehicle_number == "L 1234 AB"
    assert document.total_passengers == 3
    assert document.paid_bookings == 1


def test_process_endpoint_rejects_duplicates(client, admin_headers, departure) -> None:
    payload = departure.model_dump(mode="json")

    first = client.post("/api/v1/manifests/process", json=payload, headers=admin_headers)
    assert first.status_code == 201
    assert first.json()["total_income"] == 500000

    second = client.post("/api/v1/manifests/process", json=payload, headers=admin_headers)
    assert second.status_code == 409


def test_manifest_endpoints(client, admin_headers, departure) -> None:
    listing = client.get("/api/v1/manifests", params={"date": "2026-01-12"}, headers=admin_headers)
    assert listing.status_code == 200
    assert len(listing.json()) == 1

    pdf = client.post("/api/v1/manifests/pdf", json=departure.model_dump(mode="json"), headers=admin_headers)
    assert pdf.status_code == 200
    assert pdf.content.startswith(b"%PDF")


def test_manifest_endpoints_require_admin(client) -> None:
    response = client.get("/api/v1/manifests", params={"date": "2026-01-12"})

    assert response.status_code == 401


def test_padded_pickup_time_is_promoted_once(client, admin_headers, schedules) -> None:
    booking = {
        "route_from": "Surabaya",
        "route_to": "Denpasar",
        "travel_date": "2026-01-12",
        "pickup_time": "19.00 ",
        "passengers": 2,
        "customer_name": "Budi Santoso",
        "customer_phone": "081234567890",
        "pickup_address": "Jl. Darmo 1, Surabaya",
    }
    assert client.post("/api/v1/bookings", json=booking).status_code == 201
    payload = {
        "travel_date": "2026-01-12",
        "route_from": "Surabaya",
        "route_to": "Denpasar",
        "pickup_time": "19.00 ",
    }

    first = client.post("/api/v1/manifests/process", json=payload, headers=admin_headers)
    second = client.post("/api/v1/manifests/process", json=payload, headers=admin_headers)

    assert first.status_code == 201
    assert second.status_code == 409
    listed = client.get("/api/v1/manifests", params={"date": "2026-01-12"}, headers=admin_headers).json()
    assert listed[0]["processed"] is True


def test_stored_padded_time_matches_its_operation(db) -> None:
    _add_booking(db, "TRV-20260112-AB09", pickup_time=" 19.00 ")
    request = ManifestProcessRequest(
        travel_date=TRAVEL_DATE, route_from="Surabaya", route_to="Denpasar", pickup_time="19.00"
    )
    service = ManifestService(db)

    operation = service.promote(request)
    assert operation.pickup_time == "19.00"
    with pytest.raises(DuplicateTripOperationError):
        service.promote(request)
    assert db.query(TripOperation).count() == 1
    assert service.list_manifests(TRAVEL_DATE)[0].processed
