"""Tests for trip operation bookkeeping and the report endpoints."""

from datetime import date, timedelta

import pytest

from src.operations.schemas import OperationPeriod
from src.operations.service import TripOperationService, period_bounds

TODAY = date(2026, 10, 19)


def _operation(client, headers, **fields):
    payload = {
        "trip_date": "2026-01-12",
        "route_from": "Surabaya",
        "route_to": "Denpasar",
        "pickup_time": "19.00",
        "total_passengers": 6,
        "income_tickets": 1500000,
        "expense_fuel": 400000,
        "expense_driver_commission": 225000,
        "driver_name": "Pak Slamet",
    }
    payload.update(fields)
    response = client.post("/api/v1/operations", json=payload, headers=headers)
    assert response.status_code == 201
    return response.json()


@pytest.mark.parametrize(
    "period, bounds",
    [
        (OperationPeriod.ALL, (None, None)),
        (OperationPeriod.TODAY, (TODAY, TODAY)),
        (OperationPeriod.WEEK, (TODAY - timedelta(days=7), None)),
        (OperationPeriod.MONTH, (date(2026, 10, 1), date(2026, 10, 31))),
    ],
)
def test_period_bounds(period, bounds) -> None:
    assert period_bounds(period, TODAY) == bounds


def test_period_bounds_in_a_leap_february() -> None:
    assert period_bounds(OperationPeriod.MONTH, date(2024, 2, 10)) == (date(2024, 2, 1), date(2024, 2, 29))


def test_month_period_excludes_later_months(db, client, admin_headers) -> None:
    _operation(client, admin_headers, trip_date="2026-03-10")
    _operation(client, admin_headers, trip_date="2026-05-01")
    _operation(client, admin_headers, trip_date="2026-02-28")

    operations = TripOperationService(db).list_operations(OperationPeriod.MONTH, today=date(2026, 3, 15))
    assert [operation.trip_date for operation in operations] == [date(2026, 3, 10)]


def test_create_operation_derives_totals(client, admin_headers) -> None:
    operation = _operation(client, admin_headers, income_other=50000)

    assert operation["total_income"] == 1550000
    assert operation["total_expense"] == 625000
    assert operation["profit"] == 925000


def test_negative_amounts_are_rejected(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/operations",
        json={"trip_date": "2026-01-12", "route_from": "Surabaya", "route_to": "Denpasar",
              "pickup_time": "19.00", "expense_toll": -1},
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_invalid_pickup_time_is_rejected(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/operations",
        json={"trip_date": "2026-01-12", "route_from": "Surabaya", "route_to": "Denpasar",
              "pickup_time": "25.00"},
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_list_operations_with_stats_and_search(client, admin_headers) -> None:
    _operation(client, admin_headers)
    _operation(client, admin_headers, route_to="Jakarta", driver_name="Pak Joko", total_passengers=4)

    everything = client.get("/api/v1/operations", headers=admin_headers).json()
    assert everything["stats"]["trips"] == 2
    assert everything["stats"]["passengers"] == 10
    assert everything["stats"]["profit"] == everything["stats"]["income"] - everything["stats"]["expense"]

    found = client.get("/api/v1/operations", params={"search": "joko"}, headers=admin_headers).json()
    assert [op["route_to"] for op in found["operations"]] == ["Jakarta"]


def test_period_filter(client, admin_headers) -> None:
    _operation(client, admin_headers, trip_date=date.today().isoformat())
    _operation(client, admin_headers, trip_date="2020-01-01")

    today = client.get("/api/v1/operations", params={"period": "today"}, headers=admin_headers).json()
    assert today["stats"]["trips"] == 1


def test_partial_update_keeps_other_fields(client, admin_headers) -> None:
    operation = _operation(client, admin_headers)

    response = client.put(
        f"/api/v1/operations/{operation['id']}",
        json={"expense_ferry": 180000, "vehicle_number": "L 1234 AB"},
        headers=admin_headers,
    )
    assert response.status_code == 200
    updated = response.json()
    assert updated["expense_ferry"] == 180000
    assert updated["expense_fuel"] == 400000
    assert updated["driver_name"] == "Pak Slamet"
    assert updated["total_expense"] == 805000


def test_update_can_clear_optional_text(client, admin_headers) -> None:
    operation = _operation(client, admin_headers)

    response = client.put(
        f"/api/v1/operations/{operation['id']}",
        json={"driver_name": None, "income_tickets": None},
        headers=admin_headers,
    )
    assert response.json()["driver_name"] is None
    assert response.json()["income_tickets"] == 1500000


def test_delete_operation(client, admin_headers) -> None:
    operation = _operation(client, admin_headers)
    url = f"/api/v1/operations/{operation['id']}"

    assert client.delete(url, headers=admin_headers).status_code == 204
    assert client.get(url, headers=admin_headers).status_code == 404


def test_monthly_analytics(client, admin_headers) -> None:
    _operation(client, admin_headers)
    _operation(client, admin_headers, trip_date="2026-03-02", total_passengers=4)

    response = client.get(
        "/api/v1/reports/analytics",
        params={"granularity": "month", "year": 2026},
        headers=admin_headers,
    )
    assert response.status_code == 200
    body = response.json()
    assert len(body["buckets"]) == 12
    assert body["buckets"][0]["passengers"] == 6
    assert body["buckets"][2]["passengers"] == 4
    assert body["summary"]["trips"] == 2
    assert body["available_years"] == [2026]


def test_daily_analytics_covers_month(client, admin_headers) -> None:
    response = client.get(
        "/api/v1/reports/analytics",
        params={"granularity": "day", "year": 2024, "month": 2},
        headers=admin_headers,
    )

    assert len(response.json()["buckets"]) == 29


def test_finance_report(client, admin_headers) -> None:
    _operation(client, admin_headers)
    _operation(client, admin_headers, expense_toll=120000)

    body = client.get(
        "/api/v1/reports/finance",
        params={"year": 2026, "month": 1},
        headers=admin_headers,
    ).json()
    assert body["totals"]["total_income"] == 3000000
    assert [item["category"] for item in body["expense_breakdown"]] == ["fuel", "driver_commission", "toll"]
    assert sum(item["amount"] for item in body["expense_breakdown"]) == body["totals"]["total_expense"]
    assert len(body["monthly_trend"]) == 12


def test_passenger_report(client, admin_headers) -> None:
    _operation(client, admin_headers)
    _operation(client, admin_headers, pickup_time="16.00", total_passengers=3)

    body = client.get(
        "/api/v1/reports/passengers",
        params={"year": 2026, "month": 1},
        headers=admin_headers,
    ).json()
    assert body["total_passengers"] == 9
    assert body["total_trips"] == 2
    assert [slot["name"] for slot in body["by_time_slot"]] == ["16.00", "19.00"]


def test_reports_require_admin(client) -> None:
    assert client.get("/api/v1/reports/analytics").status_code == 401
