"""Tests for trip operation bucketing and summaries."""

from datetime import date

import pytest

from src.reports.aggregation import (
    available_years,
    bucket_by_day,
    bucket_by_month,
    bucket_by_week,
    bucket_by_year,
    expense_breakdown,
    finance_totals,
    parse_pickup_time,
    passengers_by_route,
    passengers_by_time_slot,
    summarize,
    trip_expense,
    trip_income,
    week_of_year,
)
from src.reports.schemas import Summary
from tests.factories import make_trip


@pytest.fixture
def trips():
    return [
        make_trip(date(2026, 1, 5), total_passengers=6, income_tickets=1500000,
                  expense_fuel=400000, expense_driver_commission=225000),
        make_trip(date(2026, 1, 5), pickup_time="16.00", total_passengers=4,
                  income_tickets=1000000, income_other=50000, expense_toll=120000),
        make_trip(date(2026, 2, 1), total_passengers=7, income_tickets=1750000,
                  expense_ferry=180000, expense_snack=35000),
        make_trip(date(2025, 12, 31), total_passengers=3, income_tickets=750000,
                  expense_fuel=300000),
    ]


@pytest.mark.parametrize(
    "year, month, days",
    [(2026, 1, 31), (2026, 2, 28), (2024, 2, 29), (2026, 4, 30)],
)
def test_day_buckets_cover_every_day_of_month(year, month, days) -> None:
    buckets = bucket_by_day([], year, month)

    assert len(buckets) == days
    assert [bucket.key for bucket in buckets] == list(range(1, days + 1))
    assert all(bucket.trips == 0 for bucket in buckets)


def test_day_buckets_sum_trips_on_the_same_day(trips) -> None:
    buckets = bucket_by_day(trips, 2026, 1)
    fifth = buckets[4]

    assert fifth.trips == 2
    assert fifth.passengers == 10
    assert fifth.income == 2550000
    assert fifth.expense == 745000
    assert fifth.profit == 2550000 - 745000
    assert sum(bucket.trips for bucket in buckets) == 2


def test_summary_of_empty_list_is_zero() -> None:
    assert summarize([]) == Summary()


def test_summary_is_associative(trips) -> None:
    buckets = bucket_by_month(trips, 2026)
    left, right = buckets[:5], buckets[5:]

    assert summarize(left) + summarize(right) == summarize(buckets)


def test_profit_equals_income_minus_expense_per_bucket(trips) -> None:
    for bucket in bucket_by_year(trips):
        assert bucket.profit == bucket.income - bucket.expense


def test_month_buckets_are_always_twelve(trips) -> None:
    buckets = bucket_by_month(trips, 2026)

    assert len(buckets) == 12
    assert buckets[0].label == "Jan"
    assert buckets[4].label == "Mei"
    assert buckets[11].label == "Des"
    assert buckets[1].passengers == 7
    assert sum(bucket.trips for bucket in buckets[2:]) == 0


def test_month_buckets_do_not_double_count(trips) -> None:
    in_2026 = [trip for trip in trips if trip.trip_date.year == 2026]
    summary = summarize(bucket_by_month(trips, 2026))

    assert summary.trips == len(in_2026)
    assert summary.passengers == sum(trip.total_passengers for trip in in_2026)
    assert summary.income == sum(trip_income(trip) for trip in in_2026)
    assert summary.expense == sum(trip_expense(trip) for trip in in_2026)


def test_year_buckets_are_ascending(trips) -> None:
    buckets = bucket_by_year(trips)

    assert [bucket.key for bucket in buckets] == [2025, 2026]
    assert buckets[0].passengers == 3


@pytest.mark.parametrize(
    "day, week",
    [
        (date(2026, 1, 1), 1),   # Thursday
        (date(2026, 1, 3), 1),   # Saturday
        (date(2026, 1, 4), 2),   # first Sunday starts week two
        (date(2026, 12, 31), 53),
    ],
)
def test_week_of_year_starts_on_sunday(day, week) -> None:
    assert week_of_year(day) == week


def test_week_buckets_only_contain_weeks_with_trips() -> None:
    trips = [
        make_trip(date(2026, 1, 2), total_passengers=2),
        make_trip(date(2026, 1, 6), total_passengers=5),
        make_trip(date(2026, 12, 31), total_passengers=1),
    ]
    buckets = bucket_by_week(trips, 2026)

    assert [bucket.key for bucket in buckets] == [1, 2, 53]
    assert [bucket.label for bucket in buckets] == ["M1", "M2", "M53"]


def test_iso_string_trip_dates_are_accepted() -> None:
    trips = [make_trip("2026-03-15", total_passengers=4)]

    assert bucket_by_month(trips, 2026)[2].passengers == 4
    assert bucket_by_day(trips, 2026, 3)[14].trips == 1


def test_expense_breakdown_skips_empty_categories(trips) -> None:
    breakdown = expense_breakdown(trips)

    assert [item.category for item in breakdown] == [
        "fuel", "ferry", "snack", "driver_commission", "toll"
    ]
    assert breakdown[0].label == "BBM"
    assert breakdown[0].amount == 700000
    assert sum(item.amount for item in breakdown) == sum(trip_expense(trip) for trip in trips)


def test_expense_breakdown_empty() -> None:
    assert expense_breakdown([]) == []


def test_finance_totals(trips) -> None:
    totals = finance_totals(trips)

    assert totals.income_other == 50000
    assert totals.total_income == 1500000 + 1050000 + 1750000 + 750000
    assert totals.profit == totals.total_income - totals.total_expense


def test_available_years() -> None:
    assert available_years([], today=date(2026, 10, 19)) == [2026]
    trips = [make_trip(date(2024, 5, 1)), make_trip(date(2026, 1, 1)), make_trip(date(2024, 7, 1))]
    assert available_years(trips) == [2026, 2024]


@pytest.mark.parametrize("text, expected", [("16.00", (16, 0)), ("07:30", (7, 30)), ("5", (5, 0))])
def test_parse_pickup_time(text, expected) -> None:
    assert parse_pickup_time(text) == expected


def test_parse_pickup_time_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_pickup_time("pagi")


def test_passenger_breakdowns(trips) -> None:
    by_route = passengers_by_route(trips)
    assert len(by_route) == 1
    assert by_route[0].passengers == 20
    assert by_route[0].trips == 4

    slots = passengers_by_time_slot(trips)
    assert [slot.name for slot in slots] == ["16.00", "19.00"]
    assert slots[0].passengers == 4
