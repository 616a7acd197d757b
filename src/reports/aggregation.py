"""
Trip financial aggregation.

Pure functions that turn a flat list of trip operation records into
day/week/month/year buckets, summaries and expense breakdowns. Records are
any objects exposing the trip operation attributes (ORM rows, pydantic
schemas). Money is whole rupiah held in ``int``.
"""

import calendar
from collections import defaultdict
from datetime import date
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from src.reports.schemas import (
    AnalyticsBucket, Summary, ExpenseCategoryTotal, FinanceTotals, NamedCount
)

# Fixed display priority
EXPENSE_CATEGORIES: Tuple[Tuple[str, str], ...] = (
    ("expense_fuel", "BBM"),
    ("expense_ferry", "Penyebrangan"),
    ("expense_snack", "Snack"),
    ("expense_meals", "Makan"),
    ("expense_driver_commission", "Komisi Supir"),
    ("expense_driver_meals", "Uang Makan Supir"),
    ("expense_toll", "Tol"),
    ("expense_parking", "Parkir"),
    ("expense_other", "Lainnya"),
)

EXPENSE_FIELDS: Tuple[str, ...] = tuple(field for field, _ in EXPENSE_CATEGORIES)

INCOME_FIELDS: Tuple[str, ...] = ("income_tickets", "income_other")

MONTH_LABELS: Tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "Mei", "Jun", "Jul", "Agu", "Sep", "Okt", "Nov", "Des"
)


def _amount(record, field: str) -> int:
    return int(getattr(record, field) or 0)


def trip_date(record) -> date:
    """Calendar date of a record; accepts ``date`` or an ISO string"""
    value = record.trip_date
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


def trip_income(record) -> int:
    return sum(_amount(record, field) for field in INCOME_FIELDS)


def trip_expense(record) -> int:
    return sum(_amount(record, field) for field in EXPENSE_FIELDS)


def trip_profit(record) -> int:
    return trip_income(record) - trip_expense(record)


def week_of_year(day: date) -> int:
    """Sunday-started week number, week 1 holds January 1st"""
    jan_first = date(day.year, 1, 1)
    offset = (day - jan_first).days
    # weekday() is Monday=0; shift to Sunday=0
    jan_first_weekday = (jan_first.weekday() + 1) % 7
    return (offset + jan_first_weekday + 1 + 6) // 7


def _fill_bucket(bucket: AnalyticsBucket, records: Iterable) -> AnalyticsBucket:
    for record in records:
        income = trip_income(record)
        expense = trip_expense(record)
        bucket.passengers += _amount(record, "total_passengers")
        bucket.income += income
        bucket.expense += expense
        bucket.profit += income - expense
        bucket.trips += 1
    return bucket


def bucket_by_day(records: Sequence, year: int, month: int) -> List[AnalyticsBucket]:
    """One bucket per calendar day of the month, including empty days"""
    days_in_month = calendar.monthrange(year, month)[1]
    by_day: Dict[int, list] = defaultdict(list)
    for record in records:
        day = trip_date(record)
        if day.year == year and day.month == month:
            by_day[day.day].append(record)

    return [
        _fill_bucket(AnalyticsBucket(key=day, label=str(day)), by_day.get(day, []))
        for day in range(1, days_in_month + 1)
    ]


def bucket_by_week(records: Sequence, year: int) -> List[AnalyticsBucket]:
    """Weeks of the year that have at least one trip"""
    by_week: Dict[int, list] = defaultdict(list)
    for record in records:
        day = trip_date(record)
        if day.year == year:
            by_week[week_of_year(day)].append(record)

    return [
        _fill_bucket(AnalyticsBucket(key=week, label=f"M{week}"), by_week[week])
        for week in sorted(by_week)
    ]


def bucket_by_month(records: Sequence, year: int) -> List[AnalyticsBucket]:
    """Exactly twelve buckets, January to December"""
    by_month: Dict[int, list] = defaultdict(list)
    for record in records:
        day = trip_date(record)
        if day.year == year:
            by_month[day.month].append(record)

    return [
        _fill_bucket(AnalyticsBucket(key=month, label=MONTH_LABELS[month - 1]), by_month.get(month, []))
        for month in range(1, 13)
    ]


def bucket_by_year(records: Sequence) -> List[AnalyticsBucket]:
    """One bucket per year present in the data"""
    by_year: Dict[int, list] = defaultdict(list)
    for record in records:
        by_year[trip_date(record).year].append(record)

    return [
        _fill_bucket(AnalyticsBucket(key=year, label=str(year)), by_year[year])
        for year in sorted(by_year)
    ]


def summarize(buckets: Iterable[AnalyticsBucket]) -> Summary:
    total = Summary()
    for bucket in buckets:
        total = total + Summary(
            passengers=bucket.passengers,
            income=bucket.income,
            expense=bucket.expense,
            profit=bucket.profit,
            trips=bucket.trips
        )
    return total


def expense_breakdown(records: Sequence) -> List[ExpenseCategoryTotal]:
    """Expense categories with a positive total, in display priority order"""
    breakdown = []
    for field, label in EXPENSE_CATEGORIES:
        amount = sum(_amount(record, field) for record in records)
        if amount > 0:
            breakdown.append(ExpenseCategoryTotal(
                category=field[len("expense_"):],
                label=label,
                amount=amount
            ))
    return breakdown


def finance_totals(records: Sequence) -> FinanceTotals:
    sums = {field: sum(_amount(record, field) for record in records)
            for field in INCOME_FIELDS + EXPENSE_FIELDS}
    total_income = sum(sums[field] for field in INCOME_FIELDS)
    total_expense = sum(sums[field] for field in EXPENSE_FIELDS)
    return FinanceTotals(
        **sums,
        total_income=total_income,
        total_expense=total_expense,
        profit=total_income - total_expense
    )


def filter_by_month(records: Sequence, year: int, month: int) -> list:
    result = []
    for record in records:
        day = trip_date(record)
        if day.year == year and day.month == month:
            result.append(record)
    return result


def available_years(records: Sequence, today: Optional[date] = None) -> List[int]:
    """Years present in the data, newest first; the current year when empty"""
    years = {trip_date(record).year for record in records}
    if not years:
        years.add((today or date.today()).year)
    return sorted(years, reverse=True)


def parse_pickup_time(value: str) -> Tuple[int, int]:
    """Parse ``"16.00"`` or ``"16:00"`` into (hour, minute)"""
    text = (value or "").strip().replace(":", ".")
    hour, _, minute = text.partition(".")
    try:
        return int(hour), int(minute or 0)
    except ValueError:
        raise ValueError(f"Invalid pickup time: {value!r}")


def passengers_by_route(records: Sequence) -> List[NamedCount]:
    passengers: Dict[str, int] = defaultdict(int)
    trips: Dict[str, int] = defaultdict(int)
    for record in records:
        route = f"{record.route_from} → {record.route_to}"
        passengers[route] += _amount(record, "total_passengers")
        trips[route] += 1

    rows = [NamedCount(name=route, passengers=count, trips=trips[route])
            for route, count in passengers.items()]
    return sorted(rows, key=lambda row: (-row.passengers, row.name))


def passengers_by_time_slot(records: Sequence) -> List[NamedCount]:
    passengers: Dict[str, int] = defaultdict(int)
    trips: Dict[str, int] = defaultdict(int)
    for record in records:
        hour, minute = parse_pickup_time(record.pickup_time)
        slot = f"{hour:02d}.{minute:02d}"
        passengers[slot] += _amount(record, "total_passengers")
        trips[slot] += 1

    return [NamedCount(name=slot, passengers=passengers[slot], trips=trips[slot])
            for slot in sorted(passengers)]
