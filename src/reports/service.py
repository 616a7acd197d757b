from datetime import date
from typing import List, Optional

from sqlalchemy.orm import Session

from src.models import TripOperation
from src.reports import aggregation
from src.reports.schemas import (
    Granularity, AnalyticsResponse, FinanceReportResponse, PassengerReportResponse
)

class ReportService:
    """Trip operation reports for the admin dashboard"""

    def __init__(self, db: Session):
        self.db = db

    def _records(self, year: Optional[int] = None) -> List[TripOperation]:
        query = self.db.query(TripOperation)
        if year is not None:
            query = query.filter(
                TripOperation.trip_date >= date(year, 1, 1),
                TripOperation.trip_date <= date(year, 12, 31)
            )
        return query.order_by(TripOperation.trip_date).all()

    def analytics(self, granularity: Granularity, year: int, month: int) -> AnalyticsResponse:
        records = self._records()
        if granularity == Granularity.DAY:
            buckets = aggregation.bucket_by_day(records, year, month)
        elif granularity == Granularity.WEEK:
            buckets = aggregation.bucket_by_week(records, year)
        elif granularity == Granularity.MONTH:
            buckets = aggregation.bucket_by_month(records, year)
        else:
            buckets = aggregation.bucket_by_year(records)

        return AnalyticsResponse(
            granularity=granularity,
            year=year,
            month=month,
            buckets=buckets,
            summary=aggregation.summarize(buckets),
            available_years=aggregation.available_years(records)
        )

    def finance(self, year: int, month: int) -> FinanceReportResponse:
        records = self._records(year)
        month_records = aggregation.filter_by_month(records, year, month)
        return FinanceReportResponse(
            year=year,
            month=month,
            totals=aggregation.finance_totals(month_records),
            expense_breakdown=aggregation.expense_breakdown(month_records),
            monthly_trend=aggregation.bucket_by_month(records, year)
        )

    def passengers(self, year: int, month: int) -> PassengerReportResponse:
        records = self._records(year)
        month_records = aggregation.filter_by_month(records, year, month)
        daily = aggregation.bucket_by_day(month_records, year, month)
        summary = aggregation.summarize(daily)
        return PassengerReportResponse(
            year=year,
            month=month,
            total_passengers=summary.passengers,
            total_trips=summary.trips,
            by_route=aggregation.passengers_by_route(month_records),
            by_time_slot=aggregation.passengers_by_time_slot(month_records),
            daily=daily,
            monthly=aggregation.bucket_by_month(records, year)
        )
