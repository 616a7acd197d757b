"""
Reports Module

Financial and passenger reporting over trip operations:

- Day, week, month and year buckets of passengers, income, expense, profit
- Monthly finance report with the expense breakdown by category
- Passenger report by route and pickup time slot

Key Components:
- aggregation.py: Pure bucketing and summary functions
- service.py: Report assembly from stored trip operations
- router.py: FastAPI endpoints for the admin dashboard
- schemas.py: Pydantic models for buckets and report responses
"""

from .router import router
from .service import ReportService
from .schemas import (
    Granularity, AnalyticsBucket, Summary, ExpenseCategoryTotal, FinanceTotals,
    NamedCount, AnalyticsResponse, FinanceReportResponse, PassengerReportResponse
)

__all__ = [
    "router",
    "ReportService",
    "Granularity",
    "AnalyticsBucket",
    "Summary",
    "ExpenseCategoryTotal",
    "FinanceTotals",
    "NamedCount",
    "AnalyticsResponse",
    "FinanceReportResponse",
    "PassengerReportResponse"
]
