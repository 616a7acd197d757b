from pydantic import BaseModel
from typing import List
from enum import Enum

class Granularity(str, Enum):
    """Time window used to bucket trip operations"""
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"

class AnalyticsBucket(BaseModel):
    """Totals for one day, week, month or year"""
    key: int
    label: str
    passengers: int = 0
    income: int = 0
    expense: int = 0
    profit: int = 0
    trips: int = 0

class Summary(BaseModel):
    """Totals over a list of buckets"""
    passengers: int = 0
    income: int = 0
    expense: int = 0
    profit: int = 0
    trips: int = 0

    def __add__(self, other: "Summary") -> "Summary":
        return Summary(
            passengers=self.passengers + other.passengers,
            income=self.income + other.income,
            expense=self.expense + other.expense,
            profit=self.profit + other.profit,
            trips=self.trips + other.trips
        )

class ExpenseCategoryTotal(BaseModel):
    category: str
    label: str
    amount: int

class FinanceTotals(BaseModel):
    """Per-field sums for the finance report header"""
    income_tickets: int = 0
    income_other: int = 0
    total_income: int = 0
    expense_fuel: int = 0
    expense_ferry: int = 0
    expense_snack: int = 0
    expense_meals: int = 0
    expense_driver_commission: int = 0
    expense_driver_meals: int = 0
    expense_toll: int = 0
    expense_parking: int = 0
    expense_other: int = 0
    total_expense: int = 0
    profit: int = 0

class NamedCount(BaseModel):
    name: str
    passengers: int
    trips: int

# Responses
class AnalyticsResponse(BaseModel):
    granularity: Granularity
    year: int
    month: int
    buckets: List[AnalyticsBucket]
    summary: Summary
    available_years: List[int]

class FinanceReportResponse(BaseModel):
    year: int
    month: int
    totals: FinanceTotals
    expense_breakdown: List[ExpenseCategoryTotal]
    monthly_trend: List[AnalyticsBucket]

class PassengerReportResponse(BaseModel):
    year: int
    month: int
    total_passengers: int
    total_trips: int
    by_route: List[NamedCount]
    by_time_slot: List[NamedCount]
    daily: List[AnalyticsBucket]
    monthly: List[AnalyticsBucket]
