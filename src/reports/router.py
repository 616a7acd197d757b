from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from src.auth.dependencies import require_admin
from src.database import get_db
from src.reports.schemas import (
    Granularity, AnalyticsResponse, FinanceReportResponse, PassengerReportResponse
)
from src.reports.service import ReportService

router = APIRouter()

def _period(year: Optional[int], month: Optional[int]):
    today = date.today()
    return year or today.year, month or today.month

@router.get("/analytics", response_model=AnalyticsResponse)
def get_analytics(
    granularity: Granularity = Query(Granularity.MONTH),
    year: Optional[int] = Query(None, ge=2000, le=2100),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Passenger, income, expense and profit buckets"""
    year, month = _period(year, month)
    return ReportService(db).analytics(granularity, year, month)

@router.get("/finance", response_model=FinanceReportResponse)
def get_finance_report(
    year: Optional[int] = Query(None, ge=2000, le=2100),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Monthly income and expense totals with the yearly trend"""
    year, month = _period(year, month)
    return ReportService(db).finance(year, month)

@router.get("/passengers", response_model=PassengerReportResponse)
def get_passenger_report(
    year: Optional[int] = Query(None, ge=2000, le=2100),
    month: Optional[int] = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    year, month = _period(year, month)
    return ReportService(db).passengers(year, month)
