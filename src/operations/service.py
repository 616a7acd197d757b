import calendar
import logging
from datetime import date, timedelta
from typing import List, Optional, Sequence, Tuple

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from src.exceptions import NotFoundError
from src.models import TripOperation
from src.operations.schemas import (
    TripOperationCreate, TripOperationUpdate, OperationPeriod, OperationStats
)
from src.reports.aggregation import bucket_by_year, summarize

logger = logging.getLogger(__name__)

# Fields an update may clear by sending null
CLEARABLE_FIELDS = {"route_via", "notes", "driver_name", "driver_phone", "vehicle_number"}

def period_bounds(
    period: OperationPeriod, today: Optional[date] = None
) -> Tuple[Optional[date], Optional[date]]:
    """Inclusive ``(first, last)`` trip dates of a period filter; ``None`` leaves that side open"""
    today = today or date.today()
    if period == OperationPeriod.TODAY:
        return today, today
    if period == OperationPeriod.WEEK:
        return today - timedelta(days=7), None
    if period == OperationPeriod.MONTH:
        last_day = calendar.monthrange(today.year, today.month)[1]
        return today.replace(day=1), today.replace(day=last_day)
    return None, None

def operation_stats(operations: Sequence) -> OperationStats:
    summary = summarize(bucket_by_year(operations))
    return OperationStats(
        trips=summary.trips,
        passengers=summary.passengers,
        income=summary.income,
        expense=summary.expense,
        profit=summary.profit
    )

class TripOperationService:
    """Admin bookkeeping of per-departure income and expenses"""

    def __init__(self, db: Session):
        self.db = db

    def list_operations(
        self,
        period: OperationPeriod = OperationPeriod.ALL,
        search: Optional[str] = None,
        today: Optional[date] = None
    ) -> List[TripOperation]:
        query = self.db.query(TripOperation)

        start, end = period_bounds(period, today)
        if start is not None:
            query = query.filter(TripOperation.trip_date >= start)
        if end is not None:
            query = query.filter(TripOperation.trip_date <= end)

        if search:
            pattern = f"%{search.strip().lower()}%"
            query = query.filter(or_(
                func.lower(TripOperation.route_from).like(pattern),
                func.lower(TripOperation.route_to).like(pattern),
                func.lower(TripOperation.driver_name).like(pattern)
            ))

        return query.order_by(TripOperation.trip_date.desc(), TripOperation.pickup_time).all()

    def get_operation(self, operation_id: str) -> TripOperation:
        operation = self.db.query(TripOperation).filter(TripOperation.id == operation_id).first()
        if not operation:
            raise NotFoundError("Trip operation not found")
        return operation

    def create_operation(self, data: TripOperationCreate) -> TripOperation:
        operation = TripOperation(**data.model_dump())
        self.db.add(operation)
        self.db.commit()
        self.db.refresh(operation)
        logger.info(
            "Trip operation %s created for %s %s -> %s",
            operation.id, operation.trip_date, operation.route_from, operation.route_to
        )
        return operation

    def update_operation(self, operation_id: str, data: TripOperationUpdate) -> TripOperation:
        """Partial update; the last write wins"""
        operation = self.get_operation(operation_id)
        changes = data.model_dump(exclude_unset=True)
        for field, value in changes.items():
            if value is None and field not in CLEARABLE_FIELDS:
                continue
            setattr(operation, field, value)
        self.db.commit()
        self.db.refresh(operation)
        logger.info("Trip operation %s updated: %s", operation.id, ", ".join(sorted(changes)))
        return operation

    def delete_operation(self, operation_id: str):
        operation = self.get_operation(operation_id)
        self.db.delete(operation)
        self.db.commit()
        logger.info("Trip operation %s deleted", operation_id)
