import logging
from typing import List, Optional
from sqlalchemy.orm import Session

from src.exceptions import NotFoundError
from src.models import Schedule
from src.schedules.schemas import ScheduleCreate, ScheduleUpdate, ScheduleImportResult

logger = logging.getLogger(__name__)

class ScheduleService:
    """Admin maintenance of the schedule table"""

    def __init__(self, db: Session):
        self.db = db

    def list_schedules(self, active_only: bool = False, category: Optional[str] = None) -> List[Schedule]:
        query = self.db.query(Schedule)
        if active_only:
            query = query.filter(Schedule.is_active.is_(True))
        if category:
            query = query.filter(Schedule.category == category)
        return query.order_by(Schedule.category, Schedule.route_from, Schedule.pickup_time).all()

    def list_categories(self) -> List[str]:
        rows = self.db.query(Schedule.category).distinct().order_by(Schedule.category).all()
        return [row.category for row in rows]

    def get_schedule(self, schedule_id: str) -> Schedule:
        schedule = self.db.query(Schedule).filter(Schedule.id == schedule_id).first()
        if not schedule:
            raise NotFoundError("Schedule not found")
        return schedule

    def create_schedule(self, data: ScheduleCreate) -> Schedule:
        schedule = Schedule(**data.model_dump())
        self.db.add(schedule)
        self.db.commit()
        self.db.refresh(schedule)
        logger.info("Created schedule %s -> %s at %s", schedule.route_from, schedule.route_to, schedule.pickup_time)
        return schedule

    def update_schedule(self, schedule_id: str, data: ScheduleUpdate) -> Schedule:
        schedule = self.get_schedule(schedule_id)
        for field, value in data.model_dump(exclude_unset=True).items():
            setattr(schedule, field, value)
        self.db.commit()
        self.db.refresh(schedule)
        return schedule

    def toggle_active(self, schedule_id: str) -> Schedule:
        schedule = self.get_schedule(schedule_id)
        schedule.is_active = not schedule.is_active
        self.db.commit()
        self.db.refresh(schedule)
        return schedule

    def delete_schedule(self, schedule_id: str):
        schedule = self.get_schedule(schedule_id)
        self.db.delete(schedule)
        self.db.commit()
        logger.info("Deleted schedule %s", schedule_id)

    def import_schedules(self, items: List[ScheduleCreate]) -> ScheduleImportResult:
        """Bulk insert, skipping departures that already exist"""
        imported = skipped = 0
        for item in items:
            exists = self.db.query(Schedule).filter(
                Schedule.route_from == item.route_from,
                Schedule.route_to == item.route_to,
                Schedule.pickup_time == item.pickup_time
            ).first()
            if exists:
                skipped += 1
                continue
            self.db.add(Schedule(**item.model_dump()))
            imported += 1
        self.db.commit()
        logger.info("Imported %d schedules (%d skipped)", imported, skipped)
        return ScheduleImportResult(imported=imported, skipped=skipped)
