"""
Schedules Module

Maintenance of the priced, timed route offerings that drive search and
booking prices:

- Public listing of active schedules
- Admin create, update, activate/deactivate and delete
- Bulk import of a schedule list

Key Components:
- service.py: Schedule table maintenance
- router.py: FastAPI endpoints for schedules
- schemas.py: Pydantic models for schedule data
"""

from .router import router
from .service import ScheduleService
from .schemas import ScheduleCreate, ScheduleUpdate, ScheduleResponse, ScheduleImportResult

__all__ = [
    "router",
    "ScheduleService",
    "ScheduleCreate",
    "ScheduleUpdate",
    "ScheduleResponse",
    "ScheduleImportResult"
]
