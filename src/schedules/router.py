from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional

from src.auth.dependencies import require_admin
from src.database import get_db
from src.exceptions import NotFoundError, backend_error
from src.schedules.schemas import (
    ScheduleCreate, ScheduleUpdate, ScheduleResponse, ScheduleImportResult
)
from src.schedules.service import ScheduleService

router = APIRouter()

@router.get("", response_model=List[ScheduleResponse])
def list_active_schedules(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    """Active schedules for the public site"""
    return ScheduleService(db).list_schedules(active_only=True, category=category)

@router.get("/categories", response_model=List[str])
def list_categories(db: Session = Depends(get_db)):
    return ScheduleService(db).list_categories()

@router.get("/admin", response_model=List[ScheduleResponse])
def list_all_schedules(
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """All schedules including inactive ones"""
    return ScheduleService(db).list_schedules()

@router.post("", response_model=ScheduleResponse, status_code=status.HTTP_201_CREATED)
def create_schedule(
    data: ScheduleCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return ScheduleService(db).create_schedule(data)
    except SQLAlchemyError:
        raise backend_error("create schedule", db)

@router.post("/import", response_model=ScheduleImportResult)
def import_schedules(
    items: List[ScheduleCreate],
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Bulk import of schedules, existing departures are skipped"""
    try:
        return ScheduleService(db).import_schedules(items)
    except SQLAlchemyError:
        raise backend_error("import schedules", db)

@router.put("/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: str,
    data: ScheduleUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return ScheduleService(db).update_schedule(schedule_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("update schedule", db)

@router.post("/{schedule_id}/toggle", response_model=ScheduleResponse)
def toggle_schedule(
    schedule_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return ScheduleService(db).toggle_active(schedule_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.delete("/{schedule_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_schedule(
    schedule_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        ScheduleService(db).delete_schedule(schedule_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("delete schedule", db)
