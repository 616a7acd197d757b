from fastapi import APIRouter, Depends, HTTPException, status, Query
from fastapi.responses import Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional
from datetime import date

from src.auth.dependencies import require_admin
from src.database import get_db
from src.documents import build_operation_receipt, render_document, document_filename
from src.exceptions import NotFoundError, DuplicateTripOperationError, backend_error
from src.operations.schemas import (
    TripOperationCreate, TripOperationUpdate, TripOperationResponse,
    OperationListResponse, OperationPeriod, ManifestGroupResponse,
    ManifestProcessRequest
)
from src.operations.service import TripOperationService, operation_stats
from src.operations.manifest_service import ManifestService

router = APIRouter()
manifest_router = APIRouter()

def _pdf_response(document) -> Response:
    return Response(
        content=render_document(document),
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{document_filename(document)}"'}
    )

# Trip Operation Endpoints
@router.get("", response_model=OperationListResponse)
def list_operations(
    period: OperationPeriod = Query(OperationPeriod.ALL),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Trip operations with totals for the listed set"""
    operations = TripOperationService(db).list_operations(period, search)
    return OperationListResponse(
        operations=[TripOperationResponse.model_validate(op) for op in operations],
        stats=operation_stats(operations)
    )

@router.post("", response_model=TripOperationResponse, status_code=status.HTTP_201_CREATED)
def create_operation(
    data: TripOperationCreate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return TripOperationService(db).create_operation(data)
    except SQLAlchemyError:
        raise backend_error("create trip operation", db)

@router.get("/{operation_id}", response_model=TripOperationResponse)
def get_operation(
    operation_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return TripOperationService(db).get_operation(operation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.put("/{operation_id}", response_model=TripOperationResponse)
def update_operation(
    operation_id: str,
    data: TripOperationUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return TripOperationService(db).update_operation(operation_id, data)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("update trip operation", db)

@router.delete("/{operation_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_operation(
    operation_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        TripOperationService(db).delete_operation(operation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("delete trip operation", db)

@router.get("/{operation_id}/pdf")
def download_operation_receipt(
    operation_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Printable receipt for one trip"""
    try:
        operation = TripOperationService(db).get_operation(operation_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _pdf_response(build_operation_receipt(operation))

# Manifest Endpoints
@manifest_router.get("", response_model=List[ManifestGroupResponse])
def list_manifests(
    travel_date: date = Query(..., alias="date"),
    route_from: Optional[str] = Query(None, alias="from"),
    route_to: Optional[str] = Query(None, alias="to"),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Bookings of a day grouped by departure"""
    return ManifestService(db).list_manifests(travel_date, route_from, route_to)

@manifest_router.post("/process", response_model=TripOperationResponse, status_code=status.HTTP_201_CREATED)
def process_manifest(
    request: ManifestProcessRequest,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Promote a departure's bookings into a trip operation"""
    try:
        return ManifestService(db).promote(request)
    except DuplicateTripOperationError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("process manifest", db)

@manifest_router.post("/pdf")
def download_manifest(
    request: ManifestProcessRequest,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Passenger manifest PDF for one departure"""
    try:
        document = ManifestService(db).manifest_document(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _pdf_response(document)
