from fastapi import APIRouter, Depends, HTTPException, status, Query, File, Form, UploadFile
from fastapi.responses import FileResponse, Response
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import Optional
from datetime import date

from src.auth.dependencies import require_admin
from src.database import get_db
from src.exceptions import NotFoundError, backend_error
from src.bookings.schemas import (
    BookingCreateRequest, OfflineBookingRequest, BookingLookupRequest,
    BookingStatusUpdate, BookingResponse, BookingListResponse, BookingStats,
    PaymentStatus, WhatsAppLink
)
from src.bookings.booking_service import BookingService
from src.bookings.ticket_service import TicketService

router = APIRouter()

def _pdf_response(filename: str, content: bytes) -> Response:
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )

# Customer Endpoints
@router.post("", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_booking(
    request: BookingCreateRequest,
    db: Session = Depends(get_db)
):
    """Create a pending booking from the public booking form"""
    try:
        return BookingService(db).create_booking(request)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("create booking", db)

@router.post("/track", response_model=BookingResponse)
def track_booking(
    request: BookingLookupRequest,
    db: Session = Depends(get_db)
):
    """Look up a booking by order id and phone number"""
    try:
        return BookingService(db).lookup_booking(request.order_id, request.phone)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

@router.post("/{order_id}/payment-proof", response_model=BookingResponse)
async def upload_payment_proof(
    order_id: str,
    phone: str = Form(...),
    file: UploadFile = File(...),
    db: Session = Depends(get_db)
):
    """Upload a transfer receipt; the booking then waits for admin verification"""
    data = await file.read()
    try:
        return BookingService(db).attach_payment_proof(
            order_id, phone, file.filename, file.content_type, data
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except (OSError, SQLAlchemyError):
        raise backend_error("upload payment proof", db)

@router.get("/{order_id}/ticket")
def download_ticket(
    order_id: str,
    phone: str = Query(..., min_length=1),
    db: Session = Depends(get_db)
):
    """E-ticket PDF for the customer"""
    service = TicketService(db)
    try:
        document = service.customer_ticket(order_id, phone)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return _pdf_response(*service.generate_pdf_ticket(document))

# Admin Endpoints
@router.get("", response_model=BookingListResponse)
def list_bookings(
    payment_status: Optional[PaymentStatus] = Query(None, alias="status"),
    travel_date: Optional[date] = Query(None, alias="date"),
    search: Optional[str] = Query(None),
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    bookings = BookingService(db).list_bookings(payment_status, travel_date, search)
    return BookingListResponse(bookings=bookings, total=len(bookings))

@router.get("/stats", response_model=BookingStats)
def booking_stats(
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Booking counts per payment status"""
    return BookingService(db).booking_stats()

@router.post("/offline", response_model=BookingResponse, status_code=status.HTTP_201_CREATED)
def create_offline_booking(
    request: OfflineBookingRequest,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Record a walk-in or phone booking against a schedule"""
    try:
        return BookingService(db).create_offline_booking(request)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("create offline booking", db)

@router.get("/{order_id}", response_model=BookingResponse)
def get_booking(
    order_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        return BookingService(db).get_booking(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.patch("/{order_id}/status", response_model=BookingResponse)
def update_booking_status(
    order_id: str,
    update: BookingStatusUpdate,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Verify, reject, cancel or reopen a booking"""
    try:
        return BookingService(db).update_status(order_id, update.payment_status)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("update booking status", db)

@router.delete("/{order_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_booking(
    order_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    try:
        BookingService(db).delete_booking(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except SQLAlchemyError:
        raise backend_error("delete booking", db)

@router.get("/{order_id}/payment-proof")
def download_payment_proof(
    order_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Uploaded transfer receipt for verification"""
    try:
        return FileResponse(BookingService(db).payment_proof_path(order_id))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

@router.get("/{order_id}/admin-ticket")
def download_admin_ticket(
    order_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    service = TicketService(db)
    try:
        document = service.admin_ticket(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return _pdf_response(*service.generate_pdf_ticket(document))

@router.get("/{order_id}/whatsapp", response_model=WhatsAppLink)
def whatsapp_ticket_link(
    order_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Chat link with a prefilled ticket message for the customer"""
    try:
        return TicketService(db).whatsapp_link(order_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
