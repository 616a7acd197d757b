"""
Booking Module

Customer bookings and their back office handling:

- Public booking form priced from the schedule table
- Order tracking by order id and phone number
- Payment proof upload and admin verification
- Offline bookings entered by an admin
- E-ticket PDFs with a tracking QR code and WhatsApp ticket messages

Key Components:
- validation.py: Order id, phone number, address and upload checks
- booking_service.py: Booking lifecycle and payment status transitions
- ticket_service.py: Ticket documents, PDFs and chat links
- router.py: FastAPI endpoints for customers and admins
- schemas.py: Pydantic models for booking data structures

Payment status flow:
- Customer: pending -> waiting_verification (payment proof upload)
- Admin: waiting_verification -> paid | pending | cancelled,
  pending -> paid | cancelled, cancelled -> pending; paid is final
"""

from .router import router
from .booking_service import BookingService, ADMIN_TRANSITIONS
from .ticket_service import TicketService
from .schemas import (
    PaymentStatus, BookingCreateRequest, OfflineBookingRequest,
    BookingLookupRequest, BookingStatusUpdate, BookingResponse, BookingStats,
    WhatsAppLink
)

__all__ = [
    "router",
    "BookingService",
    "ADMIN_TRANSITIONS",
    "TicketService",
    "PaymentStatus",
    "BookingCreateRequest",
    "OfflineBookingRequest",
    "BookingLookupRequest",
    "BookingStatusUpdate",
    "BookingResponse",
    "BookingStats",
    "WhatsAppLink"
]
