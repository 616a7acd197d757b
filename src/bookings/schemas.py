from pydantic import BaseModel, Field, EmailStr, field_validator
from typing import List, Optional
from datetime import datetime, date
from enum import Enum

from src.bookings.validation import is_valid_phone
from src.schedules.schemas import check_pickup_time

class PaymentStatus(str, Enum):
    """Payment status enumeration"""
    PENDING = "pending"
    WAITING_VERIFICATION = "waiting_verification"
    PAID = "paid"
    CANCELLED = "cancelled"

def _check_phone(value: str) -> str:
    value = (value or "").strip()
    if not is_valid_phone(value):
        raise ValueError("Invalid Indonesian phone number")
    return value

# Booking Requests
class BookingCreateRequest(BaseModel):
    """Customer booking form"""
    route_from: str = Field(..., min_length=1, max_length=100)
    route_to: str = Field(..., min_length=1, max_length=100)
    route_via: Optional[str] = Field(None, max_length=100)
    travel_date: date
    pickup_time: str = Field(..., min_length=1, max_length=10)
    passengers: int = Field(1, ge=1, le=20)

    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_phone: str
    customer_email: Optional[EmailStr] = None

    pickup_address: str = Field(..., min_length=1)
    pickup_latitude: Optional[float] = Field(None, ge=-90, le=90)
    pickup_longitude: Optional[float] = Field(None, ge=-180, le=180)
    dropoff_address: Optional[str] = None
    dropoff_latitude: Optional[float] = Field(None, ge=-90, le=90)
    dropoff_longitude: Optional[float] = Field(None, ge=-180, le=180)
    notes: Optional[str] = None

    has_large_luggage: bool = False
    luggage_description: Optional[str] = None
    has_package_delivery: bool = False
    package_description: Optional[str] = None
    special_requests: Optional[str] = None

    @field_validator("customer_phone")
    @classmethod
    def validate_phone(cls, v):
        return _check_phone(v)

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        return check_pickup_time(v)

class OfflineBookingRequest(BaseModel):
    """Walk-in or phone booking entered by an admin against a schedule"""
    schedule_id: str
    travel_date: date
    passengers: int = Field(1, ge=1, le=20)
    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_phone: str
    customer_email: Optional[EmailStr] = None
    pickup_address: str = Field(..., min_length=1)
    dropoff_address: Optional[str] = None
    notes: Optional[str] = None
    payment_status: PaymentStatus = PaymentStatus.PAID

    @field_validator("customer_phone")
    @classmethod
    def validate_phone(cls, v):
        return _check_phone(v)

class BookingLookupRequest(BaseModel):
    """Order id plus the phone number used when booking"""
    order_id: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)

class BookingStatusUpdate(BaseModel):
    payment_status: PaymentStatus

# Booking Responses
class BookingResponse(BaseModel):
    id: str
    order_id: str
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    travel_date: date
    pickup_time: str
    passengers: int
    price_per_passenger: int
    total_price: int
    payment_status: PaymentStatus
    pickup_address: str
    dropoff_address: Optional[str] = None
    notes: Optional[str] = None
    has_large_luggage: Optional[bool] = False
    luggage_description: Optional[str] = None
    has_package_delivery: Optional[bool] = False
    package_description: Optional[str] = None
    special_requests: Optional[str] = None
    payment_proof_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class BookingListResponse(BaseModel):
    bookings: List[BookingResponse]
    total: int

class BookingStats(BaseModel):
    total: int = 0
    pending: int = 0
    waiting_verification: int = 0
    paid: int = 0
    cancelled: int = 0

class WhatsAppLink(BaseModel):
    """Prefilled chat link for sending a ticket to the customer"""
    order_id: str
    phone: str
    message: str
    url: str
