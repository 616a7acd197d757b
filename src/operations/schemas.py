from pydantic import BaseModel, Field, computed_field, field_validator
from typing import List, Optional
from datetime import date, datetime
from enum import Enum

from src.bookings.schemas import BookingResponse
from src.reports.aggregation import trip_income, trip_expense
from src.schedules.schemas import check_pickup_time

class OperationPeriod(str, Enum):
    """Trip date window for the operations list"""
    ALL = "all"
    TODAY = "today"
    WEEK = "week"
    MONTH = "month"

# Trip Operation Models
class TripOperationBase(BaseModel):
    trip_date: date
    route_from: str = Field(..., min_length=1, max_length=100)
    route_to: str = Field(..., min_length=1, max_length=100)
    route_via: Optional[str] = Field(None, max_length=100)
    pickup_time: str
    total_passengers: int = Field(0, ge=0)

    income_tickets: int = Field(0, ge=0)
    income_other: int = Field(0, ge=0)

    expense_fuel: int = Field(0, ge=0)
    expense_ferry: int = Field(0, ge=0)
    expense_snack: int = Field(0, ge=0)
    expense_meals: int = Field(0, ge=0)
    expense_driver_commission: int = Field(0, ge=0)
    expense_driver_meals: int = Field(0, ge=0)
    expense_toll: int = Field(0, ge=0)
    expense_parking: int = Field(0, ge=0)
    expense_other: int = Field(0, ge=0)

    notes: Optional[str] = None
    driver_name: Optional[str] = Field(None, max_length=255)
    driver_phone: Optional[str] = Field(None, max_length=32)
    vehicle_number: Optional[str] = Field(None, max_length=32)

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        return check_pickup_time(v)

class TripOperationCreate(TripOperationBase):
    pass

class TripOperationUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value"""
    trip_date: Optional[date] = None
    route_from: Optional[str] = Field(None, min_length=1, max_length=100)
    route_to: Optional[str] = Field(None, min_length=1, max_length=100)
    route_via: Optional[str] = Field(None, max_length=100)
    pickup_time: Optional[str] = None
    total_passengers: Optional[int] = Field(None, ge=0)

    income_tickets: Optional[int] = Field(None, ge=0)
    income_other: Optional[int] = Field(None, ge=0)

    expense_fuel: Optional[int] = Field(None, ge=0)
    expense_ferry: Optional[int] = Field(None, ge=0)
    expense_snack: Optional[int] = Field(None, ge=0)
    expense_meals: Optional[int] = Field(None, ge=0)
    expense_driver_commission: Optional[int] = Field(None, ge=0)
    expense_driver_meals: Optional[int] = Field(None, ge=0)
    expense_toll: Optional[int] = Field(None, ge=0)
    expense_parking: Optional[int] = Field(None, ge=0)
    expense_other: Optional[int] = Field(None, ge=0)

    notes: Optional[str] = None
    driver_name: Optional[str] = Field(None, max_length=255)
    driver_phone: Optional[str] = Field(None, max_length=32)
    vehicle_number: Optional[str] = Field(None, max_length=32)

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        if v is None:
            return v
        return check_pickup_time(v)

class TripOperationResponse(TripOperationBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @computed_field
    @property
    def total_income(self) -> int:
        return trip_income(self)

    @computed_field
    @property
    def total_expense(self) -> int:
        return trip_expense(self)

    @computed_field
    @property
    def profit(self) -> int:
        return self.total_income - self.total_expense

    class Config:
        from_attributes = True

class OperationStats(BaseModel):
    trips: int = 0
    passengers: int = 0
    income: int = 0
    expense: int = 0
    profit: int = 0

class OperationListResponse(BaseModel):
    operations: List[TripOperationResponse]
    stats: OperationStats

# Manifest Models
class ManifestKey(BaseModel):
    """Identity of one vehicle departure"""
    travel_date: date
    route_from: str = Field(..., min_length=1)
    route_to: str = Field(..., min_length=1)
    route_via: Optional[str] = None
    pickup_time: str = Field(..., min_length=1)

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        return check_pickup_time(v)

class ManifestProcessRequest(ManifestKey):
    driver_name: Optional[str] = Field(None, max_length=255)
    driver_phone: Optional[str] = Field(None, max_length=32)
    vehicle_number: Optional[str] = Field(None, max_length=32)

class ManifestGroupResponse(BaseModel):
    travel_date: date
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    pickup_time: str
    bookings: List[BookingResponse]
    total_passengers: int
    paid_bookings: int
    total_bookings: int
    paid_income: int
    processed: bool = False
    operation_id: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    vehicle_number: Optional[str] = None
