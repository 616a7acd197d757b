from pydantic import BaseModel, Field, field_validator
from typing import List, Optional
from datetime import datetime

from src.reports.aggregation import parse_pickup_time

def check_pickup_time(value: str) -> str:
    hour, minute = parse_pickup_time(value)
    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError("Pickup time must be between 00.00 and 23.59")
    return value.strip()

# Schedule Models
class ScheduleBase(BaseModel):
    """Priced, timed route offering"""
    route_from: str = Field(..., min_length=1, max_length=100)
    route_to: str = Field(..., min_length=1, max_length=100)
    route_via: Optional[str] = Field(None, max_length=100)
    pickup_time: str = Field(..., description="Pickup time, e.g. '16.00'")
    category: str = Field(..., min_length=1, max_length=100)
    price: int = Field(..., ge=0)
    is_active: bool = True

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        return check_pickup_time(v)

    @field_validator("route_via")
    @classmethod
    def blank_via_is_none(cls, v):
        if v is not None and not v.strip():
            return None
        return v

class ScheduleCreate(ScheduleBase):
    pass

class ScheduleUpdate(BaseModel):
    route_from: Optional[str] = Field(None, min_length=1, max_length=100)
    route_to: Optional[str] = Field(None, min_length=1, max_length=100)
    route_via: Optional[str] = Field(None, max_length=100)
    pickup_time: Optional[str] = None
    category: Optional[str] = Field(None, min_length=1, max_length=100)
    price: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None

    @field_validator("pickup_time")
    @classmethod
    def validate_pickup_time(cls, v):
        if v is None:
            return v
        return check_pickup_time(v)

class ScheduleResponse(ScheduleBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class ScheduleImportResult(BaseModel):
    imported: int
    skipped: int
