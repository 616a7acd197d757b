"""
Trip Operations Module

Per-departure bookkeeping for the back office:

- Manual entry and editing of trip income and expenses
- Manifests grouping a day's bookings by vehicle departure
- One-time promotion of a manifest into a trip operation
- Operation receipts and passenger manifests as PDFs

Key Components:
- service.py: Trip operation CRUD, period filters and list totals
- manifest_service.py: Booking grouping and manifest promotion
- router.py: FastAPI endpoints for operations and manifests
- schemas.py: Pydantic models for operation and manifest data
"""

from .router import router, manifest_router
from .service import TripOperationService, operation_stats
from .manifest_service import (
    ManifestService, ManifestGroup, group_bookings, build_trip_operation, driver_commission
)
from .schemas import (
    TripOperationCreate, TripOperationUpdate, TripOperationResponse,
    OperationPeriod, OperationStats, ManifestKey, ManifestProcessRequest,
    ManifestGroupResponse
)

__all__ = [
    "router",
    "manifest_router",
    "TripOperationService",
    "operation_stats",
    "ManifestService",
    "ManifestGroup",
    "group_bookings",
    "build_trip_operation",
    "driver_commission",
    "TripOperationCreate",
    "TripOperationUpdate",
    "TripOperationResponse",
    "OperationPeriod",
    "OperationStats",
    "ManifestKey",
    "ManifestProcessRequest",
    "ManifestGroupResponse"
]
