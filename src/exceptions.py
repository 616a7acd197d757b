"""Domain errors shared by the service layer.

Validation problems are plain ``ValueError`` (mapped to HTTP 400 by the
routers); the classes below carry a distinct meaning for the caller.
"""

import logging

from fastapi import HTTPException, status

logger = logging.getLogger(__name__)


class NotFoundError(LookupError):
    """Requested record does not exist"""


class InvalidStatusTransition(ValueError):
    """Payment status change not allowed from the current status"""

    def __init__(self, current: str, requested: str):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change payment status from '{current}' to '{requested}'")


class DuplicateTripOperationError(ValueError):
    """Manifest group already promoted to a trip operation"""

    def __init__(self, operation_id: str):
        self.operation_id = operation_id
        super().__init__("This trip has already been processed into operations")


def backend_error(action: str, db) -> HTTPException:
    """Roll back the session, log the failure and build a generic 500 response"""
    db.rollback()
    logger.exception("Failed to %s", action)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}"
    )
