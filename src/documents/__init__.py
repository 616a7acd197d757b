"""
Document Generation Module

Printable PDFs produced from stored records:

- Booking e-ticket with a tracking QR code
- Per-trip operation receipt (income, expenses, net)
- Passenger manifest for the driver

Key Components:
- schemas.py: Document models and their labelled field rows
- builders.py: Record to document conversion
- renderers.py: reportlab layouts and the kind to renderer dispatch
- formatting.py: Rupiah amounts and Indonesian dates
"""

from .schemas import (
    DocumentKind, DocumentRow, TicketDocument, OperationReceiptDocument,
    ManifestDocument, ManifestPassenger
)
from .builders import build_ticket_document, build_operation_receipt, build_manifest_document
from .renderers import render_document, document_filename, RENDERERS

__all__ = [
    "DocumentKind",
    "DocumentRow",
    "TicketDocument",
    "OperationReceiptDocument",
    "ManifestDocument",
    "ManifestPassenger",
    "build_ticket_document",
    "build_operation_receipt",
    "build_manifest_document",
    "render_document",
    "document_filename",
    "RENDERERS"
]
