from typing import Tuple
from urllib.parse import quote

from sqlalchemy.orm import Session

from src.bookings.booking_service import BookingService
from src.bookings.schemas import WhatsAppLink
from src.bookings.validation import whatsapp_phone
from src.documents import (
    TicketDocument, build_ticket_document, render_document, document_filename
)
from src.documents.formatting import format_long_date, format_rupiah, route_text
from src.documents.schemas import payment_label

class TicketService:
    """Service for e-ticket PDFs and ticket messages sent over WhatsApp"""

    def __init__(self, db: Session):
        self.db = db
        self.booking_service = BookingService(db)

    def customer_ticket(self, order_id: str, phone: str) -> TicketDocument:
        booking = self.booking_service.lookup_booking(order_id, phone)
        return build_ticket_document(booking)

    def admin_ticket(self, order_id: str) -> TicketDocument:
        booking = self.booking_service.get_booking(order_id)
        return build_ticket_document(booking)

    def generate_pdf_ticket(self, document: TicketDocument) -> Tuple[str, bytes]:
        """Return ``(filename, pdf bytes)`` for a ticket"""
        return document_filename(document), render_document(document)

    def whatsapp_message(self, document: TicketDocument) -> str:
        lines = [
            f"Halo {document.customer_name},",
            "",
            f"Terima kasih telah memesan travel di *{document.agent_name}*.",
            "",
            "*TIKET PERJALANAN ANDA*",
            f"Order ID: {document.order_id}",
            f"Rute: {route_text(document.route_from, document.route_to, document.route_via)}",
            f"Tanggal: {format_long_date(document.travel_date)}",
            f"Jam Jemput: {document.pickup_time}",
            f"Alamat Jemput: {document.pickup_address}",
        ]
        if document.dropoff_address:
            lines.append(f"Alamat Antar: {document.dropoff_address}")
        lines += [
            f"Jumlah Penumpang: {document.passengers}",
            f"Total: {format_rupiah(document.total_price)}",
            f"Status: *{payment_label(document.payment_status)}*",
            "",
            f"Cek status pesanan: {document.tracking_url}",
            "Mohon simpan tiket ini dan tunjukkan saat penjemputan.",
        ]
        return "\n".join(lines)

    def whatsapp_link(self, order_id: str) -> WhatsAppLink:
        document = self.admin_ticket(order_id)
        phone = whatsapp_phone(document.customer_phone)
        message = self.whatsapp_message(document)
        return WhatsAppLink(
            order_id=document.order_id,
            phone=phone,
            message=message,
            url=f"https://wa.me/{phone}?text={quote(message)}"
        )
