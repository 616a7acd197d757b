from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import date, datetime
from enum import Enum

from src.documents.formatting import format_rupiah, format_long_date, route_text

class DocumentKind(str, Enum):
    """Printable document variants"""
    TICKET = "ticket"
    OPERATION_RECEIPT = "operation_receipt"
    MANIFEST = "manifest"

PAYMENT_LABELS = {
    "paid": "LUNAS",
    "pending": "BELUM BAYAR",
    "waiting_verification": "VERIFIKASI",
    "cancelled": "BATAL",
}

def payment_label(status: str) -> str:
    return PAYMENT_LABELS.get(status, (status or "").upper())

class DocumentRow(BaseModel):
    """One labelled value drawn on a page"""
    label: str
    value: str
    amount: Optional[int] = None
    bold: bool = False

def _money_row(label: str, amount: int, bold: bool = False) -> DocumentRow:
    return DocumentRow(label=label, value=format_rupiah(amount), amount=amount, bold=bold)

# Ticket
class TicketDocument(BaseModel):
    """E-ticket and payment invoice for one booking"""
    kind: Literal[DocumentKind.TICKET] = DocumentKind.TICKET
    agent_name: str
    order_id: str
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    travel_date: date
    pickup_time: str
    pickup_address: str
    dropoff_address: Optional[str] = None
    notes: Optional[str] = None
    passengers: int
    price_per_passenger: int
    total_price: int
    payment_status: str
    tracking_url: Optional[str] = None
    printed_at: datetime = Field(default_factory=datetime.now)

    def field_rows(self) -> List[DocumentRow]:
        return [
            DocumentRow(label="No. Order", value=self.order_id, bold=True),
            DocumentRow(label="Status", value=payment_label(self.payment_status)),
            DocumentRow(label="Nama", value=self.customer_name),
            DocumentRow(label="Telepon", value=self.customer_phone),
            DocumentRow(label="Rute", value=route_text(self.route_from, self.route_to, self.route_via)),
            DocumentRow(label="Tanggal Keberangkatan", value=format_long_date(self.travel_date)),
            DocumentRow(label="Jam Penjemputan", value=self.pickup_time),
            DocumentRow(label="Jumlah Penumpang", value=f"{self.passengers} orang", amount=self.passengers),
            _money_row("Harga per penumpang", self.price_per_passenger),
            _money_row("Total Pembayaran", self.total_price, bold=True),
        ]

# Operation receipt
class OperationReceiptDocument(BaseModel):
    """Income, expense and net result of one departure"""
    kind: Literal[DocumentKind.OPERATION_RECEIPT] = DocumentKind.OPERATION_RECEIPT
    agent_name: str
    trip_date: date
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    pickup_time: str
    total_passengers: int
    driver_name: Optional[str] = None
    vehicle_number: Optional[str] = None
    notes: Optional[str] = None
    income_tickets: int
    income_other: int
    total_income: int
    expense_rows: List[DocumentRow]
    total_expense: int
    profit: int
    printed_at: datetime = Field(default_factory=datetime.now)

    def income_rows(self) -> List[DocumentRow]:
        return [
            _money_row("Pendapatan Tiket", self.income_tickets),
            _money_row("Pendapatan Lain", self.income_other),
            _money_row("Total Pendapatan", self.total_income, bold=True),
        ]

    def field_rows(self) -> List[DocumentRow]:
        header = [
            DocumentRow(label="Tanggal", value=format_long_date(self.trip_date)),
            DocumentRow(label="Rute", value=route_text(self.route_from, self.route_to, self.route_via)),
            DocumentRow(label="Jam Jemput", value=self.pickup_time),
            DocumentRow(label="Penumpang", value=str(self.total_passengers), amount=self.total_passengers),
            DocumentRow(label="Sopir", value=self.driver_name or "-"),
            DocumentRow(label="Armada", value=self.vehicle_number or "-"),
        ]
        return (
            header
            + self.income_rows()
            + self.expense_rows
            + [_money_row("Total Pengeluaran", self.total_expense, bold=True),
               _money_row("Jumlah Bersih", self.profit, bold=True)]
        )

# Manifest
class ManifestPassenger(BaseModel):
    name: str
    phone: str
    pickup_address: str
    dropoff_address: Optional[str] = None
    passengers: int
    notes: Optional[str] = None
    has_large_luggage: bool = False
    luggage_description: Optional[str] = None
    has_package_delivery: bool = False
    package_description: Optional[str] = None
    special_requests: Optional[str] = None
    payment_status: str

    def flags(self) -> List[str]:
        """Luggage, package and special request notes for the driver"""
        notes = []
        if self.has_large_luggage:
            notes.append(f"Bagasi besar: {self.luggage_description or '-'}")
        if self.has_package_delivery:
            notes.append(f"Kirim paket: {self.package_description or '-'}")
        if self.special_requests:
            notes.append(f"Permintaan: {self.special_requests}")
        if self.notes:
            notes.append(f"Catatan: {self.notes}")
        return notes

class ManifestDocument(BaseModel):
    """Passenger roster for one vehicle departure"""
    kind: Literal[DocumentKind.MANIFEST] = DocumentKind.MANIFEST
    agent_name: str
    trip_date: date
    pickup_time: str
    route_from: str
    route_to: str
    route_via: Optional[str] = None
    vehicle_number: Optional[str] = None
    driver_name: Optional[str] = None
    driver_phone: Optional[str] = None
    passengers: List[ManifestPassenger]
    total_passengers: int
    paid_bookings: int
    total_bookings: int
    printed_at: datetime = Field(default_factory=datetime.now)

    def field_rows(self) -> List[DocumentRow]:
        return [
            DocumentRow(label="Rute", value=route_text(self.route_from, self.route_to, self.route_via)),
            DocumentRow(label="Tanggal", value=format_long_date(self.trip_date)),
            DocumentRow(label="Jam Jemput", value=self.pickup_time),
            DocumentRow(label="Armada", value=self.vehicle_number or "-"),
            DocumentRow(label="Sopir", value=f"{self.driver_name or '-'} ({self.driver_phone or '-'})"),
            DocumentRow(
                label="Total",
                value=f"{self.total_passengers} Penumpang  |  Lunas: {self.paid_bookings}/{self.total_bookings} Booking",
                amount=self.total_passengers,
                bold=True
            ),
        ]
