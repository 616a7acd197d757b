from io import BytesIO
from xml.sax.saxutils import escape
from typing import Callable, Dict, List, Optional

import qrcode
from qrcode import constants
from PIL import Image as PILImage
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, A6
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer, Image
)

from src.documents.formatting import format_timestamp
from src.documents.schemas import (
    DocumentKind, DocumentRow, TicketDocument, OperationReceiptDocument,
    ManifestDocument, payment_label
)

BRAND_COLOR = colors.HexColor("#0F4C81")

_ROW_STYLE = [
    ('TEXTCOLOR', (0, 0), (-1, -1), colors.black),
    ('ALIGN', (0, 0), (0, -1), 'LEFT'),
    ('ALIGN', (1, 0), (1, -1), 'RIGHT'),
    ('FONTNAME', (0, 0), (-1, -1), 'Helvetica'),
    ('FONTSIZE', (0, 0), (-1, -1), 9),
    ('BOTTOMPADDING', (0, 0), (-1, -1), 4),
    ('LINEBELOW', (0, 0), (-1, -1), 0.25, colors.lightgrey),
]

def _rows_table(rows: List[DocumentRow], col_widths: List[float]) -> Table:
    table = Table([[row.label, row.value] for row in rows], colWidths=col_widths)
    style = list(_ROW_STYLE)
    for index, row in enumerate(rows):
        if row.bold:
            style.append(('FONTNAME', (0, index), (-1, index), 'Helvetica-Bold'))
    table.setStyle(TableStyle(style))
    return table

def _title(agent_name: str, heading: str, styles) -> List:
    return [
        Paragraph(agent_name, styles['Title']),
        Paragraph(heading, styles['Heading2']),
        Spacer(1, 6),
    ]

def _build(story: List, pagesize) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=pagesize,
        leftMargin=10 * mm,
        rightMargin=10 * mm,
        topMargin=10 * mm,
        bottomMargin=10 * mm
    )
    doc.build(story)
    return buffer.getvalue()

def qr_code_image(data: str, size: int = 300) -> BytesIO:
    """PNG bytes of a QR code for ``data``"""
    qr = qrcode.QRCode(
        version=1,
        error_correction=constants.ERROR_CORRECT_M,
        box_size=10,
        border=4,
    )
    qr.add_data(data)
    qr.make(fit=True)

    image = qr.make_image(fill_color="black", back_color="white").convert("RGB")
    image = image.resize((size, size), PILImage.LANCZOS)

    output = BytesIO()
    image.save(output, format="PNG")
    output.seek(0)
    return output

def render_ticket(document: TicketDocument) -> bytes:
    """E-ticket with order details, payment box and a tracking QR code"""
    styles = getSampleStyleSheet()
    width = A4[0] - 20 * mm

    story = _title(document.agent_name, "E-Tiket & Invoice", styles)
    story.append(_rows_table(document.field_rows(), [width * 0.4, width * 0.6]))
    story.append(Spacer(1, 8))

    addresses = [["Alamat Jemput", document.pickup_address]]
    if document.dropoff_address:
        addresses.append(["Alamat Antar", document.dropoff_address])
    if document.notes:
        addresses.append(["Catatan", document.notes])
    address_table = Table(
        [[label, Paragraph(escape(value), styles['Normal'])] for label, value in addresses],
        colWidths=[width * 0.25, width * 0.75]
    )
    address_table.setStyle(TableStyle([
        ('FONTNAME', (0, 0), (0, -1), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('BACKGROUND', (0, 0), (-1, -1), colors.whitesmoke),
    ]))
    story.append(address_table)
    story.append(Spacer(1, 10))

    status_table = Table([[f"Status Pembayaran: {payment_label(document.payment_status)}"]], colWidths=[width])
    status_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, -1), BRAND_COLOR),
        ('TEXTCOLOR', (0, 0), (-1, -1), colors.white),
        ('FONTNAME', (0, 0), (-1, -1), 'Helvetica-Bold'),
        ('ALIGN', (0, 0), (-1, -1), 'CENTER'),
    ]))
    story.append(status_table)

    if document.tracking_url:
        story.append(Spacer(1, 10))
        story.append(Image(qr_code_image(document.tracking_url), width=35 * mm, height=35 * mm))
        story.append(Paragraph("Scan untuk cek status pesanan", styles['Italic']))

    story.append(Spacer(1, 10))
    story.append(Paragraph(f"Dicetak: {format_timestamp(document.printed_at)}", styles['Normal']))
    return _build(story, A4)

def render_operation_receipt(document: OperationReceiptDocument) -> bytes:
    """Compact receipt listing income, expenses and net result"""
    styles = getSampleStyleSheet()
    width = A6[0] - 20 * mm

    story = _title(document.agent_name, "Nota Operasional", styles)
    story.append(_rows_table(document.field_rows(), [width * 0.55, width * 0.45]))
    if document.notes:
        story.append(Spacer(1, 4))
        story.append(Paragraph(f"Catatan: {escape(document.notes)}", styles['Normal']))
    story.append(Spacer(1, 6))
    story.append(Paragraph(f"Dicetak: {format_timestamp(document.printed_at)}", styles['Normal']))
    return _build(story, A6)

def render_manifest(document: ManifestDocument) -> bytes:
    """Passenger roster for the driver with flags and payment state"""
    styles = getSampleStyleSheet()
    width = A4[0] - 20 * mm

    story = _title(document.agent_name, "Manifest Penumpang", styles)
    story.append(_rows_table(document.field_rows(), [width * 0.25, width * 0.75]))
    story.append(Spacer(1, 10))

    roster = [["No", "Nama / Telepon", "Jemput / Antar", "Pax", "Bayar"]]
    for index, passenger in enumerate(document.passengers, start=1):
        addresses = escape(passenger.pickup_address)
        if passenger.dropoff_address:
            addresses += f"<br/>Antar: {escape(passenger.dropoff_address)}"
        flags = passenger.flags()
        if flags:
            addresses += "<br/><i>" + "<br/>".join(escape(flag) for flag in flags) + "</i>"
        roster.append([
            str(index),
            Paragraph(f"{escape(passenger.name)}<br/>{escape(passenger.phone)}", styles['Normal']),
            Paragraph(addresses, styles['Normal']),
            str(passenger.passengers),
            payment_label(passenger.payment_status),
        ])

    roster_table = Table(
        roster,
        colWidths=[width * 0.06, width * 0.26, width * 0.46, width * 0.08, width * 0.14],
        repeatRows=1
    )
    roster_table.setStyle(TableStyle([
        ('BACKGROUND', (0, 0), (-1, 0), BRAND_COLOR),
        ('TEXTCOLOR', (0, 0), (-1, 0), colors.whitesmoke),
        ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ('FONTSIZE', (0, 0), (-1, -1), 9),
        ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ('ALIGN', (3, 0), (3, -1), 'CENTER'),
        ('GRID', (0, 0), (-1, -1), 0.5, colors.grey),
    ]))
    story.append(roster_table)
    story.append(Spacer(1, 10))
    story.append(Paragraph(f"Dicetak: {format_timestamp(document.printed_at)}", styles['Normal']))
    return _build(story, A4)

RENDERERS: Dict[DocumentKind, Callable] = {
    DocumentKind.TICKET: render_ticket,
    DocumentKind.OPERATION_RECEIPT: render_operation_receipt,
    DocumentKind.MANIFEST: render_manifest,
}

def render_document(document) -> bytes:
    """Render any printable document to PDF bytes"""
    renderer: Optional[Callable] = RENDERERS.get(getattr(document, "kind", None))
    if renderer is None:
        raise ValueError(f"Unsupported document type: {type(document).__name__}")
    return renderer(document)

def document_filename(document) -> str:
    if document.kind == DocumentKind.TICKET:
        return f"Tiket-{document.order_id}.pdf"
    stamp = document.trip_date.strftime("%Y%m%d")
    prefix = "Nota" if document.kind == DocumentKind.OPERATION_RECEIPT else "Manifest"
    route = f"{document.route_from}-{document.route_to}".replace(" ", "")
    return f"{prefix}-{route}-{stamp}.pdf"
