"""Order identifier, phone number and address helpers for bookings"""

import re
import secrets
import string
from datetime import date
from typing import Optional

ORDER_ID_PATTERN = re.compile(r"^TRV-(?:\d{8}-[A-Z0-9]{4}|\d{13})$")

PHONE_PATTERN = re.compile(r"^(?:\+62|62|0)?8\d{7,10}$")

ORDER_SUFFIX_ALPHABET = string.ascii_uppercase + string.digits

PAYMENT_PROOF_CONTENT_TYPES = ("image/jpeg", "image/png", "image/webp", "application/pdf")

def is_valid_order_id(order_id: str) -> bool:
    """Accept ``TRV-YYYYMMDD-XXXX`` and the legacy ``TRV-<13 digit timestamp>``"""
    return bool(order_id) and ORDER_ID_PATTERN.match(order_id) is not None

def clean_order_id(order_id: str) -> str:
    return (order_id or "").strip().upper()

def generate_order_id(today: Optional[date] = None) -> str:
    today = today or date.today()
    suffix = "".join(secrets.choice(ORDER_SUFFIX_ALPHABET) for _ in range(4))
    return f"TRV-{today.strftime('%Y%m%d')}-{suffix}"

def _strip_phone(phone: str) -> str:
    phone = (phone or "").strip()
    digits = re.sub(r"\D", "", phone)
    if phone.startswith("+"):
        return "+" + digits
    return digits

def normalize_phone(phone: str) -> str:
    """Comparable local form: ``+6281...`` and ``6281...`` become ``081...``"""
    cleaned = _strip_phone(phone)
    if cleaned.startswith("+62"):
        return "0" + cleaned[3:]
    if cleaned.startswith("62"):
        return "0" + cleaned[2:]
    return cleaned

def is_valid_phone(phone: str) -> bool:
    """Indonesian mobile number with optional +62/62/0 prefix"""
    return PHONE_PATTERN.match(_strip_phone(phone)) is not None

def whatsapp_phone(phone: str) -> str:
    """International digits for wa.me links"""
    cleaned = re.sub(r"\D", "", phone or "")
    if cleaned.startswith("0"):
        cleaned = "62" + cleaned[1:]
    return cleaned

def compose_address(address: str, latitude: Optional[float] = None, longitude: Optional[float] = None) -> str:
    """Append GPS coordinates and a map link to a free-text address"""
    address = (address or "").strip()
    if latitude is None or longitude is None:
        return address
    coords = f"{latitude:.6f}, {longitude:.6f}"
    map_link = f"https://www.google.com/maps?q={latitude:.6f},{longitude:.6f}"
    return f"{address}\nGPS: {coords}\n{map_link}"

def validate_payment_proof(content_type: Optional[str], size: int, max_bytes: int):
    if content_type not in PAYMENT_PROOF_CONTENT_TYPES:
        raise ValueError("Unsupported file type. Use JPG, PNG, WebP or PDF")
    if size <= 0:
        raise ValueError("Uploaded file is empty")
    if size > max_bytes:
        raise ValueError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB")
