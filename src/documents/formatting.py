from datetime import date, datetime
from typing import Optional

DAY_NAMES = ("Senin", "Selasa", "Rabu", "Kamis", "Jumat", "Sabtu", "Minggu")

MONTH_NAMES = (
    "Januari", "Februari", "Maret", "April", "Mei", "Juni",
    "Juli", "Agustus", "September", "Oktober", "November", "Desember"
)

def format_rupiah(amount: int) -> str:
    """``150000`` -> ``Rp 150.000``"""
    sign = "-" if amount < 0 else ""
    return f"{sign}Rp {abs(int(amount)):,}".replace(",", ".")

def format_long_date(value: date) -> str:
    """``Senin, 12 Januari 2026``"""
    return f"{DAY_NAMES[value.weekday()]}, {value.day} {MONTH_NAMES[value.month - 1]} {value.year}"

def format_timestamp(value: datetime) -> str:
    return f"{value.day} {MONTH_NAMES[value.month - 1]} {value.year} {value:%H:%M}"

def route_text(route_from: str, route_to: str, route_via: Optional[str] = None) -> str:
    if route_via:
        return f"{route_from} → {route_via} → {route_to}"
    return f"{route_from} → {route_to}"
