"""Tests for order id, phone and address helpers."""

from datetime import date

import pytest

from src.bookings.validation import (
    compose_address,
    generate_order_id,
    is_valid_order_id,
    is_valid_phone,
    normalize_phone,
    validate_payment_proof,
    whatsapp_phone,
)


@pytest.mark.parametrize("order_id", ["TRV-20260112-AB12", "TRV-1736659200000"])
def test_valid_order_ids(order_id) -> None:
    assert is_valid_order_id(order_id)


@pytest.mark.parametrize(
    "order_id", ["", "TRV-abc", "TRV-20260112-ab12", "ORD-20260112-AB12", "TRV-2026011-AB12"]
)
def test_invalid_order_ids(order_id) -> None:
    assert not is_valid_order_id(order_id)


def test_generated_order_id_is_valid() -> None:
    order_id = generate_order_id(date(2026, 1, 12))

    assert order_id.startswith("TRV-20260112-")
    assert is_valid_order_id(order_id)


@pytest.mark.parametrize("phone", ["081234567890", "+6281234567890", "6281234567890", "0812-3456-7890"])
def test_phone_variants_normalize_to_the_same_number(phone) -> None:
    assert is_valid_phone(phone)
    assert normalize_phone(phone) == "081234567890"


@pytest.mark.parametrize("phone", ["", "12345", "0212345678", "+1 555 0100"])
def test_invalid_phones(phone) -> None:
    assert not is_valid_phone(phone)


def test_whatsapp_phone_uses_country_code() -> None:
    assert whatsapp_phone("081234567890") == "6281234567890"
    assert whatsapp_phone("+62 812 3456 7890") == "6281234567890"


def test_compose_address_without_coordinates() -> None:
    assert compose_address("  Jl. Darmo 1  ") == "Jl. Darmo 1"


def test_compose_address_with_coordinates() -> None:
    address = compose_address("Jl. Darmo 1", -7.2875, 112.7381)

    assert address.splitlines() == [
        "Jl. Darmo 1",
        "GPS: -7.287500, 112.738100",
        "https://www.google.com/maps?q=-7.287500,112.738100",
    ]


def test_payment_proof_rules() -> None:
    validate_payment_proof("image/png", 1024, 5 * 1024 * 1024)

    with pytest.raises(ValueError, match="Unsupported"):
        validate_payment_proof("text/plain", 10, 1024)
    with pytest.raises(ValueError, match="empty"):
        validate_payment_proof("image/jpeg", 0, 1024)
    with pytest.raises(ValueError, match="too large"):
        validate_payment_proof("application/pdf", 2048, 1024)
