#!/usr/bin/env python3
"""
Seed Data Script

Fills the schedule table and sample site content for Obie Travel.

Usage:
    python seed_data.py
"""

from datetime import date, timedelta

from src.database import Base, SessionLocal, engine
from src.models import Schedule, Banner, Promo, Faq, Testimonial, Video

# (from, to, via, category, per-passenger price, pickup times)
ROUTES = [
    ("Surabaya", "Denpasar", None, "Jawa - Bali", 250000, ["16.00", "19.00", "20.00"]),
    ("Malang", "Denpasar", None, "Jawa - Bali", 275000, ["16.00", "19.00", "20.00"]),

    ("Malang", "Surabaya", None, "Jawa Timur", 75000, ["01.00", "05.00", "10.00"]),
    ("Surabaya", "Malang", None, "Jawa Timur", 75000, ["10.00", "13.00", "16.00", "19.00"]),
    ("Blitar", "Surabaya", None, "Jawa Timur", 110000, ["01.00", "05.00", "10.00"]),
    ("Surabaya", "Blitar", None, "Jawa Timur", 110000, ["08.00", "10.00", "13.00", "16.00", "19.00"]),
    ("Kediri", "Surabaya", None, "Jawa Timur", 100000, ["01.00", "05.00", "08.00", "10.00"]),
    ("Surabaya", "Kediri", None, "Jawa Timur", 100000, ["08.00", "10.00", "13.00", "16.00", "19.00"]),
    ("Banyuwangi", "Surabaya", None, "Jawa Timur", 150000, ["17.00", "20.00"]),
    ("Surabaya", "Banyuwangi", None, "Jawa Timur", 150000, ["16.00", "19.00", "21.00"]),
    ("Trenggalek", "Surabaya", None, "Jawa Timur", 125000, ["07.00", "10.00"]),
    ("Surabaya", "Trenggalek", None, "Jawa Timur", 125000, ["10.00", "13.00", "16.00", "19.00", "21.00"]),
    ("Ponorogo", "Surabaya", "Madiun", "Jawa Timur", 125000, ["01.00", "05.00", "08.00", "10.00"]),
    ("Surabaya", "Ponorogo", "Madiun", "Jawa Timur", 125000, ["10.00", "13.00", "16.00", "19.00"]),
    ("Jember", "Surabaya", "Lumajang", "Jawa Timur", 130000, ["20.00", "01.00", "05.00", "10.00"]),
    ("Surabaya", "Jember", "Lumajang", "Jawa Timur", 130000, ["10.00", "13.00", "16.00", "19.00"]),

    ("Jakarta", "Surabaya", None, "Jawa - Jakarta", 350000, ["16.00", "21.00", "22.00"]),
    ("Surabaya", "Jakarta", None, "Jawa - Jakarta", 350000, ["18.00", "20.00", "22.00"]),

    ("Jogja", "Surabaya", "Solo", "Jawa Tengah - DIY", 200000, ["18.00", "20.00", "21.00"]),
    ("Surabaya", "Jogja", "Solo", "Jawa Tengah - DIY", 200000, ["10.00", "13.00", "16.00", "19.00", "20.00"]),
]

def build_schedules():
    return [
        Schedule(
            route_from=route_from,
            route_to=route_to,
            route_via=route_via,
            pickup_time=pickup_time,
            category=category,
            price=price,
            is_active=True
        )
        for route_from, route_to, route_via, category, price, times in ROUTES
        for pickup_time in times
    ]

def build_content():
    today = date.today()
    return [
        Banner(
            title="Travel Surabaya - Bali Setiap Hari",
            subtitle="Jemput di rumah, antar sampai tujuan",
            image_url="https://lh3.googleusercontent.com/d/obie-banner-bali",
            button_text="Pesan Sekarang",
            link_url="/booking",
            layout_type="image_overlay",
            display_order=0
        ),
        Banner(
            title="Armada Baru, Perjalanan Nyaman",
            subtitle="Hiace premium dengan kursi captain seat",
            layout_type="text_only",
            display_order=1
        ),
        Promo(
            title="Diskon Rombongan",
            description="Pesan 5 kursi atau lebih untuk satu keberangkatan",
            discount_text="Hemat 10%",
            promo_code="ROMBONGAN10",
            start_date=today,
            end_date=today + timedelta(days=60)
        ),
        Faq(
            question="Bagaimana cara melakukan pembayaran?",
            answer="Transfer ke rekening yang tertera lalu unggah bukti transfer di halaman lacak pesanan.",
            category="Pembayaran",
            display_order=0
        ),
        Faq(
            question="Apakah bisa membawa bagasi besar?",
            answer="Bisa, centang opsi bagasi besar saat memesan agar sopir menyiapkan tempat.",
            category="Perjalanan",
            display_order=1
        ),
        Testimonial(
            customer_name="Rina",
            customer_location="Sidoarjo",
            rating=5,
            route_taken="Surabaya - Denpasar",
            testimonial_text="Sopir ramah, dijemput tepat waktu dan sampai Denpasar pagi hari."
        ),
        Video(
            title="Perjalanan Surabaya - Bali",
            youtube_url="https://www.youtube.com/watch?v=dQw4w9WgXcQ",
            category="promosi",
            display_order=0,
            is_featured=True
        ),
    ]

def create_seed_data():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🚀 Creating seed data for Obie Travel...")

        print("Clearing existing schedules and content...")
        for model in (Schedule, Banner, Promo, Faq, Testimonial, Video):
            db.query(model).delete()

        schedules = build_schedules()
        db.add_all(schedules)
        print(f"Created {len(schedules)} schedules")

        content = build_content()
        db.add_all(content)
        print(f"Created {len(content)} content items")

        db.commit()
        print("✅ Seed data created successfully")
    except Exception:
        db.rollback()
        print("❌ Error creating seed data")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    create_seed_data()
