#!/usr/bin/env python3
"""
Admin Seed Data Script

Creates the default back office account from DEFAULT_ADMIN_EMAIL and
DEFAULT_ADMIN_PASSWORD. Safe to run more than once.

Usage:
    python seed_admin_data.py
"""

from src.auth.schemas import AdminCreate
from src.auth.service import AdminAuthService
from src.config import settings
from src.database import Base, SessionLocal, engine

def create_initial_admin_user():
    """Create the default admin account unless it already exists"""
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        print("🔧 Creating initial admin user...")
        if AdminAuthService.get_admin_by_email(db, settings.DEFAULT_ADMIN_EMAIL):
            print("✅ Admin user already exists, skipping...")
            return

        AdminAuthService.create_admin(db, AdminCreate(
            email=settings.DEFAULT_ADMIN_EMAIL,
            password=settings.DEFAULT_ADMIN_PASSWORD,
            full_name="Obie Travel Administrator"
        ))
        print(f"✅ Created admin user {settings.DEFAULT_ADMIN_EMAIL}")
        print("⚠️  Change the default password after the first login")
    finally:
        db.close()

if __name__ == "__main__":
    create_initial_admin_user()
