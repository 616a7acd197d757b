"""Shared fixtures: in-memory database, seeded schedules and API clients."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from src.auth.utils import get_password_hash
from src.config import settings
from src.database import Base, get_db
from src.main import app
from src.models import AdminUser, Schedule

ADMIN_EMAIL = "admin@obietravel.id"
ADMIN_PASSWORD = "secret-pass-123"

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

SCHEDULE_ROWS = [
    ("Surabaya", "Denpasar", None, "19.00", "Jawa - Bali", 250000),
    ("Surabaya", "Denpasar", None, "16.00", "Jawa - Bali", 250000),
    ("Malang", "Denpasar", None, "16.00", "Jawa - Bali", 275000),
    ("Surabaya", "Jogja", "Solo", "10.00", "Jawa Tengah - DIY", 200000),
    ("Malang", "Surabaya", None, "05.00", "Jawa Timur", 75000),
]


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def schedules(db):
    rows = [
        Schedule(
            route_from=route_from,
            route_to=route_to,
            route_via=route_via,
            pickup_time=pickup_time,
            category=category,
            price=price,
            is_active=True,
        )
        for route_from, route_to, route_via, pickup_time, category, price in SCHEDULE_ROWS
    ]
    db.add_all(rows)
    db.commit()
    return rows


@pytest.fixture
def client(db, tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(tmp_path / "payment_proofs"))

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def admin_user(db):
    admin = AdminUser(
        email=ADMIN_EMAIL,
        password_hash=get_password_hash(ADMIN_PASSWORD),
        full_name="Test Admin",
        is_active=True,
    )
    db.add(admin)
    db.commit()
    db.refresh(admin)
    return admin


@pytest.fixture
def admin_headers(client, admin_user):
    response = client.post(
        "/api/v1/auth/login",
        json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}
