import uuid

from sqlalchemy import Column, Integer, BigInteger, String, Boolean, DateTime, Date, Text
from sqlalchemy.sql import func
from src.database import Base

def _uuid() -> str:
    return str(uuid.uuid4())

# ================================
# Bookings
# ================================
class Booking(Base):
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=_uuid)
    order_id = Column(String(32), unique=True, nullable=False, index=True)
    customer_name = Column(String(255), nullable=False)
    customer_phone = Column(String(32), nullable=False, index=True)
    customer_email = Column(String(255))
    route_from = Column(String(100), nullable=False)
    route_to = Column(String(100), nullable=False)
    route_via = Column(String(100))
    travel_date = Column(Date, nullable=False, index=True)
    pickup_time = Column(String(10), nullable=False)
    passengers = Column(Integer, nullable=False, default=1)
    price_per_passenger = Column(BigInteger, nullable=False, default=0)
    total_price = Column(BigInteger, nullable=False, default=0)
    payment_status = Column(String(32), nullable=False, default="pending", index=True)
    pickup_address = Column(Text, nullable=False)
    dropoff_address = Column(Text)
    notes = Column(Text)
    has_large_luggage = Column(Boolean, default=False)
    luggage_description = Column(Text)
    has_package_delivery = Column(Boolean, default=False)
    package_description = Column(Text)
    special_requests = Column(Text)
    payment_proof_url = Column(String(500))
    payment_proof_drive_id = Column(String(255))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# ================================
# Schedules (priced route offerings)
# ================================
class Schedule(Base):
    __tablename__ = "schedules"

    id = Column(String(36), primary_key=True, default=_uuid)
    route_from = Column(String(100), nullable=False, index=True)
    route_to = Column(String(100), nullable=False, index=True)
    route_via = Column(String(100))
    pickup_time = Column(String(10), nullable=False)
    category = Column(String(100), nullable=False)
    price = Column(BigInteger, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# ================================
# Trip Operations (financial record per departure)
# ================================
class TripOperation(Base):
    __tablename__ = "trip_operations"

    id = Column(String(36), primary_key=True, default=_uuid)
    trip_date = Column(Date, nullable=False, index=True)
    route_from = Column(String(100), nullable=False)
    route_to = Column(String(100), nullable=False)
    route_via = Column(String(100))
    pickup_time = Column(String(10), nullable=False)
    total_passengers = Column(Integer, nullable=False, default=0)

    income_tickets = Column(BigInteger, nullable=False, default=0)
    income_other = Column(BigInteger, nullable=False, default=0)

    expense_fuel = Column(BigInteger, nullable=False, default=0)
    expense_ferry = Column(BigInteger, nullable=False, default=0)
    expense_snack = Column(BigInteger, nullable=False, default=0)
    expense_meals = Column(BigInteger, nullable=False, default=0)
    expense_driver_commission = Column(BigInteger, nullable=False, default=0)
    expense_driver_meals = Column(BigInteger, nullable=False, default=0)
    expense_toll = Column(BigInteger, nullable=False, default=0)
    expense_parking = Column(BigInteger, nullable=False, default=0)
    expense_other = Column(BigInteger, nullable=False, default=0)

    notes = Column(Text)
    driver_name = Column(String(255))
    driver_phone = Column(String(32))
    vehicle_number = Column(String(32))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# ================================
# Site Content
# ================================
class Banner(Base):
    __tablename__ = "banners"

    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(255), nullable=False)
    subtitle = Column(Text)
    image_url = Column(String(500))
    link_url = Column(String(500))
    button_text = Column(String(100))
    layout_type = Column(String(32), nullable=False, default="image_caption")
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

class Promo(Base):
    __tablename__ = "promos"

    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    discount_text = Column(String(100))
    promo_code = Column(String(50))
    start_date = Column(Date)
    end_date = Column(Date)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

class Faq(Base):
    __tablename__ = "faqs"

    id = Column(String(36), primary_key=True, default=_uuid)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    category = Column(String(100))
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

class Testimonial(Base):
    __tablename__ = "testimonials"

    id = Column(String(36), primary_key=True, default=_uuid)
    customer_name = Column(String(255), nullable=False)
    customer_location = Column(String(255))
    customer_photo_url = Column(String(500))
    rating = Column(Integer, nullable=False, default=5)
    route_taken = Column(String(255))
    testimonial_text = Column(Text, nullable=False)
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

class Video(Base):
    __tablename__ = "videos"

    id = Column(String(36), primary_key=True, default=_uuid)
    title = Column(String(255), nullable=False)
    description = Column(Text)
    youtube_url = Column(String(500), nullable=False)
    thumbnail_url = Column(String(500))
    category = Column(String(50), nullable=False, default="promosi")
    display_order = Column(Integer, nullable=False, default=0)
    is_active = Column(Boolean, nullable=False, default=True)
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

# ================================
# Back Office Accounts
# ================================
class AdminUser(Base):
    __tablename__ = "admin_users"

    id = Column(String(36), primary_key=True, default=_uuid)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    full_name = Column(String(255))
    is_active = Column(Boolean, nullable=False, default=True)
    last_login = Column(DateTime(timezone=True))
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
