import logging
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from src.auth.schemas import AdminCreate, LoginRequest
from src.auth.utils import get_password_hash, verify_password
from src.models import AdminUser

logger = logging.getLogger(__name__)

class AdminAuthService:
    @staticmethod
    def get_admin_by_email(db: Session, email: str) -> Optional[AdminUser]:
        return db.query(AdminUser).filter(AdminUser.email == email.lower()).first()

    @staticmethod
    def get_admin_by_id(db: Session, admin_id: str) -> Optional[AdminUser]:
        return db.query(AdminUser).filter(AdminUser.id == admin_id).first()

    @staticmethod
    def create_admin(db: Session, admin: AdminCreate) -> AdminUser:
        """Create a back office account"""
        db_admin = AdminUser(
            email=admin.email.lower(),
            password_hash=get_password_hash(admin.password),
            full_name=admin.full_name,
            is_active=True
        )
        try:
            db.add(db_admin)
            db.commit()
            db.refresh(db_admin)
        except IntegrityError:
            db.rollback()
            raise ValueError("Email already registered")
        logger.info("Created admin account %s", db_admin.email)
        return db_admin

    @staticmethod
    def authenticate(db: Session, login_data: LoginRequest) -> Optional[AdminUser]:
        """Check credentials and record the login time"""
        admin = AdminAuthService.get_admin_by_email(db, login_data.email)
        if not admin or not verify_password(login_data.password, admin.password_hash):
            logger.warning("Failed admin login for %s", login_data.email)
            return None
        if not admin.is_active:
            logger.warning("Inactive admin %s attempted to log in", admin.email)
            return None

        admin.last_login = datetime.now(timezone.utc)
        db.commit()
        db.refresh(admin)
        return admin
