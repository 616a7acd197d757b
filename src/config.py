from pydantic_settings import BaseSettings
from typing import List

class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./travel.db"

    # Security
    SECRET_KEY: str = "change-me-in-production"
    ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 12
    DEFAULT_ADMIN_EMAIL: str = "admin@obietravel.id"
    DEFAULT_ADMIN_PASSWORD: str = "Admin123!"

    # Application
    PROJECT_NAME: str = "Obie Travel"
    API_V1_STR: str = "/api/v1"
    ENVIRONMENT: str = "development"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://localhost:8080"]

    # Business rules
    AGENT_NAME: str = "Obie Travel"
    DEFAULT_FARE: int = 150000
    DRIVER_COMMISSION_PERCENT: int = 15
    TRACKING_URL: str = "https://obietravel.id/track"

    # Payment proof uploads
    UPLOAD_DIR: str = "static/payment_proofs"
    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True

settings = Settings()
