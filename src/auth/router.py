from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from datetime import timedelta
from src.database import get_db
from src.auth.schemas import LoginRequest, AuthResponse, AdminProfile
from src.auth.service import AdminAuthService
from src.auth.utils import create_access_token
from src.auth.dependencies import get_current_admin
from src.config import settings

router = APIRouter()

@router.post("/login", response_model=AuthResponse)
def login(login_data: LoginRequest, db: Session = Depends(get_db)):
    """Back office login"""
    admin = AdminAuthService.authenticate(db, login_data)
    if not admin:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token = create_access_token(
        data={"sub": admin.id, "email": admin.email},
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    return AuthResponse(
        access_token=access_token,
        token_type="bearer",
        admin=AdminProfile.model_validate(admin)
    )

@router.get("/me", response_model=AdminProfile)
def read_current_admin(current_admin=Depends(get_current_admin)):
    """Profile of the logged-in admin"""
    return current_admin
