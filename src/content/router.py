from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional, Type

from src.auth.dependencies import require_admin
from src.database import get_db
from src.exceptions import NotFoundError, backend_error
from src.content.schemas import (
    BannerCreate, BannerUpdate, BannerResponse,
    PromoCreate, PromoUpdate, PromoResponse,
    FaqCreate, FaqUpdate, FaqResponse,
    TestimonialCreate, TestimonialUpdate, TestimonialResponse,
    VideoCreate, VideoUpdate, VideoResponse
)
from src.content.service import (
    ContentService, BannerService, PromoService, FaqService,
    TestimonialService, VideoService
)

router = APIRouter()

def _register_admin_routes(
    path: str,
    service_class: Type[ContentService],
    create_schema,
    update_schema,
    response_schema
):
    """Admin list/create/update/toggle/delete endpoints for one content table"""

    @router.get(f"/admin/{path}", response_model=List[response_schema], name=f"list_all_{path}")
    def list_all(db: Session = Depends(get_db), admin=Depends(require_admin)):
        return service_class(db).list_all()

    @router.post(f"/{path}", response_model=response_schema,
                 status_code=status.HTTP_201_CREATED, name=f"create_{path}")
    def create(data: create_schema, db: Session = Depends(get_db), admin=Depends(require_admin)):
        try:
            return service_class(db).create(data)
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except SQLAlchemyError:
            raise backend_error(f"create {path}", db)

    @router.put(f"/{path}/{{item_id}}", response_model=response_schema, name=f"update_{path}")
    def update(item_id: str, data: update_schema, db: Session = Depends(get_db), admin=Depends(require_admin)):
        try:
            return service_class(db).update(item_id, data)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except ValueError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
        except SQLAlchemyError:
            raise backend_error(f"update {path}", db)

    @router.post(f"/{path}/{{item_id}}/toggle", response_model=response_schema, name=f"toggle_{path}")
    def toggle(item_id: str, db: Session = Depends(get_db), admin=Depends(require_admin)):
        try:
            return service_class(db).toggle_active(item_id)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    @router.delete(f"/{path}/{{item_id}}", status_code=status.HTTP_204_NO_CONTENT, name=f"delete_{path}")
    def delete(item_id: str, db: Session = Depends(get_db), admin=Depends(require_admin)):
        try:
            service_class(db).delete(item_id)
        except NotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
        except SQLAlchemyError:
            raise backend_error(f"delete {path}", db)

# Public Endpoints
@router.get("/banners", response_model=List[BannerResponse])
def list_banners(db: Session = Depends(get_db)):
    """Active hero banners in display order"""
    return BannerService(db).list_active()

@router.get("/promos", response_model=List[PromoResponse])
def list_promos(db: Session = Depends(get_db)):
    return PromoService(db).list_active()

@router.get("/faqs", response_model=List[FaqResponse])
def list_faqs(db: Session = Depends(get_db)):
    return FaqService(db).list_active()

@router.get("/testimonials", response_model=List[TestimonialResponse])
def list_testimonials(db: Session = Depends(get_db)):
    return TestimonialService(db).list_active()

@router.get("/videos", response_model=List[VideoResponse])
def list_videos(
    category: Optional[str] = Query(None),
    db: Session = Depends(get_db)
):
    return VideoService(db).list_active(category)

@router.get("/videos/featured", response_model=Optional[VideoResponse])
def featured_video(db: Session = Depends(get_db)):
    return VideoService(db).featured()

# Admin Endpoints
_register_admin_routes("banners", BannerService, BannerCreate, BannerUpdate, BannerResponse)
_register_admin_routes("promos", PromoService, PromoCreate, PromoUpdate, PromoResponse)
_register_admin_routes("faqs", FaqService, FaqCreate, FaqUpdate, FaqResponse)
_register_admin_routes("testimonials", TestimonialService, TestimonialCreate, TestimonialUpdate, TestimonialResponse)
_register_admin_routes("videos", VideoService, VideoCreate, VideoUpdate, VideoResponse)

@router.post("/videos/{item_id}/feature", response_model=VideoResponse)
def feature_video(
    item_id: str,
    db: Session = Depends(get_db),
    admin=Depends(require_admin)
):
    """Make one video the featured video"""
    try:
        return VideoService(db).set_featured(item_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
