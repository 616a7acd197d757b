import logging
from typing import List, Optional, Type

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

from src.database import Base
from src.exceptions import NotFoundError
from src.models import Banner, Promo, Faq, Testimonial, Video
from src.content.media import convert_drive_url, extract_youtube_id

logger = logging.getLogger(__name__)

class ContentService:
    """CRUD over one site content table"""

    model: Type[Base] = None
    label = "Content"

    def __init__(self, db: Session):
        self.db = db

    def _ordering(self):
        return (self.model.display_order, self.model.created_at)

    def _prepare(self, values: dict) -> dict:
        return values

    def list_all(self) -> List:
        return self.db.query(self.model).order_by(*self._ordering()).all()

    def list_active(self) -> List:
        return (
            self.db.query(self.model)
            .filter(self.model.is_active.is_(True))
            .order_by(*self._ordering())
            .all()
        )

    def get(self, item_id: str):
        item = self.db.query(self.model).filter(self.model.id == item_id).first()
        if not item:
            raise NotFoundError(f"{self.label} not found")
        return item

    def create(self, data: BaseModel):
        item = self.model(**self._prepare(data.model_dump()))
        self.db.add(item)
        self.db.commit()
        self.db.refresh(item)
        logger.info("%s %s created", self.label, item.id)
        return item

    def update(self, item_id: str, data: BaseModel):
        item = self.get(item_id)
        for field, value in self._prepare(data.model_dump(exclude_unset=True)).items():
            setattr(item, field, value)
        self.db.commit()
        self.db.refresh(item)
        return item

    def toggle_active(self, item_id: str):
        item = self.get(item_id)
        item.is_active = not item.is_active
        self.db.commit()
        self.db.refresh(item)
        return item

    def delete(self, item_id: str):
        item = self.get(item_id)
        self.db.delete(item)
        self.db.commit()
        logger.info("%s %s deleted", self.label, item_id)

class BannerService(ContentService):
    model = Banner
    label = "Banner"

    def _prepare(self, values: dict) -> dict:
        if values.get("image_url"):
            values["image_url"] = convert_drive_url(values["image_url"])
        return values

class PromoService(ContentService):
    model = Promo
    label = "Promo"

    def _ordering(self):
        return (Promo.created_at.desc(),)

class FaqService(ContentService):
    model = Faq
    label = "FAQ"

class TestimonialService(ContentService):
    model = Testimonial
    label = "Testimonial"

    def _prepare(self, values: dict) -> dict:
        if values.get("customer_photo_url"):
            values["customer_photo_url"] = convert_drive_url(values["customer_photo_url"])
        return values

class VideoService(ContentService):
    """Videos keep a single featured entry and append new rows at the end"""

    model = Video
    label = "Video"

    def list_active(self, category: Optional[str] = None) -> List[Video]:
        query = self.db.query(Video).filter(Video.is_active.is_(True))
        if category:
            query = query.filter(Video.category == category)
        return query.order_by(*self._ordering()).all()

    def featured(self) -> Optional[Video]:
        return (
            self.db.query(Video)
            .filter(Video.is_active.is_(True), Video.is_featured.is_(True))
            .first()
        )

    def _prepare(self, values: dict) -> dict:
        if "youtube_url" in values:
            url = (values["youtube_url"] or "").strip()
            if not extract_youtube_id(url):
                raise ValueError("Invalid YouTube URL")
            values["youtube_url"] = url
        if values.get("thumbnail_url"):
            values["thumbnail_url"] = convert_drive_url(values["thumbnail_url"])
        return values

    def _clear_featured(self, keep_id: Optional[str] = None):
        query = self.db.query(Video).filter(Video.is_featured.is_(True))
        if keep_id:
            query = query.filter(Video.id != keep_id)
        query.update({Video.is_featured: False}, synchronize_session="fetch")

    def create(self, data: BaseModel) -> Video:
        values = self._prepare(data.model_dump())
        max_order = self.db.query(func.max(Video.display_order)).scalar()
        values["display_order"] = (max_order if max_order is not None else -1) + 1
        if values.get("is_featured"):
            self._clear_featured()

        video = Video(**values)
        self.db.add(video)
        self.db.commit()
        self.db.refresh(video)
        logger.info("Video %s created at position %d", video.id, video.display_order)
        return video

    def update(self, item_id: str, data: BaseModel) -> Video:
        video = self.get(item_id)
        values = self._prepare(data.model_dump(exclude_unset=True))
        if values.get("is_featured"):
            self._clear_featured(keep_id=video.id)
        for field, value in values.items():
            setattr(video, field, value)
        self.db.commit()
        self.db.refresh(video)
        return video

    def set_featured(self, item_id: str) -> Video:
        video = self.get(item_id)
        self._clear_featured(keep_id=video.id)
        video.is_featured = True
        self.db.commit()
        self.db.refresh(video)
        logger.info("Video %s is now featured", video.id)
        return video
