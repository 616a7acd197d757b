from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import datetime, date
from enum import Enum

from src.content.media import extract_youtube_id

class BannerLayout(str, Enum):
    """How a hero banner combines its image and text"""
    IMAGE_FULL = "image_full"
    IMAGE_OVERLAY = "image_overlay"
    IMAGE_CAPTION = "image_caption"
    TEXT_ONLY = "text_only"

# Banners
class BannerBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    subtitle: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    link_url: Optional[str] = Field(None, max_length=500)
    button_text: Optional[str] = Field(None, max_length=100)
    layout_type: BannerLayout = BannerLayout.IMAGE_CAPTION
    display_order: int = 0
    is_active: bool = True

class BannerCreate(BannerBase):
    pass

class BannerUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    subtitle: Optional[str] = None
    image_url: Optional[str] = Field(None, max_length=500)
    link_url: Optional[str] = Field(None, max_length=500)
    button_text: Optional[str] = Field(None, max_length=100)
    layout_type: Optional[BannerLayout] = None
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

class BannerResponse(BannerBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# Promos
class PromoBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    discount_text: Optional[str] = Field(None, max_length=100)
    promo_code: Optional[str] = Field(None, max_length=50)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: bool = True

class PromoCreate(PromoBase):
    @model_validator(mode="after")
    def end_after_start(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("End date must not be before start date")
        return self

class PromoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    discount_text: Optional[str] = Field(None, max_length=100)
    promo_code: Optional[str] = Field(None, max_length=50)
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    is_active: Optional[bool] = None

class PromoResponse(PromoBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# FAQs
class FaqBase(BaseModel):
    question: str = Field(..., min_length=1)
    answer: str = Field(..., min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    display_order: int = 0
    is_active: bool = True

class FaqCreate(FaqBase):
    pass

class FaqUpdate(BaseModel):
    question: Optional[str] = Field(None, min_length=1)
    answer: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, max_length=100)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

class FaqResponse(FaqBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# Testimonials
class TestimonialBase(BaseModel):
    customer_name: str = Field(..., min_length=1, max_length=255)
    customer_location: Optional[str] = Field(None, max_length=255)
    customer_photo_url: Optional[str] = Field(None, max_length=500)
    rating: int = Field(5, ge=1, le=5)
    route_taken: Optional[str] = Field(None, max_length=255)
    testimonial_text: str = Field(..., min_length=1)
    display_order: int = 0
    is_active: bool = True

class TestimonialCreate(TestimonialBase):
    pass

class TestimonialUpdate(BaseModel):
    customer_name: Optional[str] = Field(None, min_length=1, max_length=255)
    customer_location: Optional[str] = Field(None, max_length=255)
    customer_photo_url: Optional[str] = Field(None, max_length=500)
    rating: Optional[int] = Field(None, ge=1, le=5)
    route_taken: Optional[str] = Field(None, max_length=255)
    testimonial_text: Optional[str] = Field(None, min_length=1)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None

class TestimonialResponse(TestimonialBase):
    id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True

# Videos
class VideoBase(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    youtube_url: str = Field(..., min_length=1, max_length=500)
    thumbnail_url: Optional[str] = Field(None, max_length=500)
    category: str = Field("promosi", min_length=1, max_length=50)
    is_active: bool = True
    is_featured: bool = False

class VideoCreate(VideoBase):
    pass

class VideoUpdate(BaseModel):
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    youtube_url: Optional[str] = Field(None, min_length=1, max_length=500)
    thumbnail_url: Optional[str] = Field(None, max_length=500)
    category: Optional[str] = Field(None, min_length=1, max_length=50)
    display_order: Optional[int] = None
    is_active: Optional[bool] = None
    is_featured: Optional[bool] = None

class VideoResponse(VideoBase):
    id: str
    display_order: int = 0
    youtube_id: Optional[str] = None
    embed_url: Optional[str] = None
    preview_image_url: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @model_validator(mode="after")
    def derive_embed(self):
        if self.youtube_id is None:
            self.youtube_id = extract_youtube_id(self.youtube_url)
        if self.youtube_id and self.embed_url is None:
            self.embed_url = f"https://www.youtube.com/embed/{self.youtube_id}"
        if self.preview_image_url is None:
            self.preview_image_url = self.thumbnail_url or (
                f"https://img.youtube.com/vi/{self.youtube_id}/mqdefault.jpg" if self.youtube_id else None
            )
        return self

    class Config:
        from_attributes = True
