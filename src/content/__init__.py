"""
Content Management Module

Marketing content shown on the public site and edited in the back office:

- Hero banners with layout variants and Google Drive image links
- Promotions, FAQs and customer testimonials
- YouTube videos with a single featured entry

Key Components:
- service.py: Generic content CRUD and per-table rules
- media.py: Drive link conversion and YouTube id extraction
- router.py: Public read and admin write endpoints
- schemas.py: Pydantic models for each content table
"""

from .router import router
from .service import (
    ContentService, BannerService, PromoService, FaqService,
    TestimonialService, VideoService
)
from .media import convert_drive_url, extract_youtube_id
from .schemas import BannerLayout

__all__ = [
    "router",
    "ContentService",
    "BannerService",
    "PromoService",
    "FaqService",
    "TestimonialService",
    "VideoService",
    "convert_drive_url",
    "extract_youtube_id",
    "BannerLayout"
]
