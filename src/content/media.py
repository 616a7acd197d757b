"""Image and video link helpers for site content"""

import re
from typing import Optional

DRIVE_PATTERNS = (
    re.compile(r"drive\.google\.com/file/d/([a-zA-Z0-9_-]+)"),
    re.compile(r"drive\.google\.com/open\?id=([a-zA-Z0-9_-]+)"),
    re.compile(r"drive\.google\.com/uc\?.*id=([a-zA-Z0-9_-]+)"),
)

YOUTUBE_PATTERNS = (
    re.compile(r"(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/)([^&\n?#]+)"),
    re.compile(r"youtube\.com/shorts/([^&\n?#]+)"),
)

def convert_drive_url(url: Optional[str]) -> Optional[str]:
    """Turn a Google Drive share link into a direct image URL; other URLs pass through"""
    if not url:
        return url
    url = url.strip()
    for pattern in DRIVE_PATTERNS:
        match = pattern.search(url)
        if match:
            return f"https://lh3.googleusercontent.com/d/{match.group(1)}"
    return url

def extract_youtube_id(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    for pattern in YOUTUBE_PATTERNS:
        match = pattern.search(url)
        if match:
            return match.group(1)
    return None
