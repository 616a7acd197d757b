"""Tests for site content: banners, testimonials and videos."""

import pytest

from src.content.media import convert_drive_url, extract_youtube_id


@pytest.mark.parametrize(
    "url",
    [
        "https://drive.google.com/file/d/1AbC_dEf-123/view?usp=sharing",
        "https://drive.google.com/open?id=1AbC_dEf-123",
        "https://drive.google.com/uc?export=view&id=1AbC_dEf-123",
    ],
)
def test_drive_links_become_direct_images(url) -> None:
    assert convert_drive_url(url) == "https://lh3.googleusercontent.com/d/1AbC_dEf-123"


def test_other_image_links_pass_through() -> None:
    assert convert_drive_url("https://cdn.example.com/banner.jpg") == "https://cdn.example.com/banner.jpg"
    assert convert_drive_url(None) is None


@pytest.mark.parametrize(
    "url, video_id",
    [
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/watch?v=dQw4w9WgXcQ&t=42", "dQw4w9WgXcQ"),
        ("https://youtu.be/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/embed/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://www.youtube.com/shorts/dQw4w9WgXcQ", "dQw4w9WgXcQ"),
        ("https://vimeo.com/123456", None),
    ],
)
def test_extract_youtube_id(url, video_id) -> None:
    assert extract_youtube_id(url) == video_id


def _video(client, headers, **fields):
    payload = {"title": "Perjalanan Surabaya - Bali", "youtube_url": "https://youtu.be/dQw4w9WgXcQ"}
    payload.update(fields)
    return client.post("/api/v1/content/videos", json=payload, headers=headers)


def test_banner_drive_image_is_converted(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/content/banners",
        json={"title": "Promo Bali", "image_url": "https://drive.google.com/file/d/XYZ123/view"},
        headers=admin_headers,
    )

    assert response.status_code == 201
    assert response.json()["image_url"] == "https://lh3.googleusercontent.com/d/XYZ123"
    assert response.json()["layout_type"] == "image_caption"


def test_public_lists_only_show_active_items(client, admin_headers) -> None:
    banner = client.post("/api/v1/content/banners", json={"title": "Lama"}, headers=admin_headers).json()
    client.post("/api/v1/content/banners", json={"title": "Baru"}, headers=admin_headers)
    client.post(f"/api/v1/content/banners/{banner['id']}/toggle", headers=admin_headers)

    public = client.get("/api/v1/content/banners").json()
    assert [item["title"] for item in public] == ["Baru"]

    everything = client.get("/api/v1/content/admin/banners", headers=admin_headers).json()
    assert len(everything) == 2


def test_testimonial_rating_range(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/content/testimonials",
        json={"customer_name": "Rina", "testimonial_text": "Mantap", "rating": 6},
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_promo_dates_must_be_ordered(client, admin_headers) -> None:
    response = client.post(
        "/api/v1/content/promos",
        json={"title": "Diskon", "start_date": "2026-02-01", "end_date": "2026-01-01"},
        headers=admin_headers,
    )

    assert response.status_code == 422


def test_invalid_youtube_url_is_rejected(client, admin_headers) -> None:
    response = _video(client, admin_headers, youtube_url="https://vimeo.com/123456")

    assert response.status_code == 400


def test_videos_are_appended_with_embed_links(client, admin_headers) -> None:
    first = _video(client, admin_headers).json()
    second = _video(client, admin_headers, title="Armada Baru").json()

    assert first["display_order"] == 0
    assert second["display_order"] == 1
    assert first["embed_url"] == "https://www.youtube.com/embed/dQw4w9WgXcQ"
    assert first["preview_image_url"] == "https://img.youtube.com/vi/dQw4w9WgXcQ/mqdefault.jpg"


def test_only_one_video_is_featured(client, admin_headers) -> None:
    first = _video(client, admin_headers, is_featured=True).json()
    second = _video(client, admin_headers, title="Armada Baru", is_featured=True).json()

    featured = client.get("/api/v1/content/videos/featured").json()
    assert featured["id"] == second["id"]

    client.post(f"/api/v1/content/videos/{first['id']}/feature", headers=admin_headers)
    videos = client.get("/api/v1/content/videos").json()
    assert [video["id"] for video in videos if video["is_featured"]] == [first["id"]]


def test_videos_filter_by_category(client, admin_headers) -> None:
    _video(client, admin_headers)
    _video(client, admin_headers, title="Testimoni Rina", category="testimoni")

    videos = client.get("/api/v1/content/videos", params={"category": "testimoni"}).json()
    assert [video["title"] for video in videos] == ["Testimoni Rina"]


def test_content_writes_require_admin(client) -> None:
    assert client.post("/api/v1/content/faqs", json={"question": "Q", "answer": "A"}).status_code == 401
