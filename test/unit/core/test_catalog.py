import pytest

from app.core.catalog import (
    AVATAR_GROUPS,
    VOICES,
    all_avatar_paths,
    build_avatar_url,
    find_voice,
    selection_warnings,
)
from app.core.config import settings


@pytest.mark.parametrize(
    "base, path",
    [
        ("https://ai-ugcvideo.vercel.app/", "/avatars/male/male1.jpg"),
        ("https://ai-ugcvideo.vercel.app", "/avatars/male/male1.jpg"),
        ("https://ai-ugcvideo.vercel.app/", "avatars/male/male1.jpg"),
    ],
)
def test_build_avatar_url_joins_with_single_slash(base, path):
    assert (
        build_avatar_url(path, base)
        == "https://ai-ugcvideo.vercel.app/avatars/male/male1.jpg"
    )


def test_build_avatar_url_uses_configured_base(monkeypatch):
    monkeypatch.setattr(settings, "avatar_base_url", "https://cdn.example/", raising=False)

    assert build_avatar_url("/avatars/business/business1.png") == (
        "https://cdn.example/avatars/business/business1.png"
    )


def test_absolute_avatar_url_is_unchanged():
    url = "https://images.example/me.png"
    assert build_avatar_url(url, "https://ignored.example/") == url


def test_catalog_contents():
    assert set(AVATAR_GROUPS) == {"male", "female", "business"}
    assert len(all_avatar_paths()) == 5
    assert find_voice("en-US-JennyNeural") is VOICES[0]
    assert find_voice("xx-XX-Nobody") is None


def test_stock_selection_has_no_warnings():
    assert selection_warnings("/avatars/female/female2.png", "en-US-GuyNeural") == []
    assert selection_warnings(None, None) == []


def test_custom_selection_warns_but_absolute_avatar_does_not():
    warnings = selection_warnings("/avatars/cats/cat1.png", "xx-XX-Nobody")

    assert len(warnings) == 2
    assert "/avatars/cats/cat1.png" in warnings[0]
    assert "xx-XX-Nobody" in warnings[1]
    assert selection_warnings("https://images.example/me.png", None) == []
