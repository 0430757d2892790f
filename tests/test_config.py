from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient

from bookclub.config import Settings
from bookclub.main import create_app
from bookclub.storage import InMemoryCatalogRepository, InMemoryCommentRepository

USER = {"X-User": "reader@example.com"}
ADMIN = {"X-User": "admin@example.com", "X-Role": "admin"}


def test_defaults():
    settings = Settings()
    assert settings.forbidden_words == ["spam", "viagra", "casino"]
    assert settings.max_comment_length == 1000
    assert settings.moderation_window_hours == 24


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("BOOKCLUB_FORBIDDEN_WORDS", '["spoiler"]')
    monkeypatch.setenv("BOOKCLUB_MODERATION_WINDOW_HOURS", "2")
    settings = Settings()
    assert settings.forbidden_words == ["spoiler"]
    assert settings.moderation_window_hours == 2


def test_policy_settings_reach_the_routes():
    settings = Settings(forbidden_words=["spoiler"], moderation_window_hours=2)
    catalog = InMemoryCatalogRepository()
    three_hours_ago = datetime.now(timezone.utc) - timedelta(hours=3)
    comments = InMemoryCommentRepository(catalog, clock=lambda: three_hours_ago)
    client = TestClient(create_app(settings, catalog, comments))

    resp = client.post("/api/books/1/comments", json={"text": "Big SPOILER ahead"}, headers=USER)
    assert resp.status_code == 400
    assert client.post("/api/books/1/comments", json={"text": "spam is fine here"}, headers=USER).status_code == 201

    comment_id = client.get("/api/books/1/comments", headers=USER).json()["items"][0]["id"]
    resp = client.delete(f"/api/books/1/comments/{comment_id}", headers=ADMIN)
    assert resp.json()["error"] == "too_old"


def test_page_limits_come_from_app_settings():
    settings = Settings(default_page_size=2, max_page_size=3)
    client = TestClient(create_app(settings, InMemoryCatalogRepository()))

    body = client.get("/api/catalog/books", params={"size": 50}, headers=USER).json()
    assert body["page_size"] == 2
    assert len(body["items"]) == 2

    body = client.get("/api/catalog/books", params={"size": 3}, headers=USER).json()
    assert body["page_size"] == 3

    body = client.get("/api/books/1/comments", headers=USER).json()
    assert body["page_size"] == 2
