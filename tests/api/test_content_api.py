# tests/api/test_content_api.py
"""Tests for listings, the feed, saved galleries and uploads."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient

from redshare.main import create_app
from redshare.services import interactions, social_graph


def _upload_payload(title: str = "Holiday", **overrides) -> dict:
    payload = {
        "title": title,
        "description": "Beach days",
        "tags": "sea, sun , ,sand",
        "items": [
            {
                "fileUrl": "https://cdn.example.com/v.mp4",
                "thumbnailUrl": "https://cdn.example.com/v.jpg",
                "fileType": "video",
                "duration": "0:31",
            },
            {
                "fileUrl": "https://cdn.example.com/p.jpg",
                "thumbnailUrl": "https://cdn.example.com/p_t.jpg",
                "fileType": "image",
                "duration": "9:99",
            },
        ],
    }
    payload.update(overrides)
    return payload


def test_upload_creates_gallery(client, alice_headers) -> None:
    response = client.post("/api/upload", json=_upload_payload(), headers=alice_headers)

    assert response.status_code == status.HTTP_201_CREATED, response.text
    body = response.json()
    assert body["title"] == "Holiday"
    assert body["username"] == "alice"
    assert body["visibility"] == "public"
    assert body["viewCount"] == 0
    assert body["tags"] == ["sea", "sun", "sand"]
    assert [item["fileType"] for item in body["items"]] == ["video", "image"]
    assert body["items"][0]["duration"] == "0:31"
    assert body["items"][1]["duration"] is None


def test_upload_requires_auth_and_items(client, alice_headers) -> None:
    assert client.post("/api/upload", json=_upload_payload()).status_code == status.HTTP_401_UNAUTHORIZED

    response = client.post("/api/upload", json=_upload_payload(items=[]), headers=alice_headers)
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    response = client.post(
        "/api/upload",
        json=_upload_payload(items=[{"fileUrl": "x", "thumbnailUrl": "y", "fileType": "audio"}]),
        headers=alice_headers,
    )
    assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY


def test_content_lists_public_cards(client, alice, make_gallery) -> None:
    make_gallery(alice, "Public one")
    make_gallery(alice, "Private one", visibility="private")

    response = client.get("/api/content")
    assert response.status_code == status.HTTP_200_OK
    cards = response.json()
    assert [card["title"] for card in cards] == ["Public one"]
    assert set(cards[0]) == {
        "id",
        "title",
        "username",
        "thumbnailUrl",
        "fileType",
        "duration",
        "viewCount",
        "createdAt",
    }


def test_content_sorting_and_paging(client, db_session, alice, bob, make_gallery) -> None:
    quiet = make_gallery(alice, "Quiet")
    loved = make_gallery(alice, "Loved")
    interactions.like_gallery(db_session, bob.id, quiet.id)

    recent = client.get("/api/content").json()
    assert [c["id"] for c in recent] == [loved.id, quiet.id]

    popular = client.get("/api/content", params={"sortBy": "popular"}).json()
    assert [c["id"] for c in popular] == [quiet.id, loved.id]

    page = client.get("/api/content", params={"limit": 1, "offset": 1}).json()
    assert [c["id"] for c in page] == [quiet.id]


def test_content_rejects_bad_query(client) -> None:
    assert client.get("/api/content", params={"sortBy": "random"}).status_code == 422
    assert client.get("/api/content", params={"limit": 0}).status_code == 422
    assert client.get("/api/content", params={"offset": -1}).status_code == 422


def test_feed_scenario_with_private_gallery(
    client, db_session, alice, bob, alice_headers, bob_headers, make_gallery
) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    make_gallery(bob, "Visible")
    hidden = make_gallery(bob, "Hidden")

    response = client.patch(
        f"/api/gallery/{hidden.id}/visibility",
        json={"visibility": "private"},
        headers=bob_headers,
    )
    assert response.status_code == status.HTTP_200_OK

    feed = client.get("/api/feed", headers=alice_headers)
    assert feed.status_code == status.HTTP_200_OK
    assert [c["title"] for c in feed.json()] == ["Visible"]


def test_feed_requires_auth(client) -> None:
    assert client.get("/api/feed").status_code == status.HTTP_401_UNAUTHORIZED
    assert client.get("/api/saved").status_code == status.HTTP_401_UNAUTHORIZED


def test_saved_list(client, alice, alice_headers, bob, make_gallery) -> None:
    gallery = make_gallery(bob, "Bookmark me")
    assert client.post(f"/api/gallery/{gallery.id}/save", headers=alice_headers).json() == {
        "success": True
    }

    saved = client.get("/api/saved", headers=alice_headers).json()
    assert [c["title"] for c in saved] == ["Bookmark me"]


def test_page_size_follows_app_settings(test_settings, store, alice, make_gallery) -> None:
    for n in range(4):
        make_gallery(alice, f"G{n}")
    cfg = test_settings.model_copy(update={"default_page_size": 2, "max_page_size": 3})

    with TestClient(create_app(settings=cfg, store=store)) as client:
        assert len(client.get("/api/content").json()) == 2
        assert len(client.get("/api/content", params={"limit": 3}).json()) == 3
        response = client.get("/api/content", params={"limit": 4})
        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get("/api/users/alice/content", params={"limit": 4}).status_code == 422
