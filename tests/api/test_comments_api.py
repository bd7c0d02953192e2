# tests/api/test_comments_api.py
"""Tests for gallery comment threads over HTTP."""

from __future__ import annotations

from fastapi import status


def test_comment_and_reply_flow(client, alice, alice_headers, bob_headers, make_gallery) -> None:
    gallery = make_gallery(alice)
    base = f"/api/gallery/{gallery.id}/comments"

    first = client.post(base, json={"text": "first!"}, headers=bob_headers)
    assert first.status_code == status.HTTP_201_CREATED
    assert first.json()["username"] == "bob"
    assert first.json()["parentId"] is None
    root_id = first.json()["id"]

    second = client.post(base, json={"text": "second"}, headers=alice_headers)
    reply = client.post(f"{base}/{root_id}/replies", json={"text": " thanks "}, headers=alice_headers)
    assert reply.status_code == status.HTTP_201_CREATED
    assert reply.json()["parentId"] == root_id
    assert reply.json()["text"] == "thanks"

    threads = client.get(base).json()
    assert [t["id"] for t in threads] == [second.json()["id"], root_id]
    assert [r["text"] for r in threads[1]["replies"]] == ["thanks"]
    assert threads[0]["replies"] == []

    assert client.get(f"/api/gallery/{gallery.id}").json()["commentsCount"] == 3


def test_blank_comment_is_rejected(client, alice, bob_headers, make_gallery) -> None:
    gallery = make_gallery(alice)
    response = client.post(
        f"/api/gallery/{gallery.id}/comments", json={"text": "   "}, headers=bob_headers
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"detail": "Comment text is required"}


def test_reply_to_reply_is_rejected(client, alice, bob_headers, make_gallery) -> None:
    gallery = make_gallery(alice)
    base = f"/api/gallery/{gallery.id}/comments"
    root = client.post(base, json={"text": "root"}, headers=bob_headers).json()
    reply = client.post(f"{base}/{root['id']}/replies", json={"text": "r"}, headers=bob_headers).json()

    response = client.post(f"{base}/{reply['id']}/replies", json={"text": "deep"}, headers=bob_headers)
    assert response.status_code == status.HTTP_400_BAD_REQUEST


def test_comments_on_private_or_missing_gallery(client, alice, bob_headers, make_gallery) -> None:
    assert client.get("/api/gallery/999/comments").status_code == status.HTTP_404_NOT_FOUND

    private = make_gallery(alice, visibility="private")
    response = client.get(f"/api/gallery/{private.id}/comments", headers=bob_headers)
    assert response.status_code == status.HTTP_403_FORBIDDEN
    response = client.post(
        f"/api/gallery/{private.id}/comments", json={"text": "hi"}, headers=bob_headers
    )
    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_posting_requires_auth(client, alice, make_gallery) -> None:
    gallery = make_gallery(alice)
    response = client.post(f"/api/gallery/{gallery.id}/comments", json={"text": "hi"})
    assert response.status_code == status.HTTP_401_UNAUTHORIZED
