"""Tests for the feed, saved list and gallery detail."""

import pytest

from redshare.core.errors import ForbiddenError, NotFoundError
from redshare.services import comments, content, feed, identity, interactions, social_graph


def test_feed_without_follows_is_empty(db_session, alice, bob, make_gallery) -> None:
    make_gallery(bob)
    assert feed.get_feed_content(db_session, alice.id) == []


def test_feed_only_shows_followed_public_galleries(db_session, alice, bob, carol, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    make_gallery(bob, "Bob public")
    make_gallery(bob, "Bob private", visibility="private")
    make_gallery(carol, "Carol public")
    make_gallery(alice, "Alice own")

    assert [c.title for c in feed.get_feed_content(db_session, alice.id)] == ["Bob public"]


def test_feed_is_direct_follows_only(db_session, alice, bob, carol, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    social_graph.follow(db_session, bob.id, carol.id)
    make_gallery(carol, "Two hops away")

    assert feed.get_feed_content(db_session, alice.id) == []


def test_feed_order_and_pagination(db_session, alice, bob, carol, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    social_graph.follow(db_session, alice.id, carol.id)
    make_gallery(bob, "B1")
    make_gallery(carol, "C1")
    make_gallery(bob, "B2")

    assert [c.title for c in feed.get_feed_content(db_session, alice.id)] == ["B2", "C1", "B1"]
    assert [c.title for c in feed.get_feed_content(db_session, alice.id, limit=1, offset=1)] == ["C1"]


def test_private_gallery_leaves_feed(db_session, alice, bob, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    gallery = make_gallery(bob, "Soon private")
    assert len(feed.get_feed_content(db_session, alice.id)) == 1

    content.set_visibility(db_session, gallery.id, actor_id=bob.id, visibility="private")
    assert feed.get_feed_content(db_session, alice.id) == []


def test_unfollow_removes_from_feed(db_session, alice, bob, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    make_gallery(bob)
    social_graph.unfollow(db_session, alice.id, bob.id)
    assert feed.get_feed_content(db_session, alice.id) == []


def test_feed_cards_use_current_username(db_session, alice, bob, make_gallery) -> None:
    social_graph.follow(db_session, alice.id, bob.id)
    make_gallery(bob)
    identity.update_profile(db_session, bob, username="robert")

    assert feed.get_feed_content(db_session, alice.id)[0].username == "robert"


def test_saved_content(db_session, alice, bob, make_gallery) -> None:
    first = make_gallery(bob, "First")
    second = make_gallery(bob, "Second")
    make_gallery(bob, "Not saved")
    interactions.save_gallery(db_session, alice.id, first.id)
    interactions.save_gallery(db_session, alice.id, second.id)

    assert [c.title for c in feed.get_saved_content(db_session, alice.id)] == ["Second", "First"]

    content.set_visibility(db_session, second.id, actor_id=bob.id, visibility="private")
    assert [c.title for c in feed.get_saved_content(db_session, alice.id)] == ["First"]


def test_saved_own_private_gallery_stays_listed(db_session, alice, make_gallery) -> None:
    gallery = make_gallery(alice, "Mine", visibility="private")
    interactions.save_gallery(db_session, alice.id, gallery.id)

    assert [c.title for c in feed.get_saved_content(db_session, alice.id)] == ["Mine"]


def test_gallery_detail_counts_views(db_session, alice, bob, make_gallery) -> None:
    gallery = make_gallery(alice, tags=["a", "b"], description="desc")

    first = feed.get_gallery_detail(db_session, gallery.id)
    second = feed.get_gallery_detail(db_session, gallery.id, viewer_id=bob.id)

    assert first.view_count == 1
    assert second.view_count == 2
    assert second.tags == ["a", "b"]
    assert second.description == "desc"
    assert len(second.items) == 1


def test_gallery_detail_anonymous_flags(db_session, alice, make_gallery) -> None:
    gallery = make_gallery(alice)
    detail = feed.get_gallery_detail(db_session, gallery.id)

    assert detail.username == "alice"
    assert detail.is_own_gallery is None
    assert detail.is_following is None
    assert detail.is_liked is None
    assert detail.is_saved is None


def test_gallery_detail_viewer_flags(db_session, alice, bob, make_gallery) -> None:
    gallery = make_gallery(alice)
    social_graph.follow(db_session, bob.id, alice.id)
    interactions.like_gallery(db_session, bob.id, gallery.id)
    comments.create_comment(db_session, gallery.id, bob.id, "great")

    detail = feed.get_gallery_detail(db_session, gallery.id, viewer_id=bob.id)

    assert detail.likes_count == 1
    assert detail.comments_count == 1
    assert detail.is_own_gallery is False
    assert detail.is_following is True
    assert detail.is_liked is True
    assert detail.is_saved is False


def test_gallery_detail_for_owner(db_session, alice, make_gallery) -> None:
    gallery = make_gallery(alice, visibility="private")
    detail = feed.get_gallery_detail(db_session, gallery.id, viewer_id=alice.id)

    assert detail.is_own_gallery is True
    assert detail.is_following is None


def test_gallery_detail_uses_current_username(db_session, alice, make_gallery) -> None:
    gallery = make_gallery(alice)
    identity.update_profile(db_session, alice, username="alicia")

    assert feed.get_gallery_detail(db_session, gallery.id).username == "alicia"


def test_gallery_detail_private_and_missing(db_session, alice, bob, make_gallery) -> None:
    gallery = make_gallery(alice, visibility="private")

    with pytest.raises(ForbiddenError):
        feed.get_gallery_detail(db_session, gallery.id, viewer_id=bob.id)
    with pytest.raises(NotFoundError):
        feed.get_gallery_detail(db_session, 999)
    # Rejected views are not counted.
    assert content.get_gallery_by_id(db_session, gallery.id).view_count == 0
