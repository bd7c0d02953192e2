"""Tests for the demo data set."""

from redshare.services import content, feed, identity, seed


def test_seed_demo_data(db_session) -> None:
    assert seed.seed_demo_data(db_session) is True

    naturelover = identity.get_user_by_username(db_session, "naturelover")
    assert identity.authenticate(db_session, "naturelover", seed.DEMO_PASSWORD).id == naturelover.id

    profile = identity.get_user_profile(db_session, naturelover.id)
    assert profile.following_count == 2
    assert profile.followers_count == 1
    assert profile.content_count == 2

    cards = content.get_all_content(db_session, limit=100)
    assert len(cards) == 10
    assert all(card.file_type == "video" and card.duration for card in cards)

    feed_titles = {c.title for c in feed.get_feed_content(db_session, naturelover.id)}
    assert feed_titles == {"City Lights", "Urban Motion", "Wild Dolphins", "Birds in Flight"}


def test_seed_skips_populated_store(db_session, alice) -> None:
    assert seed.seed_demo_data(db_session) is False
    assert identity.get_user_by_username(db_session, "naturelover") is None
