"""Demo accounts, follows and galleries for local development."""
from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from redshare.models import User
from redshare.services import content, identity, social_graph

__all__ = ["DEMO_PASSWORD", "seed_demo_data"]

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password"

_UNSPLASH = "https://images.unsplash.com"
_PIXABAY = "https://cdn.pixabay.com/vimeo"
_VIMEO_THUMBS = "https://i.vimeocdn.com/video"

DEMO_USERS = [
    ("naturelover", "nature@example.com", f"{_UNSPLASH}/photo-1535713875002-d1d0cf377fde?w=400"),
    ("urbanexplorer", "urban@example.com", f"{_UNSPLASH}/photo-1494790108377-be9c29b29330?w=400"),
    ("wildlifepro", "wildlife@example.com", f"{_UNSPLASH}/photo-1568602471122-7832951cc4c5?w=400"),
    ("timelapse", "time@example.com", f"{_UNSPLASH}/photo-1570295999919-56ceb5ecca61?w=400"),
    ("cityscaper", "city@example.com", f"{_UNSPLASH}/photo-1633332755192-727a05c4013d?w=400"),
]

# (follower, followed) as indexes into DEMO_USERS
DEMO_FOLLOWS = [(0, 1), (0, 2), (1, 3), (2, 4), (3, 0)]

# owner index, title, description, tags, video path, thumbnail path, duration
DEMO_GALLERIES = [
    (0, "Beautiful Waterfalls", "Stunning waterfall scenes", ["nature", "water", "relaxing"],
     "328890111/waterfall-23881.mp4",
     "774667835-6769e9ffd8f8d5cf44f97bd8f63050127e35f191d4dfb2d060870170806e6c0e-d", "0:31"),
    (0, "Ocean Waves", "Relaxing ocean scenes", ["nature", "ocean", "waves"],
     "178058381/ocean-4006.mp4",
     "585731720-8c45d35d11dde0feb999b5c6505b7342326b7681991f449285df5bf38e27b8f4-d", "0:42"),
    (1, "City Lights", "Night city timelapse", ["urban", "night", "timelapse"],
     "414670315/city-40862.mp4",
     "887059150-89145b318d43959e56b83f8f7829c5c58fb5eec6d37faa6a3b51a23adde25a0e-d", "0:20"),
    (1, "Urban Motion", "City life in motion", ["urban", "people", "life"],
     "443401203/traffic-46340.mp4",
     "927956336-016e932a7437e5978593dd1ff9a5250662408a297d43e57c3c73ee2dd8506cfc-d", "0:15"),
    (2, "Wild Dolphins", "Dolphins in their natural habitat", ["wildlife", "ocean", "dolphins"],
     "457670133/dolphins-47947.mp4",
     "947994582-e9264c472e46c0bb470b67751879a12fb2ea95f8614e94553cadded4cf80b2c5-d", "0:23"),
    (2, "Birds in Flight", "Beautiful birds soaring", ["wildlife", "birds", "nature"],
     "467929736/bird-49607.mp4",
     "961871267-6921dce86e3f76082d76c012c905b4405527e669b0d1f3366e26566bacd0f75e-d", "0:18"),
    (3, "Cloud Movement", "Beautiful cloud timelapse", ["timelapse", "clouds", "nature"],
     "385919399/clouds-35516.mp4",
     "845295531-cb5c691c1ceb5f67f291c5f0bc3f69c73e4bf5b37307a646847ea797ae352d9a-d", "0:27"),
    (3, "Sunset Colors", "Beautiful sunset timelapse", ["timelapse", "sunset", "nature"],
     "490271048/sunset-52915.mp4",
     "1013408755-7812c01b1da6e1df7e9e0b05e49b0f8c0a05c9e34c62405fb81e50b4d24d7f6f-d", "0:21"),
    (4, "Downtown Rush", "City traffic and movement", ["city", "traffic", "urban"],
     "529720096/traffic-58024.mp4",
     "1095994650-66b48ef37967a111665c1ceb4995d004106c8fe26d1f3c5fd70fea4206922f92-d", "0:24"),
    (4, "Night Life", "City at night", ["city", "night", "urban"],
     "474243499/city-50450.mp4",
     "970483541-64946eb5e91e58a5882bb710cb874cdda16612ef0bece68cc1d2b37ec4ef5b05-d", "0:19"),
]


def seed_demo_data(db: Session) -> bool:
    """Populate an empty store with the demo data set.

    Returns:
        False without touching anything if the store already has users.
    """
    if db.scalar(select(func.count()).select_from(User)):
        logger.info("Store already has users; skipping demo data")
        return False

    users = [
        identity.create_user(
            db,
            username=username,
            password=DEMO_PASSWORD,
            email=email,
            profile_image=profile_image,
        )
        for username, email, profile_image in DEMO_USERS
    ]
    for follower, followed in DEMO_FOLLOWS:
        social_graph.follow(db, users[follower].id, users[followed].id)

    for owner, title, description, tags, video, thumbnail, duration in DEMO_GALLERIES:
        content.create_gallery(
            db,
            owner_user_id=users[owner].id,
            title=title,
            description=description,
            tags=tags,
            visibility="public",
            items=[
                {
                    "file_url": f"{_PIXABAY}/{video}",
                    "thumbnail_url": f"{_VIMEO_THUMBS}/{thumbnail}",
                    "file_type": "video",
                    "duration": duration,
                }
            ],
        )

    logger.info(
        "Seeded %d users, %d follows and %d galleries",
        len(users),
        len(DEMO_FOLLOWS),
        len(DEMO_GALLERIES),
    )
    return True
