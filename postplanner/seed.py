"""
Sample data for a fresh database.

Rows are inserted parents first so every foreign key resolves. Running it
twice against the same database fails on the unique user email.
"""
from datetime import datetime

from sqlalchemy.orm import Session

from . import crud
from .logging_config import get_logger

logger = get_logger("seed")

SAMPLE_USERS = [
    {"name": "JohnDoe", "email": "john.doe@example.com", "password": "password123"},
    {"name": "JaneSmith", "email": "jane.smith@example.com", "password": "securepass456"},
]

SAMPLE_PLATFORMS = [
    {"name": "Facebook", "image_size_constraint": "1200x630"},
    {"name": "Instagram", "image_size_constraint": "1080x1080"},
    {"name": "LinkedIn", "image_size_constraint": "1200x627"},
]

# (owner name, design name)
SAMPLE_DESIGNS = [
    ("JohnDoe", "Summer Campaign Design"),
    ("JaneSmith", "Product Launch Design"),
]

# (owner name, design name, platform name, content, scheduled at)
SAMPLE_POSTS = [
    (
        "JohnDoe",
        "Summer Campaign Design",
        "Facebook",
        "Check out our summer sale!",
        datetime(2024, 10, 25, 10, 0, 0),
    ),
    (
        "JaneSmith",
        "Product Launch Design",
        "LinkedIn",
        "Introducing our new product line!",
        datetime(2024, 11, 1, 14, 30, 0),
    ),
]


def load_sample_data(db: Session) -> dict:
    """Insert the sample rows and return the number written per table."""
    users = {u["name"]: crud.create_user(db, **u) for u in SAMPLE_USERS}
    platforms = {p["name"]: crud.create_platform(db, **p) for p in SAMPLE_PLATFORMS}
    designs = {
        name: crud.create_design(db, user_id=users[owner].id, name=name)
        for owner, name in SAMPLE_DESIGNS
    }

    posts = [
        crud.create_post(
            db,
            design_id=designs[design].id,
            user_id=users[owner].id,
            platform_id=platforms[platform].id,
            content=content,
            scheduled_at=scheduled_at,
        )
        for owner, design, platform, content, scheduled_at in SAMPLE_POSTS
    ]

    counts = {
        "users": len(users),
        "platforms": len(platforms),
        "designs": len(designs),
        "posts": len(posts),
        "schedulers": len(posts),
    }
    logger.info("Sample data loaded", **counts)
    return counts
