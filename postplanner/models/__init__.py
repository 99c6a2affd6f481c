from .user import User
from .design import Design
from .platform import Platform
from .post import Post
from .scheduler import Scheduler

__all__ = [
    "User",
    "Design",
    "Platform",
    "Post",
    "Scheduler",
]
