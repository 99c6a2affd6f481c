from .user import UserCreate, UserResponse
from .platform import PlatformCreate, PlatformResponse
from .design import DesignCreate, DesignResponse
from .post import PostCreate, PostResponse, PostReportResponse

__all__ = [
    "UserCreate", "UserResponse",
    "PlatformCreate", "PlatformResponse",
    "DesignCreate", "DesignResponse",
    "PostCreate", "PostResponse", "PostReportResponse",
]
