from .users import router as users_router
from .platforms import router as platforms_router
from .designs import router as designs_router
from .posts import router as posts_router
from .reports import router as reports_router

__all__ = [
    "users_router",
    "platforms_router",
    "designs_router",
    "posts_router",
    "reports_router",
]
