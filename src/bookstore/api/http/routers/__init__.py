from .authors import router as authors_router
from .books import router as books_router
from .health import router as health_router
from .users import router as users_router

__all__ = ["authors_router", "books_router", "health_router", "users_router"]
