# bloglist/routes/__init__.py

from bloglist.routes.auth import router as auth_router
from bloglist.routes.blog import router as blog_router
from bloglist.routes.health import router as health_router
from bloglist.routes.testing import router as testing_router
from bloglist.routes.user import router as user_router

__all__ = ["auth_router", "blog_router", "health_router", "testing_router", "user_router"]
