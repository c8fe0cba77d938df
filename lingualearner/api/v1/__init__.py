from .auth_controller import router as auth_router
from .user_controller import router as user_router, users_router
from .post_controller import router as post_router
from .comment_controller import router as comment_router


__all__ = ["auth_router", "user_router", "users_router", "post_router", "comment_router"]
