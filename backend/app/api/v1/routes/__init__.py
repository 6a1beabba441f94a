from app.api.v1.routes.auth import router as auth_router
from app.api.v1.routes.messages import router as messages_router
from app.api.v1.routes.users import router as users_router

__all__ = ["auth_router", "messages_router", "users_router"]
