from fastapi import APIRouter

from multitouch.api.v1.routes_auth import router as auth_router
from multitouch.api.v1.routes_user import router as user_router


api_router = APIRouter()

api_router.include_router(auth_router, prefix="/auth", tags=["auth"])
api_router.include_router(user_router, prefix="/users", tags=["users"])
