from fastapi import APIRouter
from community.api.routes import admin, auth, data, users

router = APIRouter()
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(users.router, prefix="/users", tags=["users"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(data.router, prefix="/data", tags=["data"])
