from fastapi import APIRouter

from campuscoffee.api.routers import pos

api_router = APIRouter()

api_router.include_router(pos.router)
