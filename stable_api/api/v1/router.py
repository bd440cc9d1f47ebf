from fastapi import APIRouter

from stable_api.api.routers import horses, owners

api_router = APIRouter()

api_router.include_router(owners.router)
api_router.include_router(horses.router)
