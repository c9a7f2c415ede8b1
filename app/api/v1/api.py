from fastapi import APIRouter

from app.api.v1.routes_map import router as map_router


api_router = APIRouter()

api_router.include_router(map_router, prefix="/map", tags=["map"])
