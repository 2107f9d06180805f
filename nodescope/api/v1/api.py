from fastapi import APIRouter
from .endpoints import kubernetes

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(kubernetes.router, tags=["kubernetes"])
