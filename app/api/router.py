from fastapi import APIRouter
from api.routes.system import router as system_router
from api.routes.stores import router as stores_router

api_router = APIRouter()

api_router.include_router(system_router)
api_router.include_router(stores_router)
