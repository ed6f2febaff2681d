from core.config import settings
from core.logging import get_module_logger
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.router import api_router
from server.lifespan import lifespan

logger = get_module_logger()


handler = FastAPI(lifespan=lifespan)


allow_origins = (
    ["*"] if settings.is_production else settings.server.CORS_ALLOWED_ORIGINS
)
handler.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)


handler.include_router(api_router)
