# API endpoints and routers

from .translation_endpoints import router as translation_router

__all__ = [
    "translation_router",
]
