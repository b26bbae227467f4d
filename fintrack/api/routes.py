from fastapi import APIRouter
from fintrack.api.routes_health import router as health_router
from fintrack.api.routes_entities import router as entities_router

router = APIRouter()
router.include_router(health_router, tags=["health"])
router.include_router(entities_router, tags=["entities"])
