from fastapi import APIRouter

from .analytics import analytics_router
from .health import health_router
from .predictions import predictions_router

router = APIRouter()

router.include_router(health_router, tags=["Health"])
router.include_router(predictions_router, tags=["Predictions"])
router.include_router(analytics_router, tags=["Analytics"])
