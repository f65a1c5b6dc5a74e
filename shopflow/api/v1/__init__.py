"""API v1 Router."""
from fastapi import APIRouter

from shopflow.api.v1 import auth, products, categories, dashboard, analytics

api_router = APIRouter(prefix="/api/v1")

# Include all route modules
api_router.include_router(auth.router)
api_router.include_router(products.router)
api_router.include_router(categories.router)
api_router.include_router(dashboard.router)
api_router.include_router(analytics.router)

__all__ = ["api_router"]
