"""
Dashboard API endpoints for summary statistics.
"""
from datetime import datetime, timezone
from fastapi import APIRouter, Depends

from shopflow.api.v1.deps import get_repository
from shopflow.core.config import settings
from shopflow.core.database import check_db_connection
from shopflow.repository import InventoryRepository
from shopflow.schemas.dashboard import InventoryStats, HealthCheck
from shopflow.stats import compute_inventory_stats

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])


@router.get("/stats", response_model=InventoryStats)
def get_dashboard_stats(repo: InventoryRepository = Depends(get_repository)):
    """
    Summary cards: product count, inventory value, low and out of stock
    counts, category count.
    """
    return compute_inventory_stats(repo.list_products(), repo.list_categories())


@router.get("/health", response_model=HealthCheck)
def health_check():
    """
    Health check endpoint for monitoring.
    """
    db_healthy = check_db_connection()

    return HealthCheck(
        status="healthy" if db_healthy else "unhealthy",
        version=settings.app_version,
        database=db_healthy,
        timestamp=datetime.now(timezone.utc)
    )
