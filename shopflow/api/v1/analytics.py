"""
Analytics API endpoints. Every response is recomputed from the current
catalog; sales-like figures are synthetic.
"""
import random
from fastapi import APIRouter, Depends

from shopflow import analytics
from shopflow.api.v1.deps import get_random_source, get_repository
from shopflow.repository import InventoryRepository
from shopflow.schemas.analytics import (
    AlertsData,
    AnalyticsReport,
    CategoryAnalytics,
    DateRange,
    InventoryTrends,
    ProductPerformance,
    SalesData,
    StockMovement,
)

router = APIRouter(prefix="/analytics", tags=["Analytics"])


@router.get("", response_model=AnalyticsReport)
def get_analytics_report(
    date_range: DateRange = DateRange.LAST_30_DAYS,
    repo: InventoryRepository = Depends(get_repository),
    rng: random.Random = Depends(get_random_source)
):
    """
    Full analytics view for the selected range (7d, 30d, 90d or 1y).
    """
    return analytics.build_analytics_report(
        repo.list_products(), repo.list_categories(), date_range, rng=rng
    )


@router.get("/sales", response_model=list[SalesData])
def get_sales(
    date_range: DateRange = DateRange.LAST_30_DAYS,
    repo: InventoryRepository = Depends(get_repository),
    rng: random.Random = Depends(get_random_source)
):
    """Daily revenue, profit and items sold, oldest day first."""
    return analytics.generate_sales_series(repo.list_products(), date_range.days, rng=rng)


@router.get("/categories", response_model=list[CategoryAnalytics])
def get_category_analytics(repo: InventoryRepository = Depends(get_repository)):
    """Per-category product count, value, average price and low stock count."""
    return analytics.category_rollup(repo.list_products(), repo.list_categories())


@router.get("/performance", response_model=list[ProductPerformance])
def get_product_performance(
    repo: InventoryRepository = Depends(get_repository),
    rng: random.Random = Depends(get_random_source)
):
    """Products ranked by revenue."""
    return analytics.product_performance(repo.list_products(), rng=rng)


@router.get("/trends", response_model=InventoryTrends)
def get_inventory_trends(
    repo: InventoryRepository = Depends(get_repository),
    rng: random.Random = Depends(get_random_source)
):
    return analytics.inventory_trends(repo.list_products(), repo.list_categories(), rng=rng)


@router.get("/stock-movement", response_model=list[StockMovement])
def get_stock_movement(rng: random.Random = Depends(get_random_source)):
    """Last 30 days of stock in/out, independent of the selected range."""
    return analytics.stock_movement_series(rng=rng)


@router.get("/alerts", response_model=AlertsData)
def get_alerts(
    repo: InventoryRepository = Depends(get_repository),
    rng: random.Random = Depends(get_random_source)
):
    """Low stock, out of stock and overstock products."""
    return analytics.classify_alerts(repo.list_products(), rng=rng)
