"""
Pydantic schemas for the analytics view.
"""
from enum import Enum
from datetime import datetime
import uuid
from pydantic import BaseModel


class DateRange(str, Enum):
    """Selectable analytics window."""
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    LAST_90_DAYS = "90d"
    LAST_YEAR = "1y"

    @property
    def days(self) -> int:
        return {"7d": 7, "30d": 30, "90d": 90, "1y": 365}[self.value]


class SalesData(BaseModel):
    """One day of synthetic sales."""
    date: str  # YYYY-MM-DD
    revenue: float
    profit: float
    items_sold: int


class CategoryAnalytics(BaseModel):
    """Per-category rollup."""
    category: str
    total_products: int
    total_value: float
    average_price: float
    low_stock_count: int
    color: str


class ProductPerformance(BaseModel):
    """Synthetic per-product sales performance."""
    id: uuid.UUID
    name: str
    category: str
    revenue: float
    profit: float
    profit_margin: float
    turnover_rate: float
    stock: int


class InventoryTrends(BaseModel):
    """Current totals with synthetic period-over-period changes."""
    total_value: float
    total_value_change: float
    total_products: int
    total_products_change: int
    average_stock_level: float
    stock_level_change: float
    categories_count: int


class StockMovement(BaseModel):
    """One day of synthetic stock in/out."""
    date: str  # YYYY-MM-DD
    stock_in: int
    stock_out: int
    net_change: int


class LowStockAlert(BaseModel):
    id: uuid.UUID
    name: str
    current_stock: int
    min_stock: int
    category: str


class OutOfStockAlert(BaseModel):
    id: uuid.UUID
    name: str
    category: str
    last_updated: datetime


class OverstockAlert(BaseModel):
    id: uuid.UUID
    name: str
    current_stock: int
    average_usage: int
    category: str


class AlertsData(BaseModel):
    """Disjoint stock alert lists."""
    low_stock_alerts: list[LowStockAlert]
    out_of_stock_alerts: list[OutOfStockAlert]
    overstock_alerts: list[OverstockAlert]


class AnalyticsReport(BaseModel):
    """Everything the analytics view renders for one date range."""
    date_range: DateRange
    sales: list[SalesData]
    category_analytics: list[CategoryAnalytics]
    product_performance: list[ProductPerformance]
    inventory_trends: InventoryTrends
    stock_movement: list[StockMovement]
    alerts: AlertsData
