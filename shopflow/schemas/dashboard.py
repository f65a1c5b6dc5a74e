"""
Pydantic schemas for Dashboard endpoints.
"""
from datetime import datetime
from decimal import Decimal
from pydantic import BaseModel


class InventoryStats(BaseModel):
    """Summary card figures."""
    total_products: int
    total_value: Decimal
    low_stock_items: int
    out_of_stock_items: int
    total_categories: int


class HealthCheck(BaseModel):
    """Health check response."""
    status: str  # 'healthy', 'unhealthy'
    version: str
    database: bool
    timestamp: datetime
