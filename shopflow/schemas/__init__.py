"""
Pydantic schemas for request/response validation.
"""
from shopflow.schemas.user import (
    UserBase, SignUpRequest, UserResponse, LoginRequest, LoginResponse
)
from shopflow.schemas.product import (
    ProductBase, ProductCreate, ProductUpdate, ProductResponse, ProductListResponse,
    ProductSortField, SortOrder
)
from shopflow.schemas.category import (
    CategoryBase, CategoryCreate, CategoryUpdate, CategoryResponse
)
from shopflow.schemas.dashboard import InventoryStats, HealthCheck
from shopflow.schemas.analytics import (
    DateRange, SalesData, CategoryAnalytics, ProductPerformance, InventoryTrends,
    StockMovement, LowStockAlert, OutOfStockAlert, OverstockAlert, AlertsData,
    AnalyticsReport
)

__all__ = [
    # User schemas
    "UserBase", "SignUpRequest", "UserResponse", "LoginRequest", "LoginResponse",

    # Product schemas
    "ProductBase", "ProductCreate", "ProductUpdate", "ProductResponse", "ProductListResponse",
    "ProductSortField", "SortOrder",

    # Category schemas
    "CategoryBase", "CategoryCreate", "CategoryUpdate", "CategoryResponse",

    # Dashboard schemas
    "InventoryStats", "HealthCheck",

    # Analytics schemas
    "DateRange", "SalesData", "CategoryAnalytics", "ProductPerformance", "InventoryTrends",
    "StockMovement", "LowStockAlert", "OutOfStockAlert", "OverstockAlert", "AlertsData",
    "AnalyticsReport",
]
