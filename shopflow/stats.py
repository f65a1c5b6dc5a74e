"""
Dashboard summary statistics and the stock classification rules they share
with the analytics engine.
"""
from decimal import Decimal
from typing import Sequence

from shopflow.schemas.dashboard import InventoryStats

# Stock above this multiple of the minimum threshold counts as overstock
OVERSTOCK_MULTIPLIER = 5


def is_out_of_stock(stock: int) -> bool:
    return stock == 0


def is_low_stock(stock: int, min_stock: int) -> bool:
    """Stock is positive but at or below the minimum threshold."""
    return 0 < stock <= min_stock


def is_overstock(stock: int, min_stock: int) -> bool:
    return stock > min_stock * OVERSTOCK_MULTIPLIER


def stock_status(stock: int, min_stock: int) -> str:
    """Human-readable stock status used by product responses."""
    if is_out_of_stock(stock):
        return "out_of_stock"
    if is_low_stock(stock, min_stock):
        return "low_stock"
    return "in_stock"


def to_decimal(value) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def inventory_value(products: Sequence) -> Decimal:
    """Sum of price x stock, unrounded."""
    return sum((to_decimal(product.price) * product.stock for product in products), Decimal("0"))


def compute_inventory_stats(products: Sequence, categories: Sequence) -> InventoryStats:
    """
    Summary card figures for the dashboard.

    Args:
        products: Current product snapshot for one user
        categories: Current category snapshot for the same user

    Returns:
        InventoryStats; empty collections give all-zero counts
    """
    return InventoryStats(
        total_products=len(products),
        total_value=inventory_value(products),
        low_stock_items=sum(1 for p in products if is_low_stock(p.stock, p.min_stock)),
        out_of_stock_items=sum(1 for p in products if is_out_of_stock(p.stock)),
        total_categories=len(categories),
    )
