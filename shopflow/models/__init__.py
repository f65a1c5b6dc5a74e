"""
SQLAlchemy models for the ShopFlow application.
Import all models here to ensure they're registered with SQLAlchemy.
"""
from shopflow.models.user import User
from shopflow.models.product import Product
from shopflow.models.category import Category

__all__ = [
    "User",
    "Product",
    "Category",
]
