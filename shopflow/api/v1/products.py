"""
Products API endpoints for inventory management.
"""
from typing import Optional
import uuid
from fastapi import APIRouter, Depends, status, Query

from shopflow.api.v1.deps import get_repository
from shopflow.repository import InventoryRepository
from shopflow.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
    ProductListResponse,
    ProductSortField,
    SortOrder
)

router = APIRouter(prefix="/products", tags=["Products"])


@router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    product_data: ProductCreate,
    repo: InventoryRepository = Depends(get_repository)
):
    """
    Create a new product.

    - **sku**: Unique product SKU (per user)
    - **stock**: Initial stock quantity
    - **min_stock**: Low stock threshold
    """
    return repo.add_product(product_data)


@router.get("", response_model=ProductListResponse)
def list_products(
    search: Optional[str] = Query(None, description="Match against name or SKU"),
    category: Optional[str] = None,
    sort_by: ProductSortField = "name",
    sort_order: SortOrder = "asc",
    repo: InventoryRepository = Depends(get_repository)
):
    """
    List products with filtering and sorting.

    - **search**: Case-insensitive name or SKU match
    - **category**: Filter by category name
    - **sort_by**: name, stock, price or category
    - **sort_order**: asc or desc
    """
    products = repo.list_products(
        search=search,
        category=category,
        sort_by=sort_by,
        sort_order=sort_order
    )
    return ProductListResponse(items=products, total=len(products))


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: uuid.UUID,
    repo: InventoryRepository = Depends(get_repository)
):
    """Get a specific product by ID."""
    return repo.get_product(product_id)


@router.patch("/{product_id}", response_model=ProductResponse)
def update_product(
    product_id: uuid.UUID,
    product_data: ProductUpdate,
    repo: InventoryRepository = Depends(get_repository)
):
    """
    Update a product.

    Only provided fields will be updated.
    """
    return repo.update_product(product_id, product_data)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_product(
    product_id: uuid.UUID,
    repo: InventoryRepository = Depends(get_repository)
):
    """Delete a product permanently."""
    repo.delete_product(product_id)
    return None
