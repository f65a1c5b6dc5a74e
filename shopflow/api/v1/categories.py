"""
Categories API endpoints.
"""
import uuid
from fastapi import APIRouter, Depends, status

from shopflow.api.v1.deps import get_repository
from shopflow.repository import InventoryRepository
from shopflow.schemas.category import CategoryCreate, CategoryUpdate, CategoryResponse

router = APIRouter(prefix="/categories", tags=["Categories"])


@router.get("", response_model=list[CategoryResponse])
def list_categories(repo: InventoryRepository = Depends(get_repository)):
    """List categories in creation order."""
    return repo.list_categories()


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    category_data: CategoryCreate,
    repo: InventoryRepository = Depends(get_repository)
):
    """
    Create a category.

    - **name**: Unique per shop, ignoring case
    - **color**: Hex display color, e.g. #3B82F6
    """
    return repo.add_category(category_data)


@router.patch("/{category_id}", response_model=CategoryResponse)
def update_category(
    category_id: uuid.UUID,
    category_data: CategoryUpdate,
    repo: InventoryRepository = Depends(get_repository)
):
    """
    Update a category.

    Products keep the category name they were saved with.
    """
    return repo.update_category(category_id, category_data)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: uuid.UUID,
    repo: InventoryRepository = Depends(get_repository)
):
    """Delete a category. Its products are not touched."""
    repo.delete_category(category_id)
    return None
