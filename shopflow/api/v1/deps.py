"""
Shared FastAPI dependencies for v1 routes.
"""
import random

from fastapi import Depends
from sqlalchemy.orm import Session

from shopflow.core.config import Settings, get_settings
from shopflow.core.database import get_db
from shopflow.core.security import get_current_user
from shopflow.models.user import User
from shopflow.repository import InventoryRepository


def get_repository(
    current_user: User = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> InventoryRepository:
    """Inventory store scoped to the authenticated user."""
    return InventoryRepository(db, current_user.id)


def get_random_source(settings: Settings = Depends(get_settings)) -> random.Random:
    """Random source for synthetic analytics; seeded when ANALYTICS_SEED is set."""
    return random.Random(settings.analytics_seed)
