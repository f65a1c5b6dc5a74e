"""Core application modules."""
from shopflow.core.config import settings, get_settings
from shopflow.core.database import Base, get_db, get_db_context, init_db, close_db
from shopflow.core.security import (
    get_password_hash,
    verify_password,
    create_access_token,
    get_current_user,
    get_current_user_id,
)

__all__ = [
    "settings",
    "get_settings",
    "Base",
    "get_db",
    "get_db_context",
    "init_db",
    "close_db",
    "get_password_hash",
    "verify_password",
    "create_access_token",
    "get_current_user",
    "get_current_user_id",
]
