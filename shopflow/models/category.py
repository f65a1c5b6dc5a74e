"""
Category model. Products refer to categories by name.
"""
import uuid
from sqlalchemy import String, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopflow.core.database import Base


class Category(Base):
    """Product category with a display color."""

    __tablename__ = "categories"

    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    # Unique per user case-insensitively, checked by the repository
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    color: Mapped[str] = mapped_column(String(20), default="#6B7280", nullable=False)

    user = relationship("User", back_populates="categories")

    __table_args__ = (
        Index("idx_categories_user_id", "user_id"),
    )

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
