"""
Product model for inventory management.
"""
from typing import Optional
import uuid
from decimal import Decimal
from sqlalchemy import String, Integer, Numeric, ForeignKey, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from shopflow.core.database import Base
from shopflow import stats


class Product(Base):
    """Product inventory model."""

    __tablename__ = "products"

    # Foreign keys
    user_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False
    )

    # Product identification
    sku: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[str] = mapped_column(Text, default="", nullable=False)
    # Category name, not a foreign key: renaming or deleting a category orphans it
    category: Mapped[str] = mapped_column(String(255), default="", nullable=False)

    # Pricing
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)
    cost: Mapped[Decimal] = mapped_column(Numeric(10, 2), default=Decimal("0"), nullable=False)

    # Stock information
    stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    min_stock: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    image_url: Mapped[Optional[str]] = mapped_column(String, nullable=True)

    # Relationships
    user = relationship("User", back_populates="products")

    # Indexes
    __table_args__ = (
        Index("idx_products_user_id", "user_id"),
        Index("idx_products_user_category", "user_id", "category"),
        Index("idx_products_sku", "user_id", "sku", unique=True),
    )

    def __repr__(self) -> str:
        return f"<Product(id={self.id}, sku={self.sku}, name={self.name}, stock={self.stock})>"

    @property
    def is_low_stock(self) -> bool:
        return stats.is_low_stock(self.stock, self.min_stock)

    @property
    def is_out_of_stock(self) -> bool:
        return stats.is_out_of_stock(self.stock)

    @property
    def is_overstock(self) -> bool:
        return stats.is_overstock(self.stock, self.min_stock)

    @property
    def stock_status(self) -> str:
        """Get human-readable stock status."""
        return stats.stock_status(self.stock, self.min_stock)
