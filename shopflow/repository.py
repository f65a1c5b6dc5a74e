"""
Per-user product and category store.

Routers and the analytics layer receive an ``InventoryRepository`` bound to a
session and a user id instead of reaching into shared state.
"""
from typing import Optional
import uuid

from sqlalchemy import select, func, or_
from sqlalchemy.orm import Session

from shopflow.core.database import utcnow
from shopflow.error_handlers import DuplicateResourceError, ResourceNotFoundError
from shopflow.logging_config import get_logger
from shopflow.models.category import Category
from shopflow.models.product import Product
from shopflow.schemas.category import CategoryCreate, CategoryUpdate
from shopflow.schemas.product import ProductCreate, ProductUpdate
from shopflow.seed import DEFAULT_CATEGORIES, SAMPLE_PRODUCTS

logger = get_logger("repository")

# Text columns sort ignoring case
SORT_COLUMNS = {
    "name": func.lower(Product.name),
    "stock": Product.stock,
    "price": Product.price,
    "category": func.lower(Product.category),
}

LIKE_ESCAPE = "\\"


def _contains_pattern(text: str) -> str:
    """LIKE pattern matching ``text`` literally anywhere in a value."""
    for char in (LIKE_ESCAPE, "%", "_"):
        text = text.replace(char, LIKE_ESCAPE + char)
    return f"%{text}%"


class InventoryRepository:
    """Products and categories owned by one user."""

    def __init__(self, db: Session, user_id: uuid.UUID):
        self.db = db
        self.user_id = user_id

    # Products

    def list_products(
        self,
        search: Optional[str] = None,
        category: Optional[str] = None,
        sort_by: Optional[str] = None,
        sort_order: str = "asc",
    ) -> list[Product]:
        """
        Products for this user.

        Args:
            search: Case-insensitive substring matched against name or SKU
            category: Exact category name
            sort_by: name, stock, price or category; creation order when omitted
            sort_order: asc or desc
        """
        query = select(Product).where(Product.user_id == self.user_id)

        if search:
            pattern = _contains_pattern(search)
            query = query.where(
                or_(
                    Product.name.ilike(pattern, escape=LIKE_ESCAPE),
                    Product.sku.ilike(pattern, escape=LIKE_ESCAPE)
                )
            )

        if category:
            query = query.where(Product.category == category)

        if sort_by:
            column = SORT_COLUMNS[sort_by]
            query = query.order_by(column.desc() if sort_order == "desc" else column.asc())
        query = query.order_by(Product.created_at.asc())

        return list(self.db.scalars(query).all())

    def get_product(self, product_id: uuid.UUID) -> Product:
        product = self.db.scalar(
            select(Product).where(
                Product.id == product_id,
                Product.user_id == self.user_id
            )
        )
        if product is None:
            raise ResourceNotFoundError("Product", product_id)
        return product

    def _sku_taken(self, sku: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        query = select(Product.id).where(
            Product.user_id == self.user_id,
            Product.sku == sku
        )
        if exclude_id is not None:
            query = query.where(Product.id != exclude_id)
        return self.db.scalar(query) is not None

    def add_product(self, data: ProductCreate) -> Product:
        """Create a product; the SKU must be unused within this user's catalog."""
        if self._sku_taken(data.sku):
            logger.warning(f"[PRODUCT] Rejected duplicate SKU '{data.sku}' for user_id={self.user_id}")
            raise DuplicateResourceError("Product", "SKU", data.sku)

        product = Product(user_id=self.user_id, **data.model_dump())
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"[PRODUCT] Created product_id={product.id}, sku={product.sku}")
        return product

    def update_product(self, product_id: uuid.UUID, data: ProductUpdate) -> Product:
        """Apply only the fields that were provided; updated_at is refreshed."""
        product = self.get_product(product_id)
        changes = data.model_dump(exclude_unset=True)

        new_sku = changes.get("sku")
        if new_sku and self._sku_taken(new_sku, exclude_id=product.id):
            logger.warning(f"[PRODUCT] Rejected SKU change to '{new_sku}' for product_id={product.id}")
            raise DuplicateResourceError("Product", "SKU", new_sku)

        for field, value in changes.items():
            setattr(product, field, value)
        product.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(product)

        logger.info(f"[PRODUCT] Updated product_id={product.id}, fields={sorted(changes)}")
        return product

    def delete_product(self, product_id: uuid.UUID) -> None:
        product = self.get_product(product_id)
        self.db.delete(product)
        self.db.commit()
        logger.info(f"[PRODUCT] Deleted product_id={product_id}")

    # Categories

    def list_categories(self) -> list[Category]:
        return list(self.db.scalars(
            select(Category)
            .where(Category.user_id == self.user_id)
            .order_by(Category.created_at.asc())
        ).all())

    def get_category(self, category_id: uuid.UUID) -> Category:
        category = self.db.scalar(
            select(Category).where(
                Category.id == category_id,
                Category.user_id == self.user_id
            )
        )
        if category is None:
            raise ResourceNotFoundError("Category", category_id)
        return category

    def _category_name_taken(self, name: str, exclude_id: Optional[uuid.UUID] = None) -> bool:
        query = select(Category.id).where(
            Category.user_id == self.user_id,
            func.lower(Category.name) == name.lower()
        )
        if exclude_id is not None:
            query = query.where(Category.id != exclude_id)
        return self.db.scalar(query) is not None

    def add_category(self, data: CategoryCreate) -> Category:
        """Create a category; names are unique ignoring case."""
        if self._category_name_taken(data.name):
            logger.warning(f"[CATEGORY] Rejected duplicate name '{data.name}' for user_id={self.user_id}")
            raise DuplicateResourceError("Category", "name", data.name)

        category = Category(user_id=self.user_id, **data.model_dump())
        self.db.add(category)
        self.db.commit()
        self.db.refresh(category)

        logger.info(f"[CATEGORY] Created category_id={category.id}, name={category.name}")
        return category

    def update_category(self, category_id: uuid.UUID, data: CategoryUpdate) -> Category:
        """Partial update. Products still naming the old category are left alone."""
        category = self.get_category(category_id)
        changes = data.model_dump(exclude_unset=True)

        new_name = changes.get("name")
        if new_name and self._category_name_taken(new_name, exclude_id=category.id):
            raise DuplicateResourceError("Category", "name", new_name)

        for field, value in changes.items():
            setattr(category, field, value)
        self.db.commit()
        self.db.refresh(category)

        logger.info(f"[CATEGORY] Updated category_id={category.id}, fields={sorted(changes)}")
        return category

    def delete_category(self, category_id: uuid.UUID) -> None:
        category = self.get_category(category_id)
        self.db.delete(category)
        self.db.commit()
        logger.info(f"[CATEGORY] Deleted category_id={category_id}")

    def seed_defaults(self) -> None:
        """Give a fresh account the starter categories and sample products."""
        for data in DEFAULT_CATEGORIES:
            self.db.add(Category(user_id=self.user_id, **data))
            self.db.flush()
        for data in SAMPLE_PRODUCTS:
            self.db.add(Product(user_id=self.user_id, **data))
            self.db.flush()
        self.db.commit()

        logger.info(
            f"[SEED] Added {len(DEFAULT_CATEGORIES)} categories and "
            f"{len(SAMPLE_PRODUCTS)} products for user_id={self.user_id}"
        )
