"""Tests for database models."""
import pytest
from decimal import Decimal
from sqlalchemy.exc import IntegrityError

from shopflow.models import Category, Product, User


class TestUserModel:
    """Tests for User model."""

    def test_create_user(self, test_db):
        user = User(
            email="model@shopflow.io",
            password_hash="hashed",
            name="Model User",
            shop_name="Model Shop"
        )
        test_db.add(user)
        test_db.commit()

        assert user.id is not None
        assert user.is_active is True
        assert user.created_at is not None

    def test_email_unique(self, test_db, owner):
        test_db.add(User(
            email="owner@shopflow.io",
            password_hash="hashed",
            name="Copy",
            shop_name="Copy Shop"
        ))

        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()


class TestProductModel:
    """Tests for Product model."""

    def test_stock_properties(self, make_product):
        assert make_product(stock=0, min_stock=5).stock_status == "out_of_stock"
        assert make_product(stock=4, min_stock=5).is_low_stock
        assert make_product(stock=30, min_stock=5).is_overstock
        assert not make_product(stock=30, min_stock=5).is_low_stock

    def test_sku_unique_per_user(self, test_db, owner):
        for name in ("First", "Second"):
            test_db.add(Product(
                user_id=owner.id,
                sku="SAME-1",
                name=name,
                price=Decimal("1.00"),
                cost=Decimal("0.50")
            ))

        with pytest.raises(IntegrityError):
            test_db.commit()
        test_db.rollback()

    def test_defaults(self, test_db, owner):
        product = Product(user_id=owner.id, sku="BARE-1", name="Bare")
        test_db.add(product)
        test_db.commit()

        assert product.stock == 0
        assert product.min_stock == 0
        assert product.description == ""
        assert product.category == ""
        assert product.price == Decimal("0")

    def test_deleting_user_cascades(self, test_db, owner):
        test_db.add(Product(user_id=owner.id, sku="C-1", name="Cascade"))
        test_db.add(Category(user_id=owner.id, name="Misc"))
        test_db.commit()

        test_db.delete(owner)
        test_db.commit()

        assert test_db.query(Product).count() == 0
        assert test_db.query(Category).count() == 0


class TestCategoryModel:
    """Tests for Category model."""

    def test_default_color(self, test_db, owner):
        category = Category(user_id=owner.id, name="Plain")
        test_db.add(category)
        test_db.commit()

        assert category.color == "#6B7280"
        assert category.description == ""
