"""Shared test fixtures for all tests."""
import os

# Must be set before shopflow reads its settings
os.environ.setdefault("SEED_DEMO_USER", "false")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import random
import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.orm import sessionmaker
from fastapi.testclient import TestClient

from shopflow.api.v1.deps import get_random_source
from shopflow.core.database import Base, create_db_engine, get_db
from shopflow.core.security import create_access_token, get_password_hash
from shopflow.main import app
from shopflow.models import Category, Product, User
from shopflow.repository import InventoryRepository


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory SQLite database for each test."""
    engine = create_db_engine("sqlite://")
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def client(test_db):
    """Create a test client with database and random source overrides."""
    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_random_source] = lambda: random.Random(1234)
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def owner(test_db):
    """A shop owner with an empty catalog."""
    user = User(
        email="owner@shopflow.io",
        password_hash=get_password_hash("secret123"),
        name="Shop Owner",
        shop_name="Owner's Shop",
        is_active=True
    )
    test_db.add(user)
    test_db.commit()
    test_db.refresh(user)
    return user


@pytest.fixture
def auth_headers(owner):
    """Bearer headers for the owner."""
    return {"Authorization": f"Bearer {create_access_token(subject=owner.id)}"}


@pytest.fixture
def repo(test_db, owner):
    """Inventory repository scoped to the owner."""
    return InventoryRepository(test_db, owner.id)


@pytest.fixture
def make_product():
    """Factory for unsaved Product instances, handy for pure computations."""
    def _make(
        name="Product",
        price="10.00",
        cost="5.00",
        stock=10,
        min_stock=5,
        category="Electronics",
        sku=None,
    ):
        now = datetime.now(timezone.utc)
        return Product(
            id=uuid.uuid4(),
            user_id=uuid.uuid4(),
            name=name,
            description="",
            category=category,
            price=Decimal(str(price)),
            cost=Decimal(str(cost)),
            stock=stock,
            min_stock=min_stock,
            sku=sku or f"SKU-{uuid.uuid4().hex[:8]}",
            created_at=now,
            updated_at=now
        )
    return _make


@pytest.fixture
def make_category():
    """Factory for unsaved Category instances."""
    def _make(name="Electronics", color="#3B82F6"):
        return Category(
            id=uuid.uuid4(),
            user_id=uuid.uuid4(),
            name=name,
            description="",
            color=color
        )
    return _make


@pytest.fixture
def sample_catalog(repo):
    """The starter catalog that new accounts receive."""
    repo.seed_defaults()
    return repo
