"""Starter catalog every new account receives."""
from decimal import Decimal

DEFAULT_CATEGORIES = [
    {"name": "Electronics", "description": "Electronic devices and accessories", "color": "#3B82F6"},
    {"name": "Clothing", "description": "Apparel and fashion items", "color": "#10B981"},
    {"name": "Food & Beverages", "description": "Food items and drinks", "color": "#F59E0B"},
    {"name": "Books", "description": "Books and educational materials", "color": "#8B5CF6"},
    {"name": "Home & Garden", "description": "Home improvement and garden supplies", "color": "#06B6D4"},
]

SAMPLE_PRODUCTS = [
    {
        "name": "Wireless Headphones",
        "description": "High-quality Bluetooth headphones with noise cancellation",
        "category": "Electronics",
        "price": Decimal("99.99"),
        "cost": Decimal("60.00"),
        "stock": 25,
        "min_stock": 5,
        "sku": "WH001",
    },
    {
        "name": "Cotton T-Shirt",
        "description": "Comfortable 100% cotton t-shirt in various colors",
        "category": "Clothing",
        "price": Decimal("19.99"),
        "cost": Decimal("8.00"),
        "stock": 50,
        "min_stock": 10,
        "sku": "TS001",
    },
    {
        "name": "Coffee Beans",
        "description": "Premium arabica coffee beans, medium roast",
        "category": "Food & Beverages",
        "price": Decimal("12.99"),
        "cost": Decimal("6.50"),
        "stock": 3,
        "min_stock": 5,
        "sku": "CB001",
    },
    {
        "name": "Programming Book",
        "description": "Learn JavaScript programming from basics to advanced",
        "category": "Books",
        "price": Decimal("39.99"),
        "cost": Decimal("20.00"),
        "stock": 0,
        "min_stock": 3,
        "sku": "PB001",
    },
    {
        "name": "Garden Hose",
        "description": "50ft expandable garden hose with spray nozzle",
        "category": "Home & Garden",
        "price": Decimal("29.99"),
        "cost": Decimal("15.00"),
        "stock": 15,
        "min_stock": 5,
        "sku": "GH001",
    },
]
