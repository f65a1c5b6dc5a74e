"""
Analytics computations over a product/category snapshot.

Historical sales are not recorded anywhere, so the time series, performance
figures, trend deltas and usage numbers are synthetic. Every function that
invents numbers takes an optional ``random.Random``; pass a seeded one to get
reproducible output, leave it out to get fresh figures on every call.
"""
import random
from datetime import date, timedelta
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional, Sequence

from shopflow.logging_config import get_logger
from shopflow.schemas.analytics import (
    AlertsData,
    AnalyticsReport,
    CategoryAnalytics,
    DateRange,
    InventoryTrends,
    LowStockAlert,
    OutOfStockAlert,
    OverstockAlert,
    ProductPerformance,
    SalesData,
    StockMovement,
)
from shopflow.stats import inventory_value, is_low_stock, is_out_of_stock, is_overstock

logger = get_logger("analytics")

CENT = Decimal("0.01")

# Daily units sold per product are capped at this many
MAX_DAILY_UNITS = 5
# Revenue in the performance table assumes at most this many units moved
MAX_PERFORMANCE_UNITS = 10
STOCK_MOVEMENT_DAYS = 30


def round_money(value) -> float:
    """Round to cents, halves away from zero."""
    return float(Decimal(str(value)).quantize(CENT, rounding=ROUND_HALF_UP))


def _rng(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else random.Random()


def _day_labels(days: int, today: Optional[date]) -> list[str]:
    """ISO dates for the last ``days`` days, oldest first, ending today."""
    end = today or date.today()
    return [(end - timedelta(days=offset)).strftime("%Y-%m-%d") for offset in range(days - 1, -1, -1)]


def generate_sales_series(
    products: Sequence,
    days: int,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> list[SalesData]:
    """
    Synthetic daily revenue and profit for the last ``days`` days.

    Each product sells a uniform random amount in [0, min(stock, 5)) per day;
    revenue and profit scale that by price and by price - cost.
    """
    rng = _rng(rng)
    series = []

    for day in _day_labels(days, today):
        revenue = 0.0
        profit = 0.0
        for product in products:
            cap = min(product.stock, MAX_DAILY_UNITS) if product.stock > 0 else 0
            units = rng.random() * cap
            price = float(product.price)
            revenue += units * price
            profit += units * (price - float(product.cost))

        series.append(SalesData(
            date=day,
            revenue=round_money(revenue),
            profit=round_money(profit),
            items_sold=rng.randrange(5, 25)
        ))

    return series


def category_rollup(products: Sequence, categories: Sequence) -> list[CategoryAnalytics]:
    """
    Per-category totals in category order.

    Products whose category name matches no category are left out.
    """
    rollup = []

    for category in categories:
        members = [p for p in products if p.category == category.name]
        average_price = (
            sum(Decimal(str(p.price)) for p in members) / len(members)
            if members else Decimal("0")
        )

        rollup.append(CategoryAnalytics(
            category=category.name,
            total_products=len(members),
            total_value=round_money(inventory_value(members)),
            average_price=round_money(average_price),
            low_stock_count=sum(1 for p in members if is_low_stock(p.stock, p.min_stock)),
            color=category.color
        ))

    return rollup


def product_performance(
    products: Sequence,
    rng: Optional[random.Random] = None,
) -> list[ProductPerformance]:
    """Synthetic revenue, profit and turnover per product, best sellers first."""
    rng = _rng(rng)
    performance = []

    for product in products:
        price = float(product.price)
        cost = float(product.cost)

        revenue = rng.random() * price * min(product.stock, MAX_PERFORMANCE_UNITS)
        if price > 0:
            margin = (price - cost) / price
            profit = revenue * margin
        else:
            margin = 0.0
            profit = 0.0

        performance.append(ProductPerformance(
            id=product.id,
            name=product.name,
            category=product.category,
            revenue=round_money(revenue),
            profit=round_money(profit),
            profit_margin=round_money(margin * 100),
            turnover_rate=round_money(rng.random() * 5),
            stock=product.stock
        ))

    # sorted() is stable, so equal revenues keep input order
    return sorted(performance, key=lambda item: item.revenue, reverse=True)


def inventory_trends(
    products: Sequence,
    categories: Sequence,
    rng: Optional[random.Random] = None,
) -> InventoryTrends:
    """Current totals plus made-up changes against an imaginary prior period."""
    rng = _rng(rng)

    total_products = len(products)
    average_stock = sum(p.stock for p in products) / total_products if total_products else 0

    return InventoryTrends(
        total_value=round_money(inventory_value(products)),
        total_value_change=round_money(rng.uniform(-10, 10)),
        total_products=total_products,
        total_products_change=rng.randint(-5, 5),
        average_stock_level=round_money(average_stock),
        stock_level_change=round_money(rng.uniform(-15, 15)),
        categories_count=len(categories)
    )


def stock_movement_series(
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
    days: int = STOCK_MOVEMENT_DAYS,
) -> list[StockMovement]:
    """Synthetic daily stock in/out. Always 30 days, whatever range is selected."""
    rng = _rng(rng)
    movements = []

    for day in _day_labels(days, today):
        stock_in = rng.randrange(10, 60)
        stock_out = rng.randrange(5, 45)
        movements.append(StockMovement(
            date=day,
            stock_in=stock_in,
            stock_out=stock_out,
            net_change=stock_in - stock_out
        ))

    return movements


def classify_alerts(
    products: Sequence,
    rng: Optional[random.Random] = None,
) -> AlertsData:
    """Split products into low stock, out of stock and overstock lists."""
    rng = _rng(rng)

    low_stock = [
        LowStockAlert(
            id=p.id,
            name=p.name,
            current_stock=p.stock,
            min_stock=p.min_stock,
            category=p.category
        )
        for p in products if is_low_stock(p.stock, p.min_stock)
    ]

    out_of_stock = [
        OutOfStockAlert(
            id=p.id,
            name=p.name,
            category=p.category,
            last_updated=p.updated_at
        )
        for p in products if is_out_of_stock(p.stock)
    ]

    overstock = [
        OverstockAlert(
            id=p.id,
            name=p.name,
            current_stock=p.stock,
            average_usage=rng.randrange(1, 10),
            category=p.category
        )
        for p in products if is_overstock(p.stock, p.min_stock)
    ]

    return AlertsData(
        low_stock_alerts=low_stock,
        out_of_stock_alerts=out_of_stock,
        overstock_alerts=overstock
    )


def build_analytics_report(
    products: Sequence,
    categories: Sequence,
    date_range: DateRange = DateRange.LAST_30_DAYS,
    rng: Optional[random.Random] = None,
    today: Optional[date] = None,
) -> AnalyticsReport:
    """All analytics views for one snapshot and date range."""
    rng = _rng(rng)
    date_range = DateRange(date_range)

    logger.debug(
        f"[ANALYTICS] Building report: range={date_range.value}, "
        f"products={len(products)}, categories={len(categories)}"
    )

    return AnalyticsReport(
        date_range=date_range,
        sales=generate_sales_series(products, date_range.days, rng=rng, today=today),
        category_analytics=category_rollup(products, categories),
        product_performance=product_performance(products, rng=rng),
        inventory_trends=inventory_trends(products, categories, rng=rng),
        stock_movement=stock_movement_series(rng=rng, today=today),
        alerts=classify_alerts(products, rng=rng)
    )
