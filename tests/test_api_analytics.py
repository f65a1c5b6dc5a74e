"""Tests for dashboard and analytics API endpoints."""
from decimal import Decimal

import pytest


class TestDashboardAPI:
    """Tests for the summary cards endpoint."""

    def test_stats_for_starter_catalog(self, client, auth_headers, sample_catalog):
        response = client.get("/api/v1/dashboard/stats", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert data["total_products"] == 5
        assert Decimal(data["total_value"]) == Decimal("3988.07")
        assert data["low_stock_items"] == 1
        assert data["out_of_stock_items"] == 1
        assert data["total_categories"] == 5

    def test_stats_for_empty_catalog(self, client, auth_headers):
        data = client.get("/api/v1/dashboard/stats", headers=auth_headers).json()

        assert data["total_products"] == 0
        assert Decimal(data["total_value"]) == 0
        assert data["total_categories"] == 0


class TestAnalyticsAPI:
    """Tests for analytics endpoints."""

    @pytest.mark.parametrize("date_range,days", [
        ("7d", 7),
        ("30d", 30),
        ("90d", 90),
        ("1y", 365),
    ])
    def test_report_follows_date_range(self, client, auth_headers, sample_catalog, date_range, days):
        response = client.get(
            "/api/v1/analytics",
            params={"date_range": date_range},
            headers=auth_headers
        )

        assert response.status_code == 200
        data = response.json()
        assert data["date_range"] == date_range
        assert len(data["sales"]) == days
        assert len(data["stock_movement"]) == 30
        assert len(data["category_analytics"]) == 5
        assert len(data["product_performance"]) == 5

    def test_default_range_is_thirty_days(self, client, auth_headers):
        data = client.get("/api/v1/analytics", headers=auth_headers).json()

        assert data["date_range"] == "30d"
        assert len(data["sales"]) == 30

    def test_unknown_range_rejected(self, client, auth_headers):
        response = client.get(
            "/api/v1/analytics",
            params={"date_range": "2w"},
            headers=auth_headers
        )

        assert response.status_code == 422

    def test_seeded_source_gives_identical_reports(self, client, auth_headers, sample_catalog):
        first = client.get("/api/v1/analytics", headers=auth_headers).json()
        second = client.get("/api/v1/analytics", headers=auth_headers).json()

        assert first == second

    def test_alerts_for_starter_catalog(self, client, auth_headers, sample_catalog):
        response = client.get("/api/v1/analytics/alerts", headers=auth_headers)

        assert response.status_code == 200
        data = response.json()
        assert [a["name"] for a in data["low_stock_alerts"]] == ["Coffee Beans"]
        assert [a["name"] for a in data["out_of_stock_alerts"]] == ["Programming Book"]
        # T-shirts sit exactly at 5x their minimum, which is not overstock
        assert data["overstock_alerts"] == []

    def test_category_rollup_endpoint(self, client, auth_headers, sample_catalog):
        data = client.get("/api/v1/analytics/categories", headers=auth_headers).json()

        electronics = next(c for c in data if c["category"] == "Electronics")
        assert electronics["total_products"] == 1
        assert electronics["total_value"] == 2499.75
        assert electronics["color"] == "#3B82F6"

    def test_individual_sections(self, client, auth_headers, sample_catalog):
        sales = client.get("/api/v1/analytics/sales", params={"date_range": "7d"}, headers=auth_headers)
        performance = client.get("/api/v1/analytics/performance", headers=auth_headers)
        trends = client.get("/api/v1/analytics/trends", headers=auth_headers)
        movement = client.get("/api/v1/analytics/stock-movement", headers=auth_headers)

        assert len(sales.json()) == 7
        revenues = [p["revenue"] for p in performance.json()]
        assert revenues == sorted(revenues, reverse=True)
        assert trends.json()["total_products"] == 5
        assert trends.json()["categories_count"] == 5
        assert len(movement.json()) == 30
