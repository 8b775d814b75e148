"""
API tests for portfolio and rebalance endpoints.

Tests cover:
- Health and root endpoints
- GET /portfolio
- PUT /portfolio/assets/{ticker}
- POST /rebalance (apply and dry run)
- POST /rebalance/preview (stateless)
- Error responses (400, 404, 422)
- Concurrent updates
"""

from concurrent.futures import ThreadPoolExecutor

from fastapi.testclient import TestClient

from tests.conftest import read_csv


class TestInfoAPI:
    """Tests for service info endpoints."""

    def test_health(self, client: TestClient):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_root(self, client: TestClient):
        data = client.get("/").json()
        assert data["docs"] == "/docs"


class TestPortfolioAPI:
    """Tests for /portfolio endpoints."""

    def test_get_portfolio(self, client: TestClient):
        """
        GIVEN the sample data directory
        WHEN I GET /portfolio
        THEN targets and holdings are formatted for display
        """
        response = client.get("/portfolio")

        assert response.status_code == 200
        data = response.json()
        assert data["targets"] == [
            {"ticker": "VTI", "allocation": "60.00%"},
            {"ticker": "BND", "allocation": "30.00%"},
            {"ticker": "VXUS", "allocation": "10.00%"},
        ]
        assert data["holdings"][2] == {"ticker": "VXUS", "amount": "$0.00"}
        assert data["total_value"] == "$1000.00"
        assert data["target_headers"] == ["Ticker Symbol", "Allocation"]
        assert data["holding_headers"] == ["Ticker Symbol", "Amount (USD)"]
        assert data["as_of"] is not None

    def test_update_asset_value(self, client: TestClient, settings):
        response = client.put("/portfolio/assets/BND", json={"value": "450.00"})

        assert response.status_code == 200
        assert response.json() == {"ticker": "BND", "amount": "$450.00"}
        assert ["BND", "$450.00"] in read_csv(settings.get_portfolio_path())

    def test_update_malformed_value_returns_400(self, client: TestClient):
        response = client.put("/portfolio/assets/BND", json={"value": "450.0"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"

    def test_update_unknown_asset_returns_404(self, client: TestClient):
        response = client.put("/portfolio/assets/GLD", json={"value": "1.00"})

        assert response.status_code == 404
        assert response.json()["error"] == "NOT_FOUND"

    def test_update_missing_body_returns_422(self, client: TestClient):
        response = client.put("/portfolio/assets/BND", json={})
        assert response.status_code == 422

    def test_concurrent_updates_are_all_saved(self, client: TestClient, settings):
        """
        GIVEN two clients updating different assets at the same time
        WHEN both PUT requests run concurrently
        THEN the holdings file keeps both values every time
        """
        for round_num in range(1, 11):
            amount = f"{round_num}.00"
            with ThreadPoolExecutor(max_workers=2) as pool:
                responses = list(pool.map(
                    lambda ticker: client.put(f"/portfolio/assets/{ticker}", json={"value": amount}),
                    ["VTI", "BND"],
                ))

            assert all(response.status_code == 200 for response in responses)
            rows = read_csv(settings.get_portfolio_path())
            assert ["VTI", f"${amount}"] in rows
            assert ["BND", f"${amount}"] in rows


class TestRebalanceAPI:
    """Tests for POST /rebalance."""

    def test_rebalance_applies(self, client: TestClient, settings):
        """
        GIVEN the sample portfolio worth $1000
        WHEN I POST /rebalance with 1000.00
        THEN rows show the buys and the holdings file is updated
        """
        response = client.post("/rebalance", json={"contribution": "1000.00"})

        assert response.status_code == 200
        data = response.json()
        assert data["applied"] is True
        assert data["contribution"] == "$1000.00"
        assert data["new_total_value"] == "$2000.00"
        assert data["headers"][4] == "$ to buy/sell"
        assert data["rows"][0] == {
            "ticker": "VTI",
            "holdings_percent": "60.00%",
            "new_holdings_percent": "60.00%",
            "target_value": "$1200.00",
            "buy_amount": "$600.00",
        }
        assert data["snapshot"][2] == {"ticker": "VXUS", "value": "$200.00"}
        assert read_csv(settings.get_portfolio_path())[2] == ["VXUS", "$200.00"]

    def test_rebalance_dry_run(self, client: TestClient, settings):
        before = read_csv(settings.get_portfolio_path())

        response = client.post("/rebalance", json={"contribution": "10.00", "apply": False})

        assert response.status_code == 200
        assert response.json()["applied"] is False
        assert read_csv(settings.get_portfolio_path()) == before

    def test_rebalance_malformed_contribution_returns_400(self, client: TestClient):
        response = client.post("/rebalance", json={"contribution": "-5.00"})

        assert response.status_code == 400
        assert response.json()["error"] == "INVALID_INPUT"

    def test_rebalance_zero_value_portfolio_returns_400(self, client: TestClient, settings):
        settings.get_portfolio_path().unlink()

        response = client.post("/rebalance", json={"contribution": "100.00"})

        assert response.status_code == 400
        assert response.json()["error"] == "DIVISION_BY_ZERO"


class TestPreviewAPI:
    """Tests for POST /rebalance/preview."""

    def test_preview_constrained_scenario(self, client: TestClient, settings):
        """
        GIVEN A 50% at $700 and B 50% at $300 supplied inline
        WHEN I POST /rebalance/preview with 200.00
        THEN B receives all of it and no file is written
        """
        before = read_csv(settings.get_portfolio_path())

        response = client.post("/rebalance/preview", json={
            "contribution": "200.00",
            "assets": [
                {"name": "A", "target_percent": "50", "value": "$700.00"},
                {"name": "B", "target_percent": "50", "value": "300"},
            ],
        })

        assert response.status_code == 200
        rows = response.json()["rows"]
        assert [row["buy_amount"] for row in rows] == ["$0.00", "$200.00"]
        assert read_csv(settings.get_portfolio_path()) == before

    def test_preview_drops_non_positive_targets(self, client: TestClient):
        response = client.post("/rebalance/preview", json={
            "contribution": "500.00",
            "assets": [
                {"name": "A", "target_percent": "30", "value": "200"},
                {"name": "CASH", "target_percent": "0", "value": "1000"},
            ],
        })

        assert response.status_code == 200
        data = response.json()
        assert [row["ticker"] for row in data["rows"]] == ["A"]
        assert data["rows"][0]["buy_amount"] == "$500.00"

    def test_preview_duplicate_assets_returns_400(self, client: TestClient):
        response = client.post("/rebalance/preview", json={
            "contribution": "1.00",
            "assets": [
                {"name": "A", "target_percent": "50", "value": "1"},
                {"name": "A", "target_percent": "50", "value": "1"},
            ],
        })

        assert response.status_code == 400

    def test_preview_blank_name_returns_422(self, client: TestClient):
        response = client.post("/rebalance/preview", json={
            "contribution": "1.00",
            "assets": [{"name": "   ", "target_percent": "50", "value": "1"}],
        })

        assert response.status_code == 422
