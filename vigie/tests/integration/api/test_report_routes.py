"""
Integration tests for escrow report API routes.

Tests /report and /report/deal/{dealId} through the full FastAPI stack
with mock chain bindings.

Usage:
    pytest vigie/tests/integration/api/test_report_routes.py
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tests.helpers.chain_fakes import (
    BUYER_ADDRESS,
    ESCROW_ADDRESS,
    SELLER_ADDRESS,
    WALLET_ADDRESS,
    unsupported,
)
from vigie.di.container import DIContainer
from vigie.domain.entities import ZERO_ADDRESS
from vigie.domain.exceptions import ChainConnectionError
from vigie.main import create_app


class TestReportRoute:
    """Integration tests for GET /report."""

    async def test_report_success(self, client):
        """Test report envelope and data."""
        response = await client.get("/report")

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == (
            "Successfully fetched escrow contract data from BSC Testnet"
        )
        assert body["data"]["escrowContract"]["address"] == ESCROW_ADDRESS
        assert body["data"]["escrowContract"]["totalDeals"] == "3"
        assert body["data"]["proxyWallet"]["address"] == WALLET_ADDRESS
        assert body["metadata"]["apiVersion"] == "1.0"
        assert body["metadata"]["blockchain"] == "Binance Smart Chain Testnet"
        assert body["metadata"]["provider"] == "Alchemy"
        assert "responseTime" in body["metadata"]
        assert response.headers["X-Request-ID"]

    async def test_report_with_degraded_fields(self, client, chain_context):
        """Test missing contract methods still give 200 with N/A fields."""
        chain_context.escrow.owner.side_effect = unsupported(ESCROW_ADDRESS, "owner()")
        chain_context.escrow.total_deals.side_effect = unsupported(
            ESCROW_ADDRESS, "totalDeals()"
        )
        chain_context.escrow.deal_count.side_effect = unsupported(
            ESCROW_ADDRESS, "dealCount()"
        )

        response = await client.get("/report")

        assert response.status_code == 200
        escrow = response.json()["data"]["escrowContract"]
        assert escrow["owner"] == "N/A"
        assert escrow["totalDeals"] == "N/A"

    async def test_report_rpc_unreachable(self, client, chain_context):
        """Test unreachable RPC gives 500 with the interaction message."""
        chain_context.chain_client.get_network.side_effect = ChainConnectionError(
            "http://127.0.0.1", "connection refused"
        )

        response = await client.get("/report")

        assert response.status_code == 500
        body = response.json()
        assert body["success"] is False
        assert body["message"] == "Blockchain interaction failed: connection refused"
        assert "detail" not in body

    async def test_report_debug_includes_detail(self, test_settings, chain_context):
        """Test DEBUG mode adds the error detail."""
        settings = test_settings.model_copy(update={"DEBUG": True})
        container = DIContainer(settings)
        container.set_chain_context(chain_context)
        chain_context.chain_client.get_network.side_effect = ChainConnectionError(
            "http://127.0.0.1", "connection refused"
        )
        app = create_app(settings=settings, container=container)

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/report")

        assert response.status_code == 500
        assert response.json()["detail"]["rpc"] == "http://127.0.0.1"

    async def test_report_not_configured(self, unconfigured_settings):
        """Test missing chain settings give 503."""
        app = create_app(
            settings=unconfigured_settings,
            container=DIContainer(unconfigured_settings),
        )

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.get("/report")

        assert response.status_code == 503
        assert response.json()["error"] == "CHAIN_NOT_CONFIGURED"


class TestDealRoute:
    """Integration tests for GET /report/deal/{dealId}."""

    async def test_get_deal(self, client, chain_context):
        """Test deal is returned with its id."""
        response = await client.get("/report/deal/0")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "dealId": 0,
            "deal": {
                "buyer": BUYER_ADDRESS,
                "seller": SELLER_ADDRESS,
                "amount": str(5 * 10**18),
                "status": 1,
            },
        }
        chain_context.escrow.get_deal.assert_awaited_once_with(0)

    @pytest.mark.parametrize("deal_id", ["-1", "abc", "1.5"])
    async def test_invalid_deal_id(self, client, chain_context, deal_id):
        """Test non-integer or negative ids give 400 without a chain call."""
        response = await client.get(f"/report/deal/{deal_id}")

        assert response.status_code == 400
        assert response.json()["message"] == "Invalid deal ID"
        chain_context.escrow.get_deal.assert_not_awaited()

    async def test_deal_not_found(self, client, chain_context):
        """Test empty deal record gives 404."""
        chain_context.escrow.get_deal.return_value = (
            ZERO_ADDRESS,
            ZERO_ADDRESS,
            0,
            0,
        )

        response = await client.get("/report/deal/12")

        assert response.status_code == 404
        assert response.json()["error"] == "DEAL_NOT_FOUND"

    async def test_get_deal_unavailable(self, client, chain_context):
        """Test failing getDeal() gives 502."""
        chain_context.escrow.get_deal.side_effect = unsupported(
            ESCROW_ADDRESS, "getDeal(uint256)"
        )

        response = await client.get("/report/deal/3")

        assert response.status_code == 502
        assert response.json()["message"] == (
            "getDeal function not available or deal 3 not found"
        )
