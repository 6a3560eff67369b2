"""
Unit tests for DIContainer.

Usage:
    pytest vigie/tests/unit/infrastructure/test_container.py
"""

import pytest

from tests.helpers.chain_fakes import (
    ESCROW_ADDRESS,
    TOKEN_ADDRESS,
    WALLET_ADDRESS,
    make_chain_context,
)
from vigie.di.container import DIContainer
from vigie.domain.exceptions import ChainConfigurationError
from vigie.infrastructure.blockchain import ChainClient, EscrowBinding, TokenBinding
from vigie.infrastructure.data import JsonItemRepository


class TestDIContainer:
    """Unit tests for DIContainer."""

    def test_builds_chain_context_lazily(self, test_settings):
        """Test chain objects are created from settings on first access."""
        container = DIContainer(test_settings)

        context = container.chain_context

        assert isinstance(context.chain_client, ChainClient)
        assert context.chain_client.wallet_address == WALLET_ADDRESS
        assert isinstance(context.escrow, EscrowBinding)
        assert context.escrow.address == ESCROW_ADDRESS
        assert isinstance(context.token, TokenBinding)
        assert context.token.address == TOKEN_ADDRESS
        assert container.chain_context is context

    def test_unconfigured_chain_context(self, unconfigured_settings):
        """Test missing settings raise ChainConfigurationError."""
        container = DIContainer(unconfigured_settings)

        with pytest.raises(ChainConfigurationError) as exc_info:
            container.chain_context

        assert exc_info.value.missing == [
            "RPC_URL",
            "WALLET_PRIVATE_KEY",
            "ESCROW_CONTRACT_ADDRESS",
            "TOKEN_CONTRACT_ADDRESS",
        ]

    async def test_initialize_tolerates_missing_settings(self, unconfigured_settings):
        """Test startup only warns when chain settings are absent."""
        container = DIContainer(unconfigured_settings)

        await container.initialize()
        await container.shutdown()

    async def test_initialize_tolerates_invalid_key(self, test_settings):
        """Test startup survives a malformed private key."""
        settings = test_settings.model_copy(update={"WALLET_PRIVATE_KEY": "0x12"})
        container = DIContainer(settings)

        await container.initialize()

        with pytest.raises(ChainConfigurationError):
            container.chain_context

    async def test_shutdown_closes_client(self, test_settings):
        """Test shutdown closes the chain client once."""
        context = make_chain_context()
        container = DIContainer(test_settings)
        container.set_chain_context(context)

        await container.shutdown()
        await container.shutdown()

        context.chain_client.close.assert_awaited_once()

    def test_item_repository(self, test_settings, items_file):
        """Test item repository reads the configured path."""
        repository = DIContainer(test_settings).item_repository

        assert isinstance(repository, JsonItemRepository)
        assert repository.path == items_file
