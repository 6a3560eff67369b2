"""
Test fixtures and configuration.
"""

import json
from pathlib import Path
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from tests.helpers.chain_fakes import (
    ESCROW_ADDRESS,
    TOKEN_ADDRESS,
    WALLET_PRIVATE_KEY,
    make_chain_context,
)
from vigie.config.settings import Settings
from vigie.di.container import ChainContext, DIContainer
from vigie.main import create_app

SAMPLE_ITEMS = [
    {"id": 1, "name": "Laptop Pro", "category": "Electronics"},
    {"id": 2, "name": "Desk Lamp", "category": "Furniture"},
    {"id": 3, "name": "USB-C Hub", "category": "Electronics"},
]


@pytest.fixture
def items_file(tmp_path: Path) -> Path:
    """Write sample items to a temporary JSON file."""
    path = tmp_path / "items.json"
    path.write_text(json.dumps(SAMPLE_ITEMS), encoding="utf-8")
    return path


@pytest.fixture
def test_settings(items_file: Path) -> Settings:
    """Provide fully configured settings pointing at a local node."""
    return Settings(
        ENV="test",
        DEBUG=False,
        LOG_LEVEL="WARNING",
        RPC_URL="http://127.0.0.1:8545",
        WALLET_PRIVATE_KEY=WALLET_PRIVATE_KEY,
        ESCROW_CONTRACT_ADDRESS=ESCROW_ADDRESS,
        TOKEN_CONTRACT_ADDRESS=TOKEN_ADDRESS,
        DATA_PATH=str(items_file),
    )


@pytest.fixture
def unconfigured_settings(items_file: Path) -> Settings:
    """Provide settings with no blockchain variables."""
    return Settings(
        ENV="test",
        LOG_LEVEL="WARNING",
        RPC_URL=None,
        WALLET_PRIVATE_KEY=None,
        ESCROW_CONTRACT_ADDRESS=None,
        TOKEN_CONTRACT_ADDRESS=None,
        DATA_PATH=str(items_file),
    )


@pytest.fixture
def chain_context() -> ChainContext:
    """Provide a chain context built from mocks."""
    return make_chain_context()


@pytest.fixture
def container(test_settings: Settings, chain_context: ChainContext) -> DIContainer:
    """Provide a container whose chain context is already installed."""
    container = DIContainer(test_settings)
    container.set_chain_context(chain_context)
    return container


@pytest.fixture
def app(test_settings: Settings, container: DIContainer) -> FastAPI:
    """Provide application wired to the mock chain context."""
    return create_app(settings=test_settings, container=container)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Provide HTTP client for API testing.

    ASGITransport does not run the lifespan, so the container is used
    exactly as the fixtures built it.
    """
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
