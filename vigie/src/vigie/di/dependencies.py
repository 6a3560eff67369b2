"""
FastAPI dependency injection.

Provides dependencies for FastAPI routes from the container stored on
app.state. Tests swap pieces with app.dependency_overrides.
"""

from fastapi import Depends, Request

from vigie.application.use_cases import (
    BuildEscrowReport,
    GetDeal,
    GetItem,
    GetItemStats,
    ListItems,
)
from vigie.config.settings import Settings
from vigie.di.container import ChainContext, DIContainer
from vigie.domain.repositories import IItemRepository

# ================================================================
# Infrastructure Dependencies
# ================================================================


def get_container(request: Request) -> DIContainer:
    """Get the application's DI container."""
    return request.app.state.container


def get_app_settings(container: DIContainer = Depends(get_container)) -> Settings:
    """Get the settings the application was created with."""
    return container.settings


def get_chain_context(container: DIContainer = Depends(get_container)) -> ChainContext:
    """
    Get the shared chain context.

    Raises:
        ChainConfigurationError: If blockchain settings are missing
    """
    return container.chain_context


def get_item_repository(
    container: DIContainer = Depends(get_container),
) -> IItemRepository:
    """Get item repository dependency."""
    return container.item_repository


# ================================================================
# Use Case Dependencies
# ================================================================


def get_build_escrow_report(
    context: ChainContext = Depends(get_chain_context),
) -> BuildEscrowReport:
    """Get BuildEscrowReport use case dependency."""
    return BuildEscrowReport(
        chain_client=context.chain_client,
        escrow=context.escrow,
        token=context.token,
        network_name=context.network_name,
        native_symbol=context.native_symbol,
    )


def get_get_deal(context: ChainContext = Depends(get_chain_context)) -> GetDeal:
    """Get GetDeal use case dependency."""
    return GetDeal(escrow=context.escrow)


def get_get_item_stats(
    repository: IItemRepository = Depends(get_item_repository),
) -> GetItemStats:
    """Get GetItemStats use case dependency."""
    return GetItemStats(item_repository=repository)


def get_list_items(
    repository: IItemRepository = Depends(get_item_repository),
) -> ListItems:
    """Get ListItems use case dependency."""
    return ListItems(item_repository=repository)


def get_get_item(
    repository: IItemRepository = Depends(get_item_repository),
) -> GetItem:
    """Get GetItem use case dependency."""
    return GetItem(item_repository=repository)
