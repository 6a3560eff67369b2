"""
Dependency Injection module for Vigie.

Provides container and dependency functions for FastAPI routes.
"""

from vigie.di.container import ChainContext, DIContainer
from vigie.di.dependencies import (
    get_app_settings,
    get_build_escrow_report,
    get_chain_context,
    get_container,
    get_get_deal,
    get_get_item,
    get_get_item_stats,
    get_item_repository,
    get_list_items,
)

__all__ = [
    # Container
    "ChainContext",
    "DIContainer",
    # Dependencies
    "get_container",
    "get_app_settings",
    "get_chain_context",
    "get_item_repository",
    "get_build_escrow_report",
    "get_get_deal",
    "get_get_item_stats",
    "get_list_items",
    "get_get_item",
]
