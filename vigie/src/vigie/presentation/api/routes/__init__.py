"""
API routes module.

Exports all route routers for registration in main app.
"""

from vigie.presentation.api.routes.health import router as health_router
from vigie.presentation.api.routes.items import router as items_router
from vigie.presentation.api.routes.report import router as report_router
from vigie.presentation.api.routes.stats import router as stats_router

__all__ = [
    "health_router",
    "items_router",
    "report_router",
    "stats_router",
]
