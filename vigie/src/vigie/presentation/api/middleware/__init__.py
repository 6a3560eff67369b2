"""
API middleware for Vigie.
"""

from vigie.presentation.api.middleware.error_handler import (
    unhandled_exception_handler,
    vigie_exception_handler,
)
from vigie.presentation.api.middleware.request_id_middleware import (
    RequestIDMiddleware,
)

__all__ = [
    "vigie_exception_handler",
    "unhandled_exception_handler",
    "RequestIDMiddleware",
]
