"""
Monitoring and observability infrastructure.
"""

from vigie.infrastructure.monitoring.logger import (
    get_logger,
    get_request_id,
    log_performance,
    set_request_id,
    setup_logging,
)

__all__ = [
    "get_logger",
    "get_request_id",
    "set_request_id",
    "setup_logging",
    "log_performance",
]
