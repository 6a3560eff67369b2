"""
Domain exceptions package.
"""

# Base exceptions
from vigie.domain.exceptions.base import (
    DataSourceError,
    EntityNotFoundError,
    ValidationError,
    VigieException,
)

# Blockchain exceptions
from vigie.domain.exceptions.blockchain import (
    BlockchainError,
    ChainConfigurationError,
    ChainConnectionError,
    DealNotFoundError,
    DealUnavailableError,
    UnsupportedCallError,
)

__all__ = [
    # Base
    "VigieException",
    "EntityNotFoundError",
    "ValidationError",
    "DataSourceError",
    # Blockchain
    "BlockchainError",
    "ChainConfigurationError",
    "ChainConnectionError",
    "UnsupportedCallError",
    "DealNotFoundError",
    "DealUnavailableError",
]
