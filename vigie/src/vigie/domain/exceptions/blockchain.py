"""
Blockchain-related exceptions.

Defines exceptions for chain connectivity, contract reads and deal lookup.
"""

from typing import Optional

from vigie.domain.exceptions.base import VigieException


class BlockchainError(VigieException):
    """Base exception for blockchain operations."""

    def __init__(
        self,
        message: str,
        code: str = "BLOCKCHAIN_ERROR",
        details: Optional[dict] = None,
    ):
        super().__init__(message, code=code, details=details)


class ChainConfigurationError(BlockchainError):
    """Raised when chain settings (RPC, key, addresses) are missing or invalid."""

    def __init__(self, message: str, missing: Optional[list] = None):
        """
        Initialize configuration error.

        Args:
            message: Error description
            missing: Names of the missing settings, if any
        """
        super().__init__(
            message,
            code="CHAIN_NOT_CONFIGURED",
            details={"missing": missing} if missing else None,
        )
        self.missing = missing or []


class ChainConnectionError(BlockchainError):
    """Raised when the RPC endpoint is unreachable or answers garbage."""

    def __init__(self, rpc_url: str, reason: str):
        """
        Initialize connection error.

        Args:
            rpc_url: Endpoint that failed (credentials are not included)
            reason: Underlying error text
        """
        super().__init__(
            f"Blockchain interaction failed: {reason}",
            code="CHAIN_CONNECTION_ERROR",
            details={"rpc": rpc_url},
        )
        self.reason = reason


class UnsupportedCallError(BlockchainError):
    """Raised when a contract does not implement, or reverts, a read method."""

    def __init__(self, contract: str, method: str, reason: str):
        """
        Initialize unsupported call error.

        Args:
            contract: Contract address
            method: Solidity method signature, e.g. "totalDeals()"
            reason: Underlying error text
        """
        super().__init__(
            f"{method} not available on {contract}: {reason}",
            code="UNSUPPORTED_CALL",
            details={"contract": contract, "method": method},
        )
        self.contract = contract
        self.method = method
        self.reason = reason


class DealNotFoundError(BlockchainError):
    """Raised when a deal cannot be returned for the requested id."""

    def __init__(
        self,
        deal_id: int,
        message: Optional[str] = None,
        code: str = "DEAL_NOT_FOUND",
    ):
        super().__init__(
            message or f"Deal {deal_id} not found",
            code=code,
            details={"deal_id": deal_id},
        )
        self.deal_id = deal_id


class DealUnavailableError(DealNotFoundError):
    """Raised when getDeal() itself fails: missing method, revert or bad output."""

    def __init__(self, deal_id: int, reason: str):
        super().__init__(
            deal_id,
            message=(
                f"getDeal function not available or deal {deal_id} not found"
            ),
            code="DEAL_UNAVAILABLE",
        )
        self.reason = reason
