"""
Escrow report entities - snapshots assembled per /report request.

Every snapshot is built fresh for one request and never persisted.
Fields that could not be read hold the NOT_AVAILABLE sentinel instead of
being dropped, so the serialized report always has the same keys.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone

NOT_AVAILABLE = "N/A"


@dataclass(frozen=True)
class NetworkInfo:
    """Chain the RPC endpoint is serving."""

    name: str
    chain_id: int

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {"name": self.name, "chainId": self.chain_id}


@dataclass(frozen=True)
class TokenMetadata:
    """ERC-20 name, symbol and decimals."""

    name: str
    symbol: str
    decimals: int

    def __post_init__(self):
        """Validate decimals fit in a uint8."""
        if not 0 <= self.decimals <= 255:
            raise ValueError(f"Token decimals out of range: {self.decimals}")


# Used when the token contract is non-standard or unreachable
DEFAULT_TOKEN_METADATA = TokenMetadata(name="USDT", symbol="USDT", decimals=18)


@dataclass(frozen=True)
class EscrowSnapshot:
    """Escrow contract state."""

    address: str
    owner: str = NOT_AVAILABLE
    total_deals: str = NOT_AVAILABLE
    verified: bool = False

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "address": self.address,
            "owner": self.owner,
            "totalDeals": self.total_deals,
            "verified": self.verified,
        }


@dataclass(frozen=True)
class TokenSnapshot:
    """Token metadata plus the escrow contract's holdings of that token."""

    address: str
    metadata: TokenMetadata = DEFAULT_TOKEN_METADATA
    escrow_balance: str = NOT_AVAILABLE

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "address": self.address,
            "name": self.metadata.name,
            "symbol": self.metadata.symbol,
            "decimals": self.metadata.decimals,
            "escrowBalance": self.escrow_balance,
        }


@dataclass(frozen=True)
class WalletSnapshot:
    """Proxy wallet identity and native-currency balance."""

    address: str
    native_balance: str = NOT_AVAILABLE
    native_symbol: str = "BNB"

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "address": self.address,
            "nativeBalance": self.native_balance,
            "nativeSymbol": self.native_symbol,
        }


@dataclass(frozen=True)
class EscrowReport:
    """Aggregate of network, escrow, token and wallet snapshots."""

    network: NetworkInfo
    escrow: EscrowSnapshot
    token: TokenSnapshot
    wallet: WalletSnapshot
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "network": self.network.to_dict(),
            "escrowContract": self.escrow.to_dict(),
            "token": self.token.to_dict(),
            "proxyWallet": self.wallet.to_dict(),
            "timestamp": self.timestamp.isoformat(),
        }
