"""
Build Escrow Report use case.

Reads network, wallet, escrow and token state in a fixed order and
assembles an EscrowReport. Each field degrades to a sentinel on its own;
only the initial network query is fatal.
"""

from vigie.application.fallbacks import (
    first_successful,
    gather_all,
    probe_or_default,
)
from vigie.domain.entities import (
    DEFAULT_TOKEN_METADATA,
    NOT_AVAILABLE,
    EscrowReport,
    EscrowSnapshot,
    TokenMetadata,
    TokenSnapshot,
    WalletSnapshot,
)
from vigie.domain.exceptions import UnsupportedCallError
from vigie.domain.services import IChainClient, IEscrowBinding, ITokenBinding
from vigie.infrastructure.monitoring import get_logger
from vigie.utils.units import format_ether, format_units

logger = get_logger(__name__)


class BuildEscrowReport:
    """
    Assemble a fresh EscrowReport.

    Business rules:
    - Network query failure aborts the report (ChainConnectionError)
    - totalDeals() takes precedence over dealCount()
    - Token name/symbol/decimals are all-or-default ("USDT", "USDT", 18)
    - Escrow token balance is scaled by the (possibly default) decimals
    - verified is true iff bytecode at the escrow address is non-empty
    """

    def __init__(
        self,
        chain_client: IChainClient,
        escrow: IEscrowBinding,
        token: ITokenBinding,
        network_name: str = "BSC Testnet",
        native_symbol: str = "BNB",
    ):
        """
        Initialize use case with dependencies.

        Args:
            chain_client: RPC connection and wallet identity
            escrow: Escrow contract binding
            token: Token contract binding
            network_name: Label reported for the chain
            native_symbol: Symbol of the native currency
        """
        self.chain_client = chain_client
        self.escrow = escrow
        self.token = token
        self.network_name = network_name
        self.native_symbol = native_symbol

    async def execute(self) -> EscrowReport:
        """
        Execute report build.

        Returns:
            EscrowReport with every key present

        Raises:
            ChainConnectionError: If the RPC endpoint cannot be reached
        """
        network = await self.chain_client.get_network(self.network_name)
        logger.info(f"Connected to chain ID {network.chain_id}")

        wallet = await self._wallet_snapshot()
        escrow_owner = await probe_or_default(
            self.escrow.owner, NOT_AVAILABLE, field="owner", label="owner()"
        )
        total_deals = await first_successful(
            [
                ("totalDeals()", self._total_deals),
                ("dealCount()", self._deal_count),
            ],
            NOT_AVAILABLE,
            field="totalDeals",
        )
        metadata = await probe_or_default(
            self._token_metadata, DEFAULT_TOKEN_METADATA, field="token metadata"
        )
        escrow_balance = await probe_or_default(
            lambda: self._escrow_token_balance(metadata.decimals),
            NOT_AVAILABLE,
            field="escrowBalance",
            label="balanceOf(address)",
        )
        verified = await probe_or_default(
            self._is_deployed, False, field="verified", label="getCode"
        )

        return EscrowReport(
            network=network,
            escrow=EscrowSnapshot(
                address=self.escrow.address,
                owner=escrow_owner,
                total_deals=total_deals,
                verified=verified,
            ),
            token=TokenSnapshot(
                address=self.token.address,
                metadata=metadata,
                escrow_balance=escrow_balance,
            ),
            wallet=wallet,
        )

    async def _wallet_snapshot(self) -> WalletSnapshot:
        address = self.chain_client.wallet_address

        async def balance() -> str:
            return format_ether(await self.chain_client.get_native_balance(address))

        return WalletSnapshot(
            address=address,
            native_balance=await probe_or_default(
                balance, NOT_AVAILABLE, field="nativeBalance", label="eth_getBalance"
            ),
            native_symbol=self.native_symbol,
        )

    async def _total_deals(self) -> str:
        return str(await self.escrow.total_deals())

    async def _deal_count(self) -> str:
        return str(await self.escrow.deal_count())

    async def _token_metadata(self) -> TokenMetadata:
        name, symbol, decimals = await gather_all(
            self.token.name, self.token.symbol, self.token.decimals
        )
        try:
            return TokenMetadata(name=name, symbol=symbol, decimals=int(decimals))
        except ValueError as e:
            raise UnsupportedCallError(self.token.address, "decimals()", str(e)) from e

    async def _escrow_token_balance(self, decimals: int) -> str:
        raw = await self.token.balance_of(self.escrow.address)
        return format_units(raw, decimals)

    async def _is_deployed(self) -> bool:
        code = await self.chain_client.get_code(self.escrow.address)
        return len(code) > 0
