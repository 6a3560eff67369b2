"""
Dependency Injection Container for Vigie.

One container is built per application in create_app() and kept on
app.state; nothing here is module-global. Chain objects are created on
first use and live until shutdown().
"""

from dataclasses import dataclass
from typing import Optional

from vigie.config.settings import Settings
from vigie.domain.exceptions import ChainConfigurationError
from vigie.domain.repositories import IItemRepository
from vigie.domain.services import IChainClient, IEscrowBinding, ITokenBinding
from vigie.infrastructure.blockchain import (
    ERC20_ABI,
    ESCROW_ABI,
    ChainClient,
    EscrowBinding,
    TokenBinding,
)
from vigie.infrastructure.data import JsonItemRepository
from vigie.infrastructure.monitoring import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ChainContext:
    """Connection, wallet and contract bindings shared by all requests."""

    chain_client: IChainClient
    escrow: IEscrowBinding
    token: ITokenBinding
    network_name: str
    native_symbol: str


class DIContainer:
    """
    Dependency Injection Container.

    Manages the chain context and the item repository.
    """

    def __init__(self, settings: Settings):
        """
        Initialize container with None instances.

        Args:
            settings: Application settings
        """
        self.settings = settings
        self._chain_context: Optional[ChainContext] = None
        self._item_repository: Optional[IItemRepository] = None

    async def initialize(self) -> None:
        """
        Build the chain context eagerly when configuration allows.

        Missing chain settings are only warned about here; /report answers
        503 until they are provided.
        """
        missing = self.settings.missing_chain_variables
        if missing:
            logger.warning(
                f"Missing blockchain environment variables: {', '.join(missing)}"
            )
            return

        logger.info("Blockchain configuration detected")
        try:
            self._chain_context = self._build_chain_context()
        except ChainConfigurationError as e:
            logger.error(f"Invalid blockchain configuration: {e.message}")

    async def shutdown(self) -> None:
        """Cleanup resources and close connections."""
        if self._chain_context:
            await self._chain_context.chain_client.close()
            self._chain_context = None

    @property
    def chain_context(self) -> ChainContext:
        """
        Get chain context, building it on first access.

        Raises:
            ChainConfigurationError: If settings are missing or invalid
        """
        if self._chain_context is None:
            self._chain_context = self._build_chain_context()
        return self._chain_context

    def set_chain_context(self, context: ChainContext) -> None:
        """Install a pre-built chain context (for testing)."""
        self._chain_context = context

    def _build_chain_context(self) -> ChainContext:
        settings = self.settings
        missing = settings.missing_chain_variables
        if missing:
            raise ChainConfigurationError(
                "Blockchain is not configured", missing=missing
            )

        chain_client = ChainClient.connect(
            rpc_url=settings.RPC_URL,
            private_key=settings.WALLET_PRIVATE_KEY,
            timeout=settings.RPC_TIMEOUT,
        )
        return ChainContext(
            chain_client=chain_client,
            escrow=EscrowBinding(
                chain_client.contract(settings.ESCROW_CONTRACT_ADDRESS, ESCROW_ABI)
            ),
            token=TokenBinding(
                chain_client.contract(settings.TOKEN_CONTRACT_ADDRESS, ERC20_ABI)
            ),
            network_name=settings.CHAIN_NAME,
            native_symbol=settings.NATIVE_SYMBOL,
        )

    @property
    def item_repository(self) -> IItemRepository:
        """Get item repository instance."""
        if self._item_repository is None:
            self._item_repository = JsonItemRepository(
                self.settings.resolve_data_path()
            )
        return self._item_repository
