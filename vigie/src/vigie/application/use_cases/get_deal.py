"""
Get Deal use case.

Fetches one deal from the escrow contract and normalizes whatever shape
the client library returned into a DealRecord.
"""

from collections.abc import Mapping, Sequence
from enum import Enum
from typing import Any, Tuple

from vigie.domain.entities import DealRecord
from vigie.domain.exceptions import (
    DealNotFoundError,
    DealUnavailableError,
    UnsupportedCallError,
)
from vigie.domain.services import IEscrowBinding
from vigie.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

DEAL_FIELDS = ("buyer", "seller", "amount", "status")


class DealWireShape(str, Enum):
    """Ways a getDeal() result can arrive."""

    NAMED = "named"
    ATTRIBUTES = "attributes"
    POSITIONAL = "positional"
    UNKNOWN = "unknown"


def classify_deal_shape(raw: Any) -> DealWireShape:
    """
    Decide which wire shape raw is.

    Mappings with every field name are NAMED; objects exposing the field
    names as attributes (named tuples, structs) are ATTRIBUTES; plain
    sequences of at least four values are POSITIONAL.
    """
    if isinstance(raw, Mapping):
        if all(name in raw for name in DEAL_FIELDS):
            return DealWireShape.NAMED
        return DealWireShape.UNKNOWN

    if isinstance(raw, (str, bytes)):
        return DealWireShape.UNKNOWN

    if all(hasattr(raw, name) for name in DEAL_FIELDS):
        return DealWireShape.ATTRIBUTES

    if isinstance(raw, Sequence) and len(raw) >= len(DEAL_FIELDS):
        return DealWireShape.POSITIONAL

    return DealWireShape.UNKNOWN


def _fields(raw: Any, shape: DealWireShape) -> Tuple[Any, Any, Any, Any]:
    if shape is DealWireShape.NAMED:
        return tuple(raw[name] for name in DEAL_FIELDS)
    if shape is DealWireShape.ATTRIBUTES:
        return tuple(getattr(raw, name) for name in DEAL_FIELDS)
    return tuple(raw[: len(DEAL_FIELDS)])


def normalize_deal(raw: Any, deal_id: int) -> DealRecord:
    """
    Map a raw getDeal() result to a DealRecord.

    Args:
        raw: Value returned by the escrow binding
        deal_id: Requested id, for error reporting

    Returns:
        DealRecord

    Raises:
        DealUnavailableError: If the shape is unknown or a field cannot be
            converted
    """
    shape = classify_deal_shape(raw)
    if shape is DealWireShape.UNKNOWN:
        raise DealUnavailableError(deal_id, f"unrecognized deal shape: {raw!r}")

    buyer, seller, amount, status = _fields(raw, shape)
    try:
        return DealRecord(
            buyer=str(buyer),
            seller=str(seller),
            amount=str(int(amount)),
            status=int(status),
        )
    except (TypeError, ValueError) as e:
        raise DealUnavailableError(deal_id, f"malformed deal fields: {e}") from e


class GetDeal:
    """
    Look up one deal by id.

    Business rules:
    - deal_id is already validated (integer >= 0) by the HTTP layer
    - Any failure of getDeal() is a DealUnavailableError
    - A zero-address record is reported as DealNotFoundError
    """

    def __init__(self, escrow: IEscrowBinding):
        """
        Initialize use case with dependencies.

        Args:
            escrow: Escrow contract binding
        """
        self.escrow = escrow

    async def execute(self, deal_id: int) -> DealRecord:
        """
        Execute deal lookup.

        Args:
            deal_id: Non-negative deal identifier

        Returns:
            DealRecord

        Raises:
            DealNotFoundError: Deal does not exist (or, as the subclass
                DealUnavailableError, could not be read)
        """
        try:
            raw = await self.escrow.get_deal(deal_id)
        except UnsupportedCallError as e:
            logger.warning(f"getDeal({deal_id}) failed: {e.reason}")
            raise DealUnavailableError(deal_id, e.reason) from e

        deal = normalize_deal(raw, deal_id)
        if deal.is_empty:
            raise DealNotFoundError(deal_id)

        return deal
