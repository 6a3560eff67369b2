"""
Deal entity - one escrow deal as returned by getDeal(uint256).
"""

from dataclasses import dataclass

ZERO_ADDRESS = "0x0000000000000000000000000000000000000000"


@dataclass(frozen=True)
class DealRecord:
    """
    Canonical deal shape.

    Existence is decided by the contract; a record whose buyer and seller
    are both the zero address is the default struct of an unknown id.
    """

    buyer: str
    seller: str
    amount: str
    status: int

    @property
    def is_empty(self) -> bool:
        """True for the zero-valued struct returned for unknown ids."""
        return (
            self.buyer.lower() == ZERO_ADDRESS
            and self.seller.lower() == ZERO_ADDRESS
        )

    def to_dict(self) -> dict:
        """Convert entity to dictionary representation."""
        return {
            "buyer": self.buyer,
            "seller": self.seller,
            "amount": self.amount,
            "status": self.status,
        }
