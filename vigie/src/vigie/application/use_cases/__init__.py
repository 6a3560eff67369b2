"""Application use cases."""

from vigie.application.use_cases.build_escrow_report import BuildEscrowReport
from vigie.application.use_cases.get_deal import (
    DealWireShape,
    GetDeal,
    classify_deal_shape,
    normalize_deal,
)
from vigie.application.use_cases.get_item_stats import GetItemStats
from vigie.application.use_cases.list_items import GetItem, ListItems

__all__ = [
    "BuildEscrowReport",
    "GetDeal",
    "DealWireShape",
    "classify_deal_shape",
    "normalize_deal",
    "GetItemStats",
    "ListItems",
    "GetItem",
]
