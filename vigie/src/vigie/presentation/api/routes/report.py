"""
Escrow report API routes.

- GET /report                 - Escrow, token and wallet snapshot
- GET /report/deal/{deal_id}  - One deal from the escrow contract
"""

import time
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status

from vigie.application.use_cases import BuildEscrowReport, GetDeal
from vigie.config.settings import Settings
from vigie.di.dependencies import (
    get_app_settings,
    get_build_escrow_report,
    get_get_deal,
)
from vigie.domain.entities import EscrowReport
from vigie.domain.exceptions import BlockchainError, ValidationError
from vigie.infrastructure.monitoring import get_logger, log_performance
from vigie.utils.validation import parse_deal_id

logger = get_logger(__name__)

router = APIRouter(prefix="/report", tags=["report"])

RULE = "-" * 70


def log_report_summary(report: EscrowReport) -> None:
    """Write the human-readable report block to the log."""
    data = report.to_dict()
    escrow = data["escrowContract"]
    token = data["token"]
    wallet = data["proxyWallet"]
    network = data["network"]

    lines = [
        "RESULTS:",
        RULE,
        f"Network:           {network['name']} (Chain ID: {network['chainId']})",
        f"Escrow Contract:   {escrow['address']}",
        f"Contract Owner:    {escrow['owner']}",
        f"Total Deals:       {escrow['totalDeals']}",
        f"Contract Verified: {'Yes' if escrow['verified'] else 'No'}",
        f"Token:             {token['address']}",
        f"Token Name:        {token['name']} ({token['symbol']})",
        f"Token Decimals:    {token['decimals']}",
        f"Escrow Balance:    {token['escrowBalance']} {token['symbol']}",
        f"Proxy Wallet:      {wallet['address']}",
        f"Wallet Balance:    {wallet['nativeBalance']} {wallet['nativeSymbol']}",
        f"Timestamp:         {data['timestamp']}",
        RULE,
    ]
    for line in lines:
        logger.info(line)


# ================================================================
# Escrow Report
# ================================================================


@router.get(
    "",
    status_code=status.HTTP_200_OK,
    summary="Get escrow report",
    description="Read escrow contract, token and proxy wallet state",
)
async def get_escrow_report(
    use_case: BuildEscrowReport = Depends(get_build_escrow_report),
    settings: Settings = Depends(get_app_settings),
):
    """
    Fetch escrow contract data from the configured chain.

    Missing contract methods degrade single fields to "N/A"; only an
    unreachable RPC endpoint fails the request.
    """
    logger.info(f"Escrow report requested ({settings.CHAIN_NAME})")
    started = time.perf_counter()

    try:
        report = await use_case.execute()
    except BlockchainError as e:
        logger.error(f"Error fetching escrow data: {e.message}")
        raise

    log_report_summary(report)
    log_performance(logger, "escrow report", started)

    return {
        "success": True,
        "message": (
            f"Successfully fetched escrow contract data from {settings.CHAIN_NAME}"
        ),
        "data": report.to_dict(),
        "metadata": {
            "apiVersion": settings.API_VERSION,
            "responseTime": datetime.now(timezone.utc).isoformat(),
            "blockchain": settings.BLOCKCHAIN_LABEL,
            "provider": settings.PROVIDER_LABEL,
        },
    }


# ================================================================
# Deal Lookup
# ================================================================


@router.get(
    "/deal/{deal_id}",
    status_code=status.HTTP_200_OK,
    summary="Get deal by ID",
    description="Fetch one deal via getDeal(uint256), if the contract has it",
)
async def get_deal(
    deal_id: str,
    use_case: GetDeal = Depends(get_get_deal),
):
    """
    Fetch deal details.

    Raises:
        ValidationError: 400 if deal_id is not an integer >= 0
        DealNotFoundError: 404 for an empty deal record
        DealUnavailableError: 502 if getDeal() fails
    """
    parsed_id = parse_deal_id(deal_id)
    if parsed_id is None:
        raise ValidationError("Invalid deal ID", field="dealId")

    logger.info(f"Fetching deal ID {parsed_id}")
    deal = await use_case.execute(parsed_id)
    logger.info(
        f"Deal {parsed_id}: buyer={deal.buyer} seller={deal.seller} "
        f"amount={deal.amount} status={deal.status}"
    )

    return {
        "success": True,
        "dealId": parsed_id,
        "deal": deal.to_dict(),
    }
