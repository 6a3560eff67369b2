"""
Sequential fallback combinators for contract reads.

A read is expressed as an ordered list of (label, probe) pairs. Probes run
top to bottom; the first one that returns wins, otherwise the default is
used. Only BlockchainError is recovered here, so programming errors still
propagate.
"""

import asyncio
from typing import Awaitable, Callable, Sequence, Tuple, TypeVar

from vigie.domain.exceptions import BlockchainError
from vigie.infrastructure.monitoring import get_logger

logger = get_logger(__name__)

T = TypeVar("T")
Probe = Callable[[], Awaitable[T]]


async def first_successful(
    probes: Sequence[Tuple[str, Probe]],
    default: T,
    *,
    field: str,
) -> T:
    """
    Return the result of the first probe that succeeds.

    Args:
        probes: Ordered (label, probe) pairs; earlier pairs take precedence
        default: Value used when every probe fails
        field: Report field being filled, for logging

    Returns:
        First successful probe result, or default
    """
    for label, probe in probes:
        try:
            return await probe()
        except BlockchainError as e:
            logger.warning(f"{label} not available for {field}: {e.message}")

    logger.warning(f"{field} falling back to {default!r}")
    return default


async def probe_or_default(
    probe: Probe,
    default: T,
    *,
    field: str,
    label: str = "",
) -> T:
    """Single-probe form of first_successful."""
    return await first_successful([(label or field, probe)], default, field=field)


async def gather_all(*probes: Probe) -> list:
    """
    Run independent probes concurrently; fail if any one fails.

    Every probe is awaited to completion before the first failure is
    re-raised, so no task is left with an unretrieved exception.

    Raises:
        BlockchainError: The first failure in argument order
    """
    results = await asyncio.gather(
        *(probe() for probe in probes), return_exceptions=True
    )
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return list(results)
