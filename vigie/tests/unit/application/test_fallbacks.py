"""
Unit tests for fallback combinators.

Usage:
    pytest vigie/tests/unit/application/test_fallbacks.py
"""

from unittest.mock import AsyncMock

import pytest

from vigie.application.fallbacks import (
    first_successful,
    gather_all,
    probe_or_default,
)
from vigie.domain.exceptions import BlockchainError, UnsupportedCallError


def _failing(method: str) -> AsyncMock:
    return AsyncMock(side_effect=UnsupportedCallError("0xabc", method, "reverted"))


class TestFirstSuccessful:
    """Unit tests for first_successful."""

    async def test_first_probe_wins(self):
        """Test earlier probe takes precedence and later ones are not run."""
        second = AsyncMock(return_value="second")

        result = await first_successful(
            [("a", AsyncMock(return_value="first")), ("b", second)],
            "N/A",
            field="x",
        )

        assert result == "first"
        second.assert_not_awaited()

    async def test_falls_through_to_next_probe(self):
        """Test a failing probe hands over to the next one."""
        result = await first_successful(
            [("a", _failing("a()")), ("b", AsyncMock(return_value="7"))],
            "N/A",
            field="x",
        )

        assert result == "7"

    async def test_default_when_all_fail(self):
        """Test default is returned when every probe fails."""
        result = await first_successful(
            [("a", _failing("a()")), ("b", _failing("b()"))],
            "N/A",
            field="x",
        )

        assert result == "N/A"

    async def test_programming_errors_propagate(self):
        """Test non-blockchain errors are not swallowed."""
        with pytest.raises(KeyError):
            await first_successful(
                [("a", AsyncMock(side_effect=KeyError("bug")))],
                "N/A",
                field="x",
            )


class TestProbeOrDefault:
    """Unit tests for probe_or_default."""

    async def test_returns_probe_value(self):
        """Test successful probe value is returned."""
        assert await probe_or_default(AsyncMock(return_value=1), 0, field="x") == 1

    async def test_returns_default_on_blockchain_error(self):
        """Test BlockchainError yields the default."""
        probe = AsyncMock(side_effect=BlockchainError("down"))

        assert await probe_or_default(probe, False, field="verified") is False


class TestGatherAll:
    """Unit tests for gather_all."""

    async def test_returns_results_in_order(self):
        """Test results keep argument order."""
        results = await gather_all(
            AsyncMock(return_value="Tether"),
            AsyncMock(return_value="USDT"),
            AsyncMock(return_value=6),
        )

        assert results == ["Tether", "USDT", 6]

    async def test_any_failure_fails_all(self):
        """Test one failing probe raises after all probes ran."""
        last = AsyncMock(return_value=6)

        with pytest.raises(UnsupportedCallError):
            await gather_all(
                AsyncMock(return_value="Tether"),
                _failing("symbol()"),
                last,
            )

        last.assert_awaited_once()
