"""
Unit tests for domain exceptions.

Usage:
    pytest vigie/tests/unit/domain/test_exceptions.py
"""

from vigie.domain.exceptions import (
    BlockchainError,
    ChainConfigurationError,
    ChainConnectionError,
    DealNotFoundError,
    DealUnavailableError,
    EntityNotFoundError,
    UnsupportedCallError,
    ValidationError,
    VigieException,
)


class TestExceptions:
    """Unit tests for exception codes and messages."""

    def test_base_code_defaults_to_class_name(self):
        """Test code falls back to the class name."""
        assert VigieException("boom").code == "VigieException"

    def test_validation_error_records_field(self):
        """Test field is kept in details."""
        error = ValidationError("Invalid deal ID", field="dealId")

        assert error.code == "VALIDATION_ERROR"
        assert error.details == {"field": "dealId"}

    def test_entity_not_found_message(self):
        """Test entity type and id appear in the message."""
        error = EntityNotFoundError("Item", "9")

        assert error.message == "Item with ID 9 not found"
        assert error.code == "ENTITY_NOT_FOUND"

    def test_chain_connection_error_message(self):
        """Test connection failures use the blockchain interaction prefix."""
        error = ChainConnectionError("http://node", "connection refused")

        assert error.message == "Blockchain interaction failed: connection refused"
        assert isinstance(error, BlockchainError)

    def test_configuration_error_lists_missing(self):
        """Test missing variable names are exposed."""
        error = ChainConfigurationError("not configured", missing=["RPC_URL"])

        assert error.code == "CHAIN_NOT_CONFIGURED"
        assert error.missing == ["RPC_URL"]

    def test_unsupported_call_error(self):
        """Test method and contract are recorded."""
        error = UnsupportedCallError("0xabc", "owner()", "reverted")

        assert error.method == "owner()"
        assert "owner()" in error.message

    def test_deal_unavailable_is_deal_not_found(self):
        """Test unavailable deals are a kind of not-found."""
        error = DealUnavailableError(4, "reverted")

        assert isinstance(error, DealNotFoundError)
        assert error.code == "DEAL_UNAVAILABLE"
        assert error.message == (
            "getDeal function not available or deal 4 not found"
        )
        assert DealNotFoundError(4).code == "DEAL_NOT_FOUND"
