"""
Tests for configuration, errors and logging helpers.
"""

import logging

import pytest
from solders.pubkey import Pubkey

from jupiter_swap.config import JupiterConfig, get_default_config
from jupiter_swap.constants import DEFAULT_ENDPOINT
from jupiter_swap.logging_config import get_logger, log_with_context
from jupiter_swap.utils.error_handling import (
    ConfigurationError,
    ErrorCode,
    JupiterError,
    QuoteRejected,
    RequestRejected,
    SwapDecodeFailed,
    TokenNotFoundError,
)
from jupiter_swap.utils.validation import validate_public_key, validate_url


def test_default_config():
    """Test the default configuration."""
    config = get_default_config()

    assert config.endpoint == DEFAULT_ENDPOINT
    assert config.timeout > 0
    assert config.account is None
    assert not config.has_account
    assert get_default_config() is config


def test_config_normalises_values():
    """Test that the endpoint loses its trailing slash and accounts become strings."""
    account = Pubkey.from_string("9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM")
    config = JupiterConfig(endpoint="http://localhost:8080/v6/", account=account)

    assert config.endpoint == "http://localhost:8080/v6"
    assert config.account == "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
    assert config.has_account


@pytest.mark.parametrize("kwargs", [
    {"endpoint": "quote-api.jup.ag/v6"},
    {"endpoint": ""},
    {"timeout": 0},
    {"timeout": -1.5},
])
def test_config_rejects_invalid_settings(kwargs):
    """Test that invalid settings raise ConfigurationError."""
    with pytest.raises(ConfigurationError) as exc_info:
        JupiterConfig(**kwargs)

    assert exc_info.value.error_code is ErrorCode.CONFIGURATION_ERROR


def test_error_formatting():
    """Test the formatted message and details of errors."""
    error = QuoteRejected(500, "boom")

    assert isinstance(error, RequestRejected)
    assert isinstance(error, JupiterError)
    assert error.error_code is ErrorCode.REQUEST_REJECTED
    assert error.details == {"status_code": 500}
    assert str(error).startswith("[REQUEST_REJECTED] Quote request failed with status code: 500")


def test_decode_error_keeps_cause():
    """Test that decode errors carry the original error and status code."""
    cause = ValueError("bad base64")
    error = SwapDecodeFailed(cause, status_code=200)

    assert error.original_error is cause
    assert error.status_code == 200
    assert error.error_code is ErrorCode.DECODE_ERROR
    assert error.details["original_error"] == "bad base64"


def test_not_found_error():
    """Test the not-found error."""
    error = TokenNotFoundError("WIF")

    assert error.error_code is ErrorCode.NOT_FOUND
    assert "WIF" in str(error)


def test_validation_helpers():
    """Test public key and URL recognition."""
    assert validate_public_key("So11111111111111111111111111111111111111112")
    assert not validate_public_key("USDC")
    assert not validate_public_key(None)
    assert validate_url("https://quote-api.jup.ag/v6")
    assert not validate_url("ftp://example.com")


def test_log_with_context(caplog):
    """Test that context is appended to the message and attached to the record."""
    logger = get_logger("jupiter_swap.tests")

    with caplog.at_level(logging.DEBUG, logger="jupiter_swap.tests"):
        log_with_context(logger, "info", "Quote received", in_amount=5)

    record = caplog.records[-1]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "Quote received [in_amount=5]"
    assert record.context == {"in_amount": 5}
