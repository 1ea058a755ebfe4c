"""Test configuration for pytest.

This module imports fixtures that should be available to all tests.
"""

# Import fixtures
from tests.fixtures.common import (  # noqa
    mock_api,
    http_client,
    quote_client,
    transaction_builder,
    token_registry,
    aggregator,
    sample_quote_document,
)
