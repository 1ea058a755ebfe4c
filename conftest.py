"""
Root-level conftest for pytest configuration
"""
from jupiter_swap.logging_config import configure_logging


def pytest_configure(config):
    """Configure pytest"""
    # Log everything the clients emit; pytest captures it per test
    configure_logging("DEBUG")
