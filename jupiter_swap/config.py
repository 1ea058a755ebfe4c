"""Configuration for the Jupiter swap client.

Settings are passed explicitly at construction; nothing is read from the
environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Union

from solders.pubkey import Pubkey

from jupiter_swap.constants import DEFAULT_ENDPOINT, DEFAULT_TIMEOUT
from jupiter_swap.utils.error_handling import ConfigurationError
from jupiter_swap.utils.validation import validate_url


@dataclass
class JupiterConfig:
    """Configuration for the Jupiter aggregator API."""

    endpoint: str = DEFAULT_ENDPOINT
    timeout: float = DEFAULT_TIMEOUT  # seconds
    account: Optional[Union[str, Pubkey]] = None  # default signer for swap builds

    def __post_init__(self):
        """Validate and normalise configuration after initialization."""
        if not validate_url(self.endpoint):
            raise ConfigurationError(
                f"Invalid aggregator endpoint: {self.endpoint}",
                details={"setting": "endpoint", "value": self.endpoint}
            )
        self.endpoint = self.endpoint.rstrip("/")

        if self.timeout <= 0:
            raise ConfigurationError(
                "Request timeout must be positive",
                details={"setting": "timeout", "value": self.timeout}
            )

        if self.account is not None:
            self.account = str(self.account)

    @property
    def has_account(self) -> bool:
        """Check if a default signer account is configured."""
        return bool(self.account)


@lru_cache()
def get_default_config() -> JupiterConfig:
    """Get the default configuration (public endpoint, no signer).

    Returns:
        JupiterConfig instance
    """
    return JupiterConfig()
