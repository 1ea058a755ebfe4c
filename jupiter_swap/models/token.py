"""
Token registry models for the Jupiter swap client.

This module defines Pydantic models for entries of the published token list.
"""

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TokenListType(str, Enum):
    """Which published token list to fetch."""
    STRICT = "Strict"  # curated / verified tokens
    ALL = "All"  # unfiltered

    @property
    def path(self) -> str:
        """URL path segment of the list on the token host."""
        return self.value.lower()


class TokenData(BaseModel):
    """
    Model for a token registry entry.

    The mint address is the only unique key; symbols may repeat.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    address: str
    symbol: Optional[str] = None
    name: Optional[str] = None
    decimals: int = 0
    logo_uri: Optional[str] = Field(default=None, alias="logoURI")
    tags: List[str] = Field(default_factory=list)
    extensions: Optional[Dict[str, Any]] = None

    @property
    def mint(self) -> str:
        """The token's mint address."""
        return self.address

    @property
    def display_name(self) -> str:
        """Get a display name for the token."""
        if self.name:
            return self.name
        if self.symbol:
            return self.symbol
        return f"Unknown Token ({self.address[:8]}...)"


class TokensDocument(BaseModel):
    """Token list wrapped as ``{"tokens": [...]}`` for decoding."""
    tokens: List[TokenData]

    model_config = {
        "json_schema_extra": {
            "example": {
                "tokens": [
                    {
                        "address": "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v",
                        "name": "USD Coin",
                        "symbol": "USDC",
                        "decimals": 6,
                        "logoURI": "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v/logo.png",
                        "tags": ["old-registry"]
                    }
                ]
            }
        }
    }
