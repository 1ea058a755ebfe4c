"""
Swap build models for the Jupiter swap client.

Request and response bodies of the swap endpoint, and the decoded
transaction handed to the caller.
"""

import base64
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from solders.transaction import Transaction, VersionedTransaction


class SwapRequest(BaseModel):
    """Body of the swap build request."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    quote_response: Dict[str, Any]
    user_public_key: Optional[str] = None
    destination_token_account: Optional[str] = None
    wrap_and_unwrap_sol: bool = True
    use_shared_accounts: bool = True
    as_legacy_transaction: bool = True

    def to_body(self) -> Dict[str, Any]:
        """Get the JSON body, leaving out unset optional accounts."""
        return self.model_dump(by_alias=True, exclude_none=True)


class SwapResponse(BaseModel):
    """Body of a successful swap build response."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    swap_transaction: str
    last_valid_block_height: Optional[int] = None
    prioritization_fee_lamports: Optional[int] = None


@dataclass(frozen=True)
class SwapTransaction:
    """An unsigned swap transaction, ready for the caller to sign.

    ``raw`` holds the exact bytes the aggregator produced.
    """
    raw: bytes
    transaction: Union[Transaction, VersionedTransaction]
    is_legacy: bool = True
    last_valid_block_height: Optional[int] = None
    prioritization_fee_lamports: Optional[int] = None

    @classmethod
    def from_base64(
        cls,
        payload: str,
        legacy: bool = True,
        last_valid_block_height: Optional[int] = None,
        prioritization_fee_lamports: Optional[int] = None
    ) -> "SwapTransaction":
        """Decode a base64 transaction payload.

        Args:
            payload: Base64-encoded serialized transaction
            legacy: Decode as a legacy transaction rather than a versioned one
            last_valid_block_height: Block height after which the blockhash expires
            prioritization_fee_lamports: Priority fee the aggregator added, in lamports

        Returns:
            The decoded transaction

        Raises:
            ValueError: If the payload is empty or not valid base64
            Exception: Whatever the transaction codec raises for malformed bytes
        """
        raw = base64.b64decode(payload, validate=True)
        if not raw:
            raise ValueError("Empty transaction payload")

        codec = Transaction if legacy else VersionedTransaction
        return cls(
            raw=raw,
            transaction=codec.from_bytes(raw),
            is_legacy=legacy,
            last_valid_block_height=last_valid_block_height,
            prioritization_fee_lamports=prioritization_fee_lamports,
        )

    def __bytes__(self) -> bytes:
        return self.raw

    def to_base64(self) -> str:
        """Re-encode the raw transaction bytes as base64."""
        return base64.b64encode(self.raw).decode("ascii")
