"""Swap transaction building against the Jupiter aggregator.

This module turns a ``SwapQuote`` into an unsigned ``SwapTransaction``.
"""

import json
from typing import Optional, Union

from pydantic import ValidationError
from solders.pubkey import Pubkey

from jupiter_swap.clients.base_client import BaseJupiterClient
from jupiter_swap.constants import SWAP_PATH
from jupiter_swap.logging_config import get_logger, log_with_context
from jupiter_swap.models.api_models import ApiFailure
from jupiter_swap.models.quote import SwapQuote
from jupiter_swap.models.swap import SwapRequest, SwapResponse, SwapTransaction
from jupiter_swap.utils.error_handling import SwapDecodeFailed, SwapRejected

# Get logger
logger = get_logger(__name__)


class TransactionBuilder(BaseJupiterClient):
    """Client for building swap transactions from quotes."""

    async def build_swap_transaction(
        self,
        quote: SwapQuote,
        user_account: Optional[Union[str, Pubkey]] = None,
        destination_token_account: Optional[Union[str, Pubkey]] = None,
        wrap_and_unwrap_native: bool = True,
        use_shared_accounts: bool = True,
        legacy_format: bool = True
    ) -> SwapTransaction:
        """Build an unsigned swap transaction for a quote.

        The quote is sent back exactly as the aggregator produced it. Calling
        this twice with the same quote may yield two different transactions.

        Args:
            quote: Quote obtained from the quote endpoint
            user_account: Signer of the swap. Defaults to the configured account;
                when neither is set the request is sent without one.
            destination_token_account: Token account that receives the output
            wrap_and_unwrap_native: Wrap/unwrap SOL around the swap
            use_shared_accounts: Use the aggregator's shared intermediate accounts
            legacy_format: Request (and decode) a legacy transaction

        Returns:
            The decoded, unsigned transaction

        Raises:
            SwapRejected: If the aggregator answers with a non-success status
            SwapDecodeFailed: If the transaction payload is missing or undecodable
            httpx.TransportError: If the request could not be completed
        """
        if user_account is None:
            user_account = self.config.account

        request = SwapRequest(
            quote_response=quote.to_wire(),
            user_public_key=str(user_account) if user_account is not None else None,
            destination_token_account=(
                str(destination_token_account) if destination_token_account is not None else None
            ),
            wrap_and_unwrap_sol=wrap_and_unwrap_native,
            use_shared_accounts=use_shared_accounts,
            as_legacy_transaction=legacy_format,
        )

        result = await self._post(self._url(SWAP_PATH), request.to_body())
        if isinstance(result, ApiFailure):
            raise SwapRejected(result.status_code, result.text)

        try:
            response = SwapResponse.model_validate(result.json())
        except (json.JSONDecodeError, ValidationError) as e:
            raise SwapDecodeFailed(e, status_code=result.status_code) from e

        try:
            transaction = SwapTransaction.from_base64(
                response.swap_transaction,
                legacy=legacy_format,
                last_valid_block_height=response.last_valid_block_height,
                prioritization_fee_lamports=response.prioritization_fee_lamports,
            )
        except Exception as e:
            # The transaction codec raises its own error types for malformed bytes
            logger.warning(f"Could not decode swap transaction payload: {str(e)}")
            raise SwapDecodeFailed(e, status_code=result.status_code) from e

        log_with_context(
            logger,
            "debug",
            "Swap transaction built",
            size=len(transaction.raw),
            legacy=legacy_format,
            last_valid_block_height=transaction.last_valid_block_height
        )
        return transaction
