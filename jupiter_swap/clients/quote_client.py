"""Quote operations against the Jupiter aggregator.

This module builds the quote request and decodes the response into a
``SwapQuote``.
"""

import json
from typing import Dict, Optional, Sequence, Union

from pydantic import ValidationError
from solders.pubkey import Pubkey

from jupiter_swap.clients.base_client import BaseJupiterClient
from jupiter_swap.constants import QUOTE_PATH
from jupiter_swap.logging_config import get_logger, log_with_context
from jupiter_swap.models.api_models import ApiFailure
from jupiter_swap.models.quote import SwapMode, SwapQuote
from jupiter_swap.utils.error_handling import QuoteDecodeFailed, QuoteRejected

# Get logger
logger = get_logger(__name__)

MintLike = Union[str, Pubkey]


def build_quote_params(
    input_mint: MintLike,
    output_mint: MintLike,
    amount: int,
    swap_mode: SwapMode = SwapMode.EXACT_IN,
    slippage_bps: Optional[int] = None,
    exclude_dexes: Optional[Sequence[str]] = None,
    only_direct_routes: bool = False,
    platform_fee_bps: Optional[int] = None,
    max_accounts: Optional[int] = None
) -> Dict[str, str]:
    """Build the query parameters of a quote request.

    Optional parameters are left out when not provided so the aggregator
    applies its own defaults. The legacy transaction format is always requested.

    Raises:
        ValueError: If the amount is negative
    """
    if amount < 0:
        raise ValueError(f"Amount must be non-negative, got {amount}")

    params = {
        "inputMint": str(input_mint),
        "outputMint": str(output_mint),
        "amount": str(amount),
        "swapMode": SwapMode(swap_mode).value,
        "asLegacyTransaction": "true",
    }

    if slippage_bps is not None:
        params["slippageBps"] = str(slippage_bps)
    if exclude_dexes:
        params["excludeDexes"] = ",".join(exclude_dexes)
    if only_direct_routes:
        params["onlyDirectRoutes"] = "true"
    if platform_fee_bps is not None:
        params["platformFeeBps"] = str(platform_fee_bps)
    if max_accounts is not None:
        params["maxAccounts"] = str(max_accounts)

    return params


class QuoteClient(BaseJupiterClient):
    """Client for swap quotes."""

    async def get_quote(
        self,
        input_mint: MintLike,
        output_mint: MintLike,
        amount: int,
        swap_mode: SwapMode = SwapMode.EXACT_IN,
        slippage_bps: Optional[int] = None,
        exclude_dexes: Optional[Sequence[str]] = None,
        only_direct_routes: bool = False,
        platform_fee_bps: Optional[int] = None,
        max_accounts: Optional[int] = None
    ) -> SwapQuote:
        """Get the best swap route for a pair of tokens.

        Every call is a fresh round-trip; quotes are never cached.

        Args:
            input_mint: Mint of the token to sell
            output_mint: Mint of the token to buy
            amount: Amount in the smallest unit of the input token (or of the
                output token for ExactOut)
            swap_mode: Whether ``amount`` is the exact input or the exact output
            slippage_bps: Slippage tolerance in basis points
            exclude_dexes: Venue labels the route must avoid
            only_direct_routes: Restrict to single-hop routes
            platform_fee_bps: Platform fee in basis points
            max_accounts: Upper bound on accounts used by the route

        Returns:
            The decoded quote

        Raises:
            ValueError: If the amount is negative
            QuoteRejected: If the aggregator answers with a non-success status
            QuoteDecodeFailed: If the response body is not a quote
            httpx.TransportError: If the request could not be completed
        """
        params = build_quote_params(
            input_mint,
            output_mint,
            amount,
            swap_mode=swap_mode,
            slippage_bps=slippage_bps,
            exclude_dexes=exclude_dexes,
            only_direct_routes=only_direct_routes,
            platform_fee_bps=platform_fee_bps,
            max_accounts=max_accounts,
        )

        result = await self._get(self._url(QUOTE_PATH), params=params)
        if isinstance(result, ApiFailure):
            raise QuoteRejected(result.status_code, result.text)

        try:
            quote = SwapQuote.from_wire(result.json())
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Could not decode quote response: {str(e)}")
            raise QuoteDecodeFailed(e, status_code=result.status_code) from e

        log_with_context(
            logger,
            "debug",
            "Quote received",
            input_mint=quote.input_mint,
            output_mint=quote.output_mint,
            in_amount=quote.in_amount,
            out_amount=quote.out_amount,
            venues=quote.venues
        )
        return quote
