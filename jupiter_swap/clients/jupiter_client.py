"""Facade client for the Jupiter aggregator.

This module provides a unified client composing the quote, transaction
building and token registry clients over one shared HTTP connection pool.
"""

from contextlib import asynccontextmanager
from dataclasses import replace
from typing import List, Optional, Sequence, Union

import httpx
from solders.pubkey import Pubkey

from jupiter_swap.clients.aggregator import DexAggregator
from jupiter_swap.clients.base_client import BaseJupiterClient
from jupiter_swap.clients.quote_client import QuoteClient
from jupiter_swap.clients.token_registry import TokenRegistry
from jupiter_swap.clients.transaction_builder import TransactionBuilder
from jupiter_swap.config import JupiterConfig
from jupiter_swap.logging_config import get_logger
from jupiter_swap.models.quote import SwapMode, SwapQuote
from jupiter_swap.models.swap import SwapTransaction
from jupiter_swap.models.token import TokenData, TokenListType

# Get logger
logger = get_logger(__name__)


class JupiterDexAggregator(BaseJupiterClient, DexAggregator):
    """Jupiter implementation of ``DexAggregator``.

    The specialised clients are available as ``quotes``, ``builder`` and
    ``tokens`` for callers that need their full surface.
    """

    def __init__(
        self,
        account: Optional[Union[str, Pubkey]] = None,
        config: Optional[JupiterConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        cache_per_list_type: bool = False
    ):
        """Initialize the aggregator client.

        Args:
            account: Default signer for swap builds; overrides ``config.account``
            config: Aggregator configuration. Defaults to the public endpoint.
            http_client: Optional HTTP client to share. Not closed by this instance.
            cache_per_list_type: See ``TokenRegistry``
        """
        super().__init__(config, http_client)
        if account is not None:
            self.config = replace(self.config, account=account)

        shared = self._get_http_client()
        self.quotes = QuoteClient(self.config, http_client=shared)
        self.builder = TransactionBuilder(self.config, http_client=shared)
        self.tokens = TokenRegistry(self.config, http_client=shared, cache_per_list_type=cache_per_list_type)

        logger.debug(f"Jupiter aggregator client ready for {self.config.endpoint}")

    def _share_http_client(self) -> None:
        """Point the specialised clients at this instance's HTTP client, reopening it if closed."""
        shared = self._get_http_client()
        for client in (self.quotes, self.builder, self.tokens):
            if client._http_client is None:
                client._http_client = shared

    async def close(self):
        """Close the HTTP client if this instance created it.

        The aggregator stays usable: the next call opens a new client and
        the token registry keeps its cache.
        """
        owned = self._http_client is not None and self._owns_http_client
        # Specialised clients used directly after a close may have opened their own
        for client in (self.quotes, self.builder, self.tokens):
            await client.close()
        await super().close()
        if owned:
            for client in (self.quotes, self.builder, self.tokens):
                client._http_client = None

    async def get_swap_quote(
        self,
        input_mint: Union[str, Pubkey],
        output_mint: Union[str, Pubkey],
        amount: int,
        swap_mode: SwapMode = SwapMode.EXACT_IN,
        slippage_bps: Optional[int] = None,
        exclude_dexes: Optional[Sequence[str]] = None,
        only_direct_routes: bool = False,
        platform_fee_bps: Optional[int] = None,
        max_accounts: Optional[int] = None
    ) -> SwapQuote:
        self._share_http_client()
        return await self.quotes.get_quote(
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

    async def swap(
        self,
        quote: SwapQuote,
        user_account: Optional[Union[str, Pubkey]] = None,
        destination_token_account: Optional[Union[str, Pubkey]] = None,
        wrap_and_unwrap_native: bool = True,
        use_shared_accounts: bool = True,
        legacy_format: bool = True
    ) -> SwapTransaction:
        self._share_http_client()
        return await self.builder.build_swap_transaction(
            quote,
            user_account=user_account,
            destination_token_account=destination_token_account,
            wrap_and_unwrap_native=wrap_and_unwrap_native,
            use_shared_accounts=use_shared_accounts,
            legacy_format=legacy_format,
        )

    async def get_tokens(self, list_type: TokenListType = TokenListType.STRICT) -> List[TokenData]:
        self._share_http_client()
        return await self.tokens.list_tokens(list_type)

    async def get_token_by_symbol(self, symbol: str) -> Optional[TokenData]:
        self._share_http_client()
        return await self.tokens.find_by_symbol(symbol)

    async def get_token_by_mint(self, mint: Union[str, Pubkey]) -> Optional[TokenData]:
        self._share_http_client()
        return await self.tokens.find_by_mint(mint)


@asynccontextmanager
async def get_jupiter_client(
    account: Optional[Union[str, Pubkey]] = None,
    config: Optional[JupiterConfig] = None
):
    """Get a Jupiter aggregator client as an async context manager.

    Yields:
        JupiterDexAggregator: An initialized client.
    """
    client = JupiterDexAggregator(account=account, config=config)
    try:
        yield client
    finally:
        await client.close()
