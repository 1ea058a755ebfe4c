"""Abstract interface of a DEX aggregator client."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, Union

from solders.pubkey import Pubkey

from jupiter_swap.models.quote import SwapMode, SwapQuote
from jupiter_swap.models.swap import SwapTransaction
from jupiter_swap.models.token import TokenData, TokenListType


class DexAggregator(ABC):
    """Quote, swap-build and token lookup operations of a DEX aggregator."""

    @abstractmethod
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
        """Get the best swap route for ``amount`` of ``input_mint`` into ``output_mint``."""

    @abstractmethod
    async def swap(
        self,
        quote: SwapQuote,
        user_account: Optional[Union[str, Pubkey]] = None,
        destination_token_account: Optional[Union[str, Pubkey]] = None,
        wrap_and_unwrap_native: bool = True,
        use_shared_accounts: bool = True,
        legacy_format: bool = True
    ) -> SwapTransaction:
        """Build an unsigned transaction executing ``quote``."""

    @abstractmethod
    async def get_tokens(self, list_type: TokenListType = TokenListType.STRICT) -> List[TokenData]:
        """Get the token list."""

    @abstractmethod
    async def get_token_by_symbol(self, symbol: str) -> Optional[TokenData]:
        """Find a token by symbol."""

    @abstractmethod
    async def get_token_by_mint(self, mint: Union[str, Pubkey]) -> Optional[TokenData]:
        """Find a token by mint address."""
