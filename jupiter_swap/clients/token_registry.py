"""Token registry client.

This module fetches the published Jupiter token list, caches it for the
lifetime of the registry instance, and resolves tokens by symbol or mint.
"""

import asyncio
import functools
import json
from typing import Any, Awaitable, Callable, Dict, List, Optional, Union

import httpx
from pydantic import ValidationError
from solders.pubkey import Pubkey

from jupiter_swap.clients.base_client import BaseJupiterClient
from jupiter_swap.config import JupiterConfig
from jupiter_swap.constants import TOKEN_LIST_URL
from jupiter_swap.logging_config import get_logger
from jupiter_swap.models.api_models import ApiFailure
from jupiter_swap.models.token import TokenData, TokenListType, TokensDocument
from jupiter_swap.utils.error_handling import (
    TokenListDecodeFailed,
    TokenListRejected,
    TokenNotFoundError,
)
from jupiter_swap.utils.validation import validate_public_key

# Get logger
logger = get_logger(__name__)

# Key used for every list type when the cache is not keyed by list type
_SHARED_KEY = "first-fetched"


class TokenRegistryCache:
    """Token lists cached for the lifetime of their owner.

    Entries are written once, on the first successful fetch, and never
    refreshed or invalidated. By default a single entry serves every list
    type: whichever list was fetched first is returned for all later
    requests. With ``per_list_type`` each list type gets its own entry.

    Concurrent first requests for an entry share one in-flight fetch. A
    failed fetch leaves the entry empty so the next request retries.
    """

    def __init__(self, per_list_type: bool = False):
        self.per_list_type = per_list_type
        self._entries: Dict[Any, List[TokenData]] = {}
        self._pending: Dict[Any, asyncio.Future] = {}

    def _key(self, list_type: TokenListType) -> Any:
        return list_type if self.per_list_type else _SHARED_KEY

    @property
    def is_populated(self) -> bool:
        return bool(self._entries)

    async def get_or_fetch(
        self,
        list_type: TokenListType,
        fetch: Callable[[TokenListType], Awaitable[List[TokenData]]]
    ) -> List[TokenData]:
        """Get the cached list or fetch it, at most once at a time per entry.

        Args:
            list_type: The list being requested
            fetch: Coroutine function that downloads a list

        Returns:
            The cached (or freshly fetched) list
        """
        key = self._key(list_type)
        if key in self._entries:
            logger.debug(f"Token list cache hit for {list_type.value}")
            return self._entries[key]

        task = self._pending.get(key)
        if task is None:
            task = asyncio.ensure_future(fetch(list_type))
            task.add_done_callback(functools.partial(self._store, key))
            self._pending[key] = task

        # Shielded so a cancelled caller does not cancel the fetch other callers await
        return await asyncio.shield(task)

    def _store(self, key: Any, task: asyncio.Future) -> None:
        self._pending.pop(key, None)
        if task.cancelled() or task.exception() is not None:
            return
        self._entries.setdefault(key, task.result())


class TokenRegistry(BaseJupiterClient):
    """Client for the published token list."""

    def __init__(
        self,
        config: Optional[JupiterConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        cache_per_list_type: bool = False
    ):
        """Initialize the registry.

        Args:
            config: Aggregator configuration (only the timeout applies here)
            http_client: Optional shared HTTP client
            cache_per_list_type: Cache each list type separately instead of
                serving the first fetched list for every list type
        """
        super().__init__(config, http_client)
        self.cache = TokenRegistryCache(per_list_type=cache_per_list_type)

    async def list_tokens(self, list_type: TokenListType = TokenListType.STRICT) -> List[TokenData]:
        """Get the token list.

        The first successful fetch is cached for the lifetime of this
        instance. Unless the registry was created with
        ``cache_per_list_type=True``, later calls return that cached list
        whatever ``list_type`` they ask for.

        Args:
            list_type: Which published list to fetch

        Returns:
            Token entries in registry order

        Raises:
            TokenListRejected: If the token host answers with a non-success status
            TokenListDecodeFailed: If the body is not a token array
            httpx.TransportError: If the request could not be completed
        """
        tokens = await self.cache.get_or_fetch(TokenListType(list_type), self._fetch_tokens)
        return list(tokens)

    async def _fetch_tokens(self, list_type: TokenListType) -> List[TokenData]:
        url = f"{TOKEN_LIST_URL}/{list_type.path}"
        result = await self._get(url)
        if isinstance(result, ApiFailure):
            raise TokenListRejected(result.status_code, result.text)

        # The host publishes a bare array; wrap it into the document shape
        try:
            document = TokensDocument.model_validate({"tokens": result.json()})
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Could not decode {list_type.path} token list: {str(e)}")
            raise TokenListDecodeFailed(e, status_code=result.status_code) from e

        logger.info(f"Cached {len(document.tokens)} tokens from the {list_type.path} list")
        return document.tokens

    async def find_by_symbol(self, symbol: str) -> Optional[TokenData]:
        """Find a token by symbol, ignoring case.

        A leading ``$`` is optional on both sides: ``"BONK"`` and ``"$BONK"``
        match entries listed as either. Symbols are not unique; the first
        match in registry order wins.

        Returns:
            The matching token, or None when nothing matches. An empty
            registry also yields None; the two cases are not distinguished.
        """
        tokens = await self.list_tokens(TokenListType.ALL)
        if not tokens:
            return None

        bare = symbol[1:] if symbol.startswith("$") else symbol
        candidates = {bare.casefold(), f"${bare}".casefold()}
        return next(
            (token for token in tokens if token.symbol is not None and token.symbol.casefold() in candidates),
            None,
        )

    async def find_by_mint(self, mint: Union[str, Pubkey]) -> Optional[TokenData]:
        """Find a token by mint address, ignoring case.

        Returns:
            The matching token, or None (see ``find_by_symbol``)
        """
        tokens = await self.list_tokens(TokenListType.ALL)
        if not tokens:
            return None

        wanted = str(mint).casefold()
        return next((token for token in tokens if token.address.casefold() == wanted), None)

    async def resolve_mint(self, symbol_or_mint: Union[str, Pubkey]) -> str:
        """Resolve a symbol or mint address to the registry's mint address.

        Values shaped like a public key are looked up by mint first, then by
        symbol.

        Raises:
            TokenNotFoundError: If no registry entry matches
        """
        value = str(symbol_or_mint)
        if validate_public_key(value):
            token = await self.find_by_mint(value)
            if token is not None:
                return token.address

        token = await self.find_by_symbol(value)
        if token is None:
            raise TokenNotFoundError(value)
        return token.address
