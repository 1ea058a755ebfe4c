"""Jupiter Swap Client Package.

This package retrieves swap quotes from the Jupiter DEX aggregator, turns
them into unsigned Solana transactions, and resolves tokens against the
published Jupiter token list.
"""

import logging

from jupiter_swap.__version__ import __version__
from jupiter_swap.clients import (
    DexAggregator,
    JupiterDexAggregator,
    QuoteClient,
    TokenRegistry,
    TransactionBuilder,
    get_jupiter_client,
)
from jupiter_swap.config import JupiterConfig
from jupiter_swap.models import (
    RoutePlanStep,
    SwapInfo,
    SwapMode,
    SwapQuote,
    SwapTransaction,
    TokenData,
    TokenListType,
)
from jupiter_swap.utils.error_handling import (
    DecodeFailure,
    JupiterError,
    NetworkFailure,
    NotFound,
    QuoteRequestFailed,
    RequestRejected,
    SwapBuildFailed,
    TokenNotFoundError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    '__version__',
    'DecodeFailure',
    'DexAggregator',
    'JupiterConfig',
    'JupiterDexAggregator',
    'JupiterError',
    'NetworkFailure',
    'NotFound',
    'QuoteClient',
    'QuoteRequestFailed',
    'RequestRejected',
    'RoutePlanStep',
    'SwapBuildFailed',
    'SwapInfo',
    'SwapMode',
    'SwapQuote',
    'SwapTransaction',
    'TokenData',
    'TokenListType',
    'TokenNotFoundError',
    'TokenRegistry',
    'TransactionBuilder',
    'get_jupiter_client',
]
