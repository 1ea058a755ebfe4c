"""Jupiter aggregator client modules.

This package provides the quote, swap-build and token registry clients and
the facade composing them.
"""

from jupiter_swap.clients.aggregator import DexAggregator
from jupiter_swap.clients.base_client import BaseJupiterClient
from jupiter_swap.clients.jupiter_client import JupiterDexAggregator, get_jupiter_client
from jupiter_swap.clients.quote_client import QuoteClient, build_quote_params
from jupiter_swap.clients.token_registry import TokenRegistry, TokenRegistryCache
from jupiter_swap.clients.transaction_builder import TransactionBuilder

__all__ = [
    'BaseJupiterClient',
    'DexAggregator',
    'JupiterDexAggregator',
    'QuoteClient',
    'TokenRegistry',
    'TokenRegistryCache',
    'TransactionBuilder',
    'build_quote_params',
    'get_jupiter_client',
]
