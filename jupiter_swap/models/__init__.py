"""Data models for the Jupiter swap client."""

from jupiter_swap.models.api_models import ApiFailure, ApiResult, ApiSuccess
from jupiter_swap.models.quote import (
    Amount,
    PlatformFee,
    RoutePlanStep,
    SwapInfo,
    SwapMode,
    SwapQuote,
)
from jupiter_swap.models.swap import SwapRequest, SwapResponse, SwapTransaction
from jupiter_swap.models.token import TokenData, TokenListType, TokensDocument

__all__ = [
    'Amount',
    'ApiFailure',
    'ApiResult',
    'ApiSuccess',
    'PlatformFee',
    'RoutePlanStep',
    'SwapInfo',
    'SwapMode',
    'SwapQuote',
    'SwapRequest',
    'SwapResponse',
    'SwapTransaction',
    'TokenData',
    'TokenListType',
    'TokensDocument',
]
