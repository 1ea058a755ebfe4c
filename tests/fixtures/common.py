"""Common test fixtures for the Jupiter swap client tests.

This module provides a mock Jupiter API served through ``httpx.MockTransport``
and fixtures wiring the clients to it.
"""

import base64
from typing import Any, Callable, Dict, List, Optional, Tuple

import httpx
import pytest
from solders.hash import Hash
from solders.message import Message, MessageV0
from solders.pubkey import Pubkey
from solders.signature import Signature
from solders.system_program import TransferParams, transfer
from solders.transaction import Transaction, VersionedTransaction

from jupiter_swap.clients import JupiterDexAggregator, QuoteClient, TokenRegistry, TransactionBuilder
from jupiter_swap.config import JupiterConfig
from jupiter_swap.constants import SOL_MINT, USDC_MINT

USER_ACCOUNT = "9WzDXwBbmkg8ZTbNMqUxvQRAyrZzDsGYdLVL9zYtAWWM"
RECIPIENT_ACCOUNT = "4Nd1mBQtrMJVYVfKf2PJy9NZUZdTAsp7D4xWLs4gDB4T"

QUOTE_PATH = "/v6/quote"
SWAP_PATH = "/v6/swap"
STRICT_PATH = "/strict"
ALL_PATH = "/all"

WHIRLPOOL_AMM = "HJPjoWUrhoZzkNfRpHuieeFk9WcZWjwy6PBjZ81ngndJ"
RAYDIUM_AMM = "58oQChx4yWmvKdwLLZzBi4ChoCc2fqCUWBkwMihLYQo2"

SOL_TOKEN = {
    "address": SOL_MINT,
    "chainId": 101,
    "decimals": 9,
    "name": "Wrapped SOL",
    "symbol": "SOL",
    "logoURI": "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/So11111111111111111111111111111111111111112/logo.png",
    "tags": ["old-registry"],
    "extensions": {"coingeckoId": "wrapped-solana"},
}

USDC_TOKEN = {
    "address": USDC_MINT,
    "chainId": 101,
    "decimals": 6,
    "name": "USD Coin",
    "symbol": "USDC",
    "logoURI": "https://raw.githubusercontent.com/solana-labs/token-list/main/assets/mainnet/EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v/logo.png",
    "tags": ["old-registry", "solana-fm"],
    "extensions": {"coingeckoId": "usd-coin"},
}

# Same ticker, "$"-prefixed and lower-cased, listed ahead of the real USDC
DOLLAR_USDC_TOKEN = {
    "address": "7kbnvuGBxxj8AG9qp8Scn56muWGaRaFqxg1FsRp3PaFT",
    "decimals": 6,
    "name": "Dollar USDC",
    "symbol": "$usdc",
    "tags": [],
}

BONK_TOKEN = {
    "address": "DezXAZ8z7PnrnRJjz3wXBoRgixCa6xjnB7YaB1pPB263",
    "decimals": 5,
    "name": "Bonk",
    "symbol": "$BONK",
    "logoURI": "https://arweave.net/hQiPZOsRZXGXBJd_82PhVdlM_hACsT_q6wqwf5cSY7I",
    "tags": ["community"],
}

STRICT_TOKENS = [SOL_TOKEN, USDC_TOKEN]
ALL_TOKENS = [SOL_TOKEN, DOLLAR_USDC_TOKEN, USDC_TOKEN, BONK_TOKEN]


def build_quote_document(
    input_mint: str = SOL_MINT,
    output_mint: str = USDC_MINT,
    amount: str = "1000000000",
    swap_mode: str = "ExactIn",
    slippage_bps: int = 50
) -> Dict[str, Any]:
    """Build a quote response in the aggregator's wire format."""
    return {
        "inputMint": input_mint,
        "inAmount": amount,
        "outputMint": output_mint,
        "outAmount": "171234567",
        "otherAmountThreshold": "170378394",
        "swapMode": swap_mode,
        "slippageBps": slippage_bps,
        "platformFee": None,
        "priceImpactPct": "0.0001",
        "routePlan": [
            {
                "swapInfo": {
                    "ammKey": WHIRLPOOL_AMM,
                    "label": "Whirlpool",
                    "inputMint": input_mint,
                    "outputMint": output_mint,
                    "inAmount": "600000000",
                    "outAmount": "102740740",
                    "feeAmount": "180000",
                    "feeMint": input_mint,
                },
                "percent": 60,
            },
            {
                "swapInfo": {
                    "ammKey": RAYDIUM_AMM,
                    "label": "Raydium",
                    "inputMint": input_mint,
                    "outputMint": output_mint,
                    "inAmount": "400000000",
                    "outAmount": "68493827",
                    "feeAmount": "1000000",
                    "feeMint": input_mint,
                },
                "percent": 40,
            },
        ],
        "contextSlot": 245123456,
        "timeTaken": 0.0123,
    }


def build_canned_transaction(legacy: bool = True) -> bytes:
    """Serialize an unsigned SOL transfer paid by USER_ACCOUNT."""
    payer = Pubkey.from_string(USER_ACCOUNT)
    instruction = transfer(
        TransferParams(from_pubkey=payer, to_pubkey=Pubkey.from_string(RECIPIENT_ACCOUNT), lamports=5000)
    )
    if legacy:
        message = Message.new_with_blockhash([instruction], payer, Hash.default())
        return bytes(Transaction.new_unsigned(message))

    message = MessageV0.try_compile(payer, [instruction], [], Hash.default())
    return bytes(VersionedTransaction.populate(message, [Signature.default()]))


CANNED_TRANSACTION = build_canned_transaction()
CANNED_TRANSACTION_B64 = base64.b64encode(CANNED_TRANSACTION).decode("ascii")


class MockJupiterApi:
    """Canned Jupiter endpoints served through an ``httpx.MockTransport``.

    Every request is recorded so tests can count round-trips per path.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        payload: Any = None,
        text: Optional[str] = None,
        handler: Optional[Callable[[httpx.Request], httpx.Response]] = None
    ) -> None:
        """Register (or replace) the response for ``method path``."""
        if handler is None:
            def handler(request: httpx.Request) -> httpx.Response:
                if text is not None:
                    return httpx.Response(status_code, text=text)
                return httpx.Response(status_code, json=payload)

        self.routes[(method, path)] = handler

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"error": f"No route for {request.url.path}"})
        return handler(request)

    def calls(self, path: str) -> List[httpx.Request]:
        """Requests received for ``path``."""
        return [request for request in self.requests if request.url.path == path]

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self))


def echo_quote(request: httpx.Request) -> httpx.Response:
    """Quote route answering for whatever pair and amount were requested."""
    params = request.url.params
    document = build_quote_document(
        input_mint=params["inputMint"],
        output_mint=params["outputMint"],
        amount=params["amount"],
        swap_mode=params.get("swapMode", "ExactIn"),
        slippage_bps=int(params.get("slippageBps", "50")),
    )
    return httpx.Response(200, json=document)


@pytest.fixture
def mock_api():
    """Create a mock Jupiter API with healthy default routes."""
    api = MockJupiterApi()
    api.add("GET", QUOTE_PATH, handler=echo_quote)
    api.add("POST", SWAP_PATH, payload={
        "swapTransaction": CANNED_TRANSACTION_B64,
        "lastValidBlockHeight": 279000000,
        "prioritizationFeeLamports": 0,
    })
    api.add("GET", STRICT_PATH, payload=STRICT_TOKENS)
    api.add("GET", ALL_PATH, payload=ALL_TOKENS)
    return api


@pytest.fixture
def http_client(mock_api):
    """Create an HTTP client backed by the mock API."""
    return mock_api.client()


@pytest.fixture
def quote_client(http_client):
    """Create a QuoteClient talking to the mock API."""
    return QuoteClient(http_client=http_client)


@pytest.fixture
def transaction_builder(http_client):
    """Create a TransactionBuilder with a configured signer."""
    return TransactionBuilder(JupiterConfig(account=USER_ACCOUNT), http_client=http_client)


@pytest.fixture
def token_registry(http_client):
    """Create a TokenRegistry talking to the mock API."""
    return TokenRegistry(http_client=http_client)


@pytest.fixture
def aggregator(http_client):
    """Create a JupiterDexAggregator with a signer, talking to the mock API."""
    return JupiterDexAggregator(account=USER_ACCOUNT, http_client=http_client)


@pytest.fixture
def sample_quote_document():
    """Sample quote response for model tests."""
    return build_quote_document()
