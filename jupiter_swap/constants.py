"""Constants used by the Jupiter swap client."""

# Jupiter v6 aggregator API (quote and swap endpoints live under it)
DEFAULT_ENDPOINT = "https://quote-api.jup.ag/v6"
QUOTE_PATH = "/quote"
SWAP_PATH = "/swap"

# Token registry host; not configurable
TOKEN_LIST_URL = "https://token.jup.ag"

DEFAULT_TIMEOUT = 30.0  # seconds

# Well-known mints
SOL_MINT = "So11111111111111111111111111111111111111112"
USDC_MINT = "EPjFWdd5AufqSSqeM2qN1xzybapC8G4wEGGkZwyTDt1v"
