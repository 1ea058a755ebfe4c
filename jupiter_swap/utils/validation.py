"""Validation utilities for the Jupiter swap client.

This module provides utilities for recognising Solana-specific identifiers.
"""

import re
from typing import Any

# Solana public key validation pattern (base58 format)
PUBKEY_PATTERN = re.compile(r"^[1-9A-HJ-NP-Za-km-z]{32,44}$")

# Loose URL check for configured endpoints
URL_PATTERN = re.compile(
    r'^(https?):\/\/'  # http:// or https://
    r'(?:(?:[A-Z0-9](?:[A-Z0-9-]{0,61}[A-Z0-9])?\.)+(?:[A-Z]{2,6}\.?|[A-Z0-9-]{2,}\.?)|'  # domain
    r'localhost|'  # localhost
    r'\d{1,3}\.\d{1,3}\.\d{1,3}\.\d{1,3})'  # or IPv4
    r'(?::\d+)?'  # optional port
    r'(?:/?|[/?]\S+)$', re.IGNORECASE)


def validate_public_key(pubkey: Any) -> bool:
    """Check whether a value looks like a base58 Solana public key.

    Args:
        pubkey: The value to check

    Returns:
        True if the value is a string in public key format, False otherwise
    """
    if not pubkey or not isinstance(pubkey, str):
        return False
    return bool(PUBKEY_PATTERN.match(pubkey))


def validate_url(url: Any) -> bool:
    """Check whether a value is an http(s) URL."""
    if not url or not isinstance(url, str):
        return False
    return bool(URL_PATTERN.match(url))
