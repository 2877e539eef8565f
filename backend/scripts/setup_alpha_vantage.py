#!/usr/bin/env python3
"""Alpha Vantage setup script.

This script verifies an Alpha Vantage API key with a live quote and
offers to store it in the OS keychain.

Usage:
    1. Get a free key at https://www.alphavantage.co/support/#api-key
    2. Run this script and paste the key when prompted
    3. Store it in the keychain, or add ALPHA_VANTAGE_API_KEY to your .env file
"""

import asyncio
import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from integrations.alpha_vantage_client import AlphaVantageClient
from integrations.exceptions import ProviderError
from integrations.market_data_protocol import ProviderQuote

TEST_SYMBOL = "IBM"


async def verify_api_key(api_key: str, symbol: str = TEST_SYMBOL) -> ProviderQuote:
    """Fetch one quote with the given key. Raises ProviderError on failure."""
    client = AlphaVantageClient(api_key=api_key)
    try:
        return await client.get_quote(symbol)
    finally:
        await client.aclose()


def _offer_keychain_store(credentials: dict[str, str]) -> None:
    """Prompt the user to store credentials in the OS keychain."""
    try:
        from services.credential_manager import set_credential
    except ImportError:
        return

    answer = input("\nStore this key in the keychain? [Y/n] ").strip().lower()
    if answer in ("", "y", "yes"):
        for key, value in credentials.items():
            if set_credential(key, value):
                print(f"  Stored {key} in keychain")
            else:
                print(f"  Failed to store {key}")
    else:
        print("  Skipped keychain storage.")


def main():
    """Verify an API key and optionally store it."""
    print("Alpha Vantage Setup")
    print("=" * 50)
    print()

    api_key = input("Paste your Alpha Vantage API key: ").strip()

    if not api_key:
        print("Error: No API key provided")
        sys.exit(1)

    print()
    print(f"Fetching a test quote for {TEST_SYMBOL}...")

    try:
        quote = asyncio.run(verify_api_key(api_key))
    except ProviderError as e:
        print(f"Error: {e}")
        print()
        print("Common issues:")
        print("  - The key is invalid or was mistyped")
        print("  - The free-tier daily request quota is exhausted")
        print("  - Network connectivity issues")
        sys.exit(1)

    print(f"Success! {quote.symbol} last traded at {quote.price} ({quote.change_percent}%)")
    print()
    print("To use an env file instead, add:")
    print(f"ALPHA_VANTAGE_API_KEY={api_key}")
    _offer_keychain_store({"ALPHA_VANTAGE_API_KEY": api_key})


if __name__ == "__main__":
    main()
