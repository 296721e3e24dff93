"""
app/connectors/crypto.py

CoinGecko simple price endpoint (no API key).
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from app.connectors.base import FetchClient
from app.connectors.fields import optional_number
from app.domain.api_result import ApiResult, map_success

SIMPLE_PRICE_URL = "https://api.coingecko.com/api/v3/simple/price"


def fetch_crypto_prices(
    client: FetchClient,
    *,
    coins: Sequence[str] = ("bitcoin", "ethereum", "cardano"),
) -> ApiResult:
    """
    USD price, market cap, 24h volume and 24h change per coin.
    """

    coin_ids = [coin.strip().lower() for coin in coins if coin and coin.strip()]
    if not coin_ids:
        raise ValueError("coins must contain at least one coin id.")

    result = client.fetch(
        SIMPLE_PRICE_URL,
        "CoinGecko Crypto Prices",
        params={
            "ids": ",".join(coin_ids),
            "vs_currencies": "usd",
            "include_market_cap": "true",
            "include_24hr_vol": "true",
            "include_24hr_change": "true",
        },
    )

    def reshape(payload: Any) -> dict[str, dict[str, Any]]:
        prices = payload if isinstance(payload, dict) else {}
        return {
            coin: {
                "price": optional_number(prices, coin, "usd"),
                "market_cap": optional_number(prices, coin, "usd_market_cap"),
                "volume_24h": optional_number(prices, coin, "usd_24h_vol"),
                "change_24h": optional_number(prices, coin, "usd_24h_change"),
            }
            for coin in coin_ids
            if coin in prices
        }

    return map_success(result, reshape)
