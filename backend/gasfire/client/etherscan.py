"""Etherscan-family transaction history client.

Sums ``gasUsed`` over an address's transactions to produce the usage counter
the renderer turns into a palette tier.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import requests

logger = logging.getLogger(__name__)

_NETWORK_HOSTS = {
    "mainnet": "api.etherscan.io",
    "arbitrum": "api.arbiscan.io",
    "basechain": "api.basescan.org",
}

_NO_TRANSACTIONS = "No transactions found"

DEFAULT_TIMEOUT_SECONDS = 10.0


class EtherscanError(Exception):
    """History API call failed or returned an error payload."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        url: str = "",
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.url = url
        self.body = body


@dataclass(frozen=True)
class TokenActivity:
    sender_address: str
    gas_used: int


def etherscan_host(network: str) -> str:
    return _NETWORK_HOSTS.get(network, f"api-{network}.etherscan.io")


def _parse_json_response(resp: requests.Response) -> dict[str, Any]:
    try:
        return resp.json()
    except json.JSONDecodeError as e:
        raise EtherscanError(
            f"Invalid JSON response: {e}",
            status_code=resp.status_code,
            url=resp.url or "",
            body=resp.text[:500] if resp.text else None,
        ) from e


def fetch_transactions(
    address: str,
    network: str = "mainnet",
    api_key: str = "",
    start_block: str = "0",
    end_block: str = "latest",
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> list[dict[str, Any]]:
    """Return the address's normal transactions, newest first."""
    url = f"https://{etherscan_host(network)}/api"
    params = {
        "module": "account",
        "action": "txlist",
        "address": address,
        "startblock": start_block,
        "endblock": end_block,
        "sort": "desc",
        "apikey": api_key,
    }

    try:
        resp = requests.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        logger.error("Error fetching %s transactions for %s: %s", network, address, e)
        raise EtherscanError(f"{network}scan request failed: {e}", url=url) from e

    payload = _parse_json_response(resp)
    if payload.get("status") == "0" and payload.get("message") == _NO_TRANSACTIONS:
        logger.info("No %s transactions for %s", network, address)
        return []

    if payload.get("message") != "OK":
        logger.error("%sscan API error for %s: %s", network, address, payload)
        raise EtherscanError(
            f"{network}scan API failed: {json.dumps(payload)[:500]}",
            status_code=resp.status_code,
            url=url,
            body=resp.text[:500] if resp.text else None,
        )

    return list(payload.get("result") or [])


def get_token_activity(
    address: str,
    network: str = "mainnet",
    api_key: str = "",
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
) -> TokenActivity:
    transactions = fetch_transactions(address, network=network, api_key=api_key, timeout=timeout)
    gas_used = sum(int(tx["gasUsed"]) for tx in transactions)
    return TokenActivity(sender_address=address, gas_used=gas_used)
