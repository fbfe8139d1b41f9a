"""
Shared fakes for the BoostHunter tests
"""
import os
import sys
from typing import Any, Dict, List, Optional

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from models import EnrichedTokenRecord, PersistedBoostState, RawBoost
from token_store import StoreError

BOOSTS_URL = "https://api.dexscreener.com/token-boosts/latest/v1"
TOKEN_URL = "https://api.dexscreener.com/latest/dex/tokens/"
RUGCHECK_URL = "https://api.rugcheck.xyz/v1/tokens"


class FakeClient:
    """EndpointClient stand-in serving canned bodies by URL."""

    def __init__(self, responses: Optional[Dict[str, Any]] = None):
        self.responses = responses or {}
        self.calls: List[str] = []

    async def fetch(self, url: str):
        self.calls.append(url)
        return self.responses.get(url)

    def calls_to(self, prefix: str) -> List[str]:
        return [url for url in self.calls if url.startswith(prefix)]


class FakeStore:
    def __init__(self, fail_upserts: bool = False, fail_lookups: bool = False):
        self.records: Dict[str, EnrichedTokenRecord] = {}
        self.upserts: List[EnrichedTokenRecord] = []
        self.fail_upserts = fail_upserts
        self.fail_lookups = fail_lookups

    async def get(self, token_address: str):
        if self.fail_lookups:
            raise StoreError("database is locked")
        record = self.records.get(token_address)
        if record is None:
            return None
        return PersistedBoostState(token_address=token_address, amount_total=record.total_amount)

    async def upsert(self, record: EnrichedTokenRecord) -> bool:
        if self.fail_upserts:
            return False
        self.upserts.append(record)
        self.records[record.token_address] = record
        return True


class FakeNotifier:
    def __init__(self):
        self.alerts = []

    def display(self, record, risk_findings=None):
        self.alerts.append((record, risk_findings))


def make_boost(**overrides) -> Dict[str, Any]:
    boost = {
        "url": "https://dexscreener.com/solana/abc",
        "chainId": "solana",
        "tokenAddress": "abc",
        "icon": "icon.png",
        "header": "header.png",
        "description": "A boosted token",
        "links": [{"type": "twitter", "url": "https://x.com/abc"}],
        "amount": 10,
        "totalAmount": 500,
    }
    boost.update(overrides)
    return boost


def make_pair(**overrides) -> Dict[str, Any]:
    pair = {
        "chainId": "solana",
        "dexId": "raydium",
        "pairAddress": "pair-abc",
        "baseToken": {"address": "abc", "name": "Alpha Coin", "symbol": "ABC"},
        "priceUsd": "1.23",
        "liquidity": {"usd": 45000.5},
        "marketCap": 1200000,
        "pairCreatedAt": 1700000000000,
    }
    pair.update(overrides)
    return pair


@pytest.fixture
def config():
    return {
        "HUNTER_INTERVAL_MS": 5000,
        "REQUEST_TIMEOUT_SECONDS": 10,
        "MAX_CONCURRENT_ENDPOINTS": 4,
        "CHAINS_TO_TRACK": ["solana"],
        "DEX_TO_TRACK": "raydium",
        "IGNORE_PUMP_FUN": False,
        "MIN_BOOST_AMOUNT": 0,
        "ENDPOINTS": [
            {"platform": "dexscreener", "name": "boosts-latest", "url": BOOSTS_URL},
            {"platform": "dexscreener", "name": "get-token", "url": TOKEN_URL},
        ],
    }


@pytest.fixture
def raw_boost():
    return RawBoost.from_dict(make_boost())


@pytest.fixture
def fake_store():
    return FakeStore()


@pytest.fixture
def fake_notifier():
    return FakeNotifier()
