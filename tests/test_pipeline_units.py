"""
Tests for the deduplicator, the pre-filters and the enricher.
"""

import pytest

from conftest import make_boost, make_pair
from deduplicator import decide
from enricher import enrich, normalize_pair
from filters import TokenFilter
from models import Decision, PersistedBoostState, RawBoost


def test_decide_processes_unknown_token(raw_boost):
    assert decide(raw_boost, None) is Decision.PROCESS


@pytest.mark.parametrize("stored_total,expected", [
    (500, Decision.SKIP),
    (500.0, Decision.SKIP),
    (499, Decision.PROCESS),
    (499.999, Decision.PROCESS),
    (1000, Decision.PROCESS),  # decreased upstream, still a change
])
def test_decide_compares_totals_exactly(raw_boost, stored_total, expected):
    stored = PersistedBoostState(token_address="abc", amount_total=stored_total)
    assert decide(raw_boost, stored) is expected


def test_filter_rejects_untracked_chain():
    token_filter = TokenFilter(["solana"])
    assert token_filter.apply_filters(RawBoost.from_dict(make_boost(chainId="ethereum"))) is False
    assert token_filter.get_filter_statistics()["chain"] == 1


def test_filter_chain_is_case_insensitive():
    token_filter = TokenFilter(["Solana"])
    assert token_filter.apply_filters(RawBoost.from_dict(make_boost(chainId="SOLANA"))) is True


def test_filter_pump_fun_suffix_only_when_enabled():
    pump_token = RawBoost.from_dict(make_boost(tokenAddress=" 9xyzPUMP "))

    assert TokenFilter(["solana"], ignore_pump_fun=False).apply_filters(pump_token) is True

    token_filter = TokenFilter(["solana"], ignore_pump_fun=True)
    assert token_filter.apply_filters(pump_token) is False
    assert token_filter.get_filter_statistics()["pump_fun"] == 1

    token_filter.reset_filter_statistics()
    assert token_filter.get_filter_statistics() == {"chain": 0, "pump_fun": 0}


def test_enrich_returns_none_without_tracked_dex(raw_boost):
    details = {"pairs": [make_pair(dexId="orca"), make_pair(dexId="meteora")]}
    assert enrich(raw_boost, details, "raydium") is None


def test_enrich_returns_none_for_missing_pairs(raw_boost):
    assert enrich(raw_boost, {"pairs": None}, "raydium") is None
    assert enrich(raw_boost, {}, "raydium") is None


def test_enrich_selects_first_matching_pair(raw_boost):
    details = {"pairs": [
        make_pair(dexId="orca", priceUsd="9.99"),
        make_pair(priceUsd="1.23"),
        make_pair(priceUsd="2.00"),
    ]}

    record = enrich(raw_boost, details, "raydium")

    assert record.pairs_available == 3
    assert record.dex_pair == "raydium"
    assert record.current_price == 1.23
    assert record.liquidity == 45000.5
    assert record.market_cap == 1200000
    assert record.pair_created_at == 1700000000000
    assert record.token_name == "Alpha Coin"
    assert record.token_symbol == "ABC"
    assert record.total_amount == 500
    assert record.amount == 10
    assert record.socials_count == 1


def test_normalize_pair_defaults():
    pair = {"dexId": "raydium", "priceUsd": "not-a-number", "liquidity": None, "baseToken": {}}

    details = normalize_pair(pair, "abc")

    assert details.price_usd == 0.0
    assert details.liquidity_usd == 0
    assert details.market_cap == 0
    assert details.pair_created_at == 0
    assert details.token_name == "abc"
    assert details.token_symbol == "N/A"


def test_record_flags():
    record = enrich(RawBoost.from_dict(make_boost(tokenAddress="Zz9pump", totalAmount=500)),
                    {"pairs": [make_pair()]}, "raydium")
    assert record.is_pump_fun is True
    assert record.is_golden_ticker is True

    record = enrich(RawBoost.from_dict(make_boost(totalAmount=499, links=None)),
                    {"pairs": [make_pair()]}, "raydium")
    assert record.is_pump_fun is False
    assert record.is_golden_ticker is False
    assert record.socials_count == 0


@pytest.mark.parametrize("raw,expected", [
    ("500", 500),
    ("12.5", 12.5),
    ("lots", 0),
    (None, 0),
    (True, 0),
    (float("nan"), 0),
    ({"value": 3}, 0),
])
def test_boost_totals_are_coerced_to_numbers(raw, expected):
    token = RawBoost.from_dict(make_boost(totalAmount=raw, amount=raw))
    assert token.total_amount == expected
    assert token.amount == expected
