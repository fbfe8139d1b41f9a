# Filename: enricher.py

import logging
from typing import Any, Dict, List, Optional

from models import EnrichedTokenRecord, PairDetails, RawBoost

logger = logging.getLogger("Enricher")

SYMBOL_FALLBACK = "N/A"


def _to_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def _to_int(value: Any, default: int = 0) -> int:
    try:
        return int(value) if value is not None else default
    except (TypeError, ValueError):
        return default


def normalize_pair(pair: Dict[str, Any], token_address: str) -> PairDetails:
    """
    Apply the default table to a raw DexScreener pair:
    priceUsd 0.0, liquidity.usd 0, marketCap 0, pairCreatedAt 0,
    baseToken.name -> token address, baseToken.symbol -> "N/A".
    """
    base_token = pair.get("baseToken") or {}
    liquidity = pair.get("liquidity") or {}

    return PairDetails(
        dex_id=str(pair.get("dexId") or ""),
        token_name=base_token.get("name") or token_address,
        token_symbol=base_token.get("symbol") or SYMBOL_FALLBACK,
        price_usd=_to_float(pair.get("priceUsd")),
        liquidity_usd=_to_float(liquidity.get("usd") if isinstance(liquidity, dict) else None),
        market_cap=_to_float(pair.get("marketCap")),
        pair_created_at=_to_int(pair.get("pairCreatedAt")),
    )


def select_pair(pairs: List[Dict[str, Any]], dex_to_track: str) -> Optional[Dict[str, Any]]:
    for pair in pairs:
        if isinstance(pair, dict) and pair.get("dexId") == dex_to_track:
            return pair
    return None


def enrich(token: RawBoost, details: Any, dex_to_track: str) -> Optional[EnrichedTokenRecord]:
    """
    Merge a boost with the first pair listed on the tracked DEX.

    Args:
        token: Boost observation from the feed
        details: Body of the token detail endpoint ({"pairs": [...]})
        dex_to_track: DexScreener dexId to select (e.g. 'raydium')

    Returns:
        The enriched record, or None when no pair trades on the tracked DEX
    """
    pairs = details.get("pairs") if isinstance(details, dict) else None
    if not isinstance(pairs, list):
        pairs = []

    pair = select_pair(pairs, dex_to_track)
    if pair is None:
        logger.debug(f"No {dex_to_track} pair among {len(pairs)} pairs for {token.token_address}")
        return None

    selected = normalize_pair(pair, token.token_address)

    return EnrichedTokenRecord(
        token_address=token.token_address,
        chain_id=token.chain_id,
        total_amount=token.total_amount,
        amount=token.amount,
        url=token.url,
        icon=token.icon,
        header=token.header,
        open_graph=token.open_graph,
        description=token.description,
        links=token.links,
        pairs_available=len(pairs),
        dex_pair=dex_to_track,
        current_price=selected.price_usd,
        liquidity=selected.liquidity_usd,
        market_cap=selected.market_cap,
        pair_created_at=selected.pair_created_at,
        token_name=selected.token_name,
        token_symbol=selected.token_symbol,
    )
