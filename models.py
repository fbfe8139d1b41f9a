# Filename: models.py

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


def _to_number(value: Any, default: float = 0) -> float:
    """Boost amounts arrive as numbers, sometimes as numeric strings; anything else becomes default."""
    if isinstance(value, bool):
        return default
    if isinstance(value, (int, float)):
        return value if math.isfinite(value) else default
    try:
        number = float(value)
    except (TypeError, ValueError):
        return default
    if not math.isfinite(number):
        return default
    return int(number) if number.is_integer() else number


class Decision(Enum):
    SKIP = "skip"
    PROCESS = "process"


class CycleKind(Enum):
    """
    SEED is the first polling cycle: it fills the store without alerting on the
    tokens that were already boosted before the hunter started.
    """
    SEED = "seed"
    STEADY_STATE = "steady_state"


@dataclass
class RawBoost:
    """
    RawBoost is one entry of the DexScreener boosts feed.
    Only lives for the duration of a polling cycle.
    """
    token_address: str               # Chain-specific token address
    chain_id: str                    # Chain identifier as sent upstream (e.g. 'solana')
    total_amount: float              # Cumulative boost total
    amount: float = 0                # Boosts added by this observation
    url: str = ""
    icon: str = ""
    header: str = ""
    open_graph: str = ""
    description: str = ""
    links: List[Dict[str, Any]] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RawBoost":
        links = data.get("links")
        return cls(
            token_address=str(data.get("tokenAddress") or ""),
            chain_id=str(data.get("chainId") or ""),
            total_amount=_to_number(data.get("totalAmount")),
            amount=_to_number(data.get("amount")),
            url=data.get("url") or "",
            icon=data.get("icon") or "",
            header=data.get("header") or "",
            open_graph=data.get("openGraph") or "",
            description=data.get("description") or "",
            links=links if isinstance(links, list) else [],
        )


@dataclass
class PersistedBoostState:
    token_address: str
    amount_total: float


@dataclass
class PairDetails:
    """Normalized view of the DexScreener pair selected for a token."""
    dex_id: str
    token_name: str
    token_symbol: str
    price_usd: float
    liquidity_usd: float
    market_cap: float
    pair_created_at: int


@dataclass
class EnrichedTokenRecord:
    """
    EnrichedTokenRecord merges one RawBoost with the pair it trades on for the tracked DEX.
    This is what gets stored, risk-checked and displayed.
    """
    token_address: str
    chain_id: str
    total_amount: float
    amount: float
    url: str
    icon: str
    header: str
    open_graph: str
    description: str
    links: List[Dict[str, Any]]
    pairs_available: int
    dex_pair: str                    # Tracked DEX identifier (e.g. 'raydium')
    current_price: float
    liquidity: float
    market_cap: float
    pair_created_at: int             # Milliseconds since epoch, 0 when unknown
    token_name: str
    token_symbol: str

    @property
    def is_pump_fun(self) -> bool:
        return self.token_address.strip().lower().endswith("pump")

    @property
    def socials_count(self) -> int:
        return len(self.links)

    @property
    def is_golden_ticker(self) -> bool:
        return bool(self.total_amount) and self.total_amount > 499


@dataclass
class RiskFinding:
    level: str                       # 'danger', 'warn' or anything else upstream sends
    name: str
    description: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RiskFinding":
        return cls(
            level=str(data.get("level") or ""),
            name=str(data.get("name") or ""),
            description=str(data.get("description") or ""),
        )


@dataclass
class CycleStats:
    kind: CycleKind
    boosts_received: int = 0
    filtered: int = 0
    unchanged: int = 0
    processed: int = 0
    no_details: int = 0
    no_matching_pair: int = 0
    upserted: int = 0
    store_failures: int = 0
    alerts: int = 0

    def merge(self, other: "CycleStats") -> None:
        for name in ("boosts_received", "filtered", "unchanged", "processed", "no_details",
                     "no_matching_pair", "upserted", "store_failures", "alerts"):
            setattr(self, name, getattr(self, name) + getattr(other, name))
