# Filename: filters.py

import logging
from typing import Any, Dict, Iterable

from models import RawBoost

logger = logging.getLogger("TokenFilter")


class TokenFilter:
    """
    Cheap checks that run before any store lookup or detail request.
    """

    def __init__(self, chains_to_track: Iterable[str], ignore_pump_fun: bool = False):
        self.chains_to_track = {chain.lower() for chain in chains_to_track}
        self.ignore_pump_fun = ignore_pump_fun
        self.filter_stats = {
            "chain": 0,
            "pump_fun": 0,
        }

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "TokenFilter":
        return cls(config.get("CHAINS_TO_TRACK", []), config.get("IGNORE_PUMP_FUN", False))

    def apply_filters(self, token: RawBoost) -> bool:
        if not self.chain_filter(token):
            self.filter_stats["chain"] += 1
            return False

        if not self.pump_fun_filter(token):
            self.filter_stats["pump_fun"] += 1
            return False

        return True

    def chain_filter(self, token: RawBoost) -> bool:
        return token.chain_id.lower() in self.chains_to_track

    def pump_fun_filter(self, token: RawBoost) -> bool:
        if self.ignore_pump_fun and token.token_address.strip().lower().endswith("pump"):
            logger.debug(f"[FILTER ❌] {token.token_address}: pump.fun token ignored")
            return False
        return True

    def get_filter_statistics(self):
        return self.filter_stats

    def reset_filter_statistics(self):
        for key in self.filter_stats:
            self.filter_stats[key] = 0
