# Filename: boost_monitor.py

import asyncio
import logging
from typing import Any, Dict, List, Optional

from data_sources import EndpointClient, TOKEN_DETAILS_ENDPOINT, boost_endpoints, find_endpoint
from deduplicator import decide
from enricher import enrich
from filters import TokenFilter
from models import CycleKind, CycleStats, Decision, RawBoost
from rug_checker import RugChecker
from token_store import StoreError

logger = logging.getLogger("BoostMonitor")


class BoostMonitor:
    """
    Polls the boosts feeds, keeps the store in sync with the latest boost totals
    and alerts on tokens whose totals changed since the previous cycle.
    """

    def __init__(self, config: Dict[str, Any], client: EndpointClient, store, notifier,
                 rug_checker: Optional[RugChecker] = None, token_filter: Optional[TokenFilter] = None):
        self.config = config
        self.client = client
        self.store = store
        self.notifier = notifier
        self.rug_checker = rug_checker
        self.token_filter = token_filter or TokenFilter.from_config(config)

        self.endpoints: List[Dict[str, str]] = config.get("ENDPOINTS", [])
        self.dex_to_track = config.get("DEX_TO_TRACK", "raydium")
        self.min_boost_amount = config.get("MIN_BOOST_AMOUNT", 0) or 0
        self.interval = config.get("HUNTER_INTERVAL_MS", 5000) / 1000
        self.semaphore = asyncio.Semaphore(max(1, config.get("MAX_CONCURRENT_ENDPOINTS", 4)))
        self.cycles_completed = 0

    async def run(self):
        """Poll forever. The first cycle seeds the store, later ones alert."""
        if not boost_endpoints(self.endpoints):
            logger.error("No boosts-latest endpoint configured, nothing to poll.")
            return

        kind = CycleKind.SEED
        logger.info("Started. Waiting for tokens...")
        while True:
            await self.run_cycle(kind)
            kind = CycleKind.STEADY_STATE
            await asyncio.sleep(self.interval)

    async def run_cycle(self, kind: CycleKind) -> CycleStats:
        stats = CycleStats(kind=kind)
        results = await asyncio.gather(*(
            self._poll_endpoint(endpoint, kind) for endpoint in boost_endpoints(self.endpoints)
        ))
        for result in results:
            stats.merge(result)

        self.cycles_completed += 1
        filter_stats = self.token_filter.get_filter_statistics()
        logger.info(
            f"📊 Cycle {self.cycles_completed} ({kind.value}): {stats.boosts_received} boosts, "
            f"{stats.filtered} filtered, {stats.unchanged} unchanged, {stats.processed} processed, "
            f"{stats.upserted} stored, {stats.alerts} alerts"
            f" (filtered by chain={filter_stats['chain']}, pump_fun={filter_stats['pump_fun']})"
        )
        self.token_filter.reset_filter_statistics()
        return stats

    async def _poll_endpoint(self, endpoint: Dict[str, str], kind: CycleKind) -> CycleStats:
        stats = CycleStats(kind=kind)
        async with self.semaphore:
            data = await self.client.fetch(endpoint["url"])
            if not isinstance(data, list):
                logger.info(f"🚫 No new token boosts received from {endpoint['platform']}.")
                return stats

            details_endpoint = find_endpoint(self.endpoints, endpoint["platform"], TOKEN_DETAILS_ENDPOINT)
            stats.boosts_received = len(data)

            for entry in data:
                if not isinstance(entry, dict):
                    continue
                token = RawBoost.from_dict(entry)
                if not token.token_address:
                    continue
                await self.process_token(token, details_endpoint, kind, stats)

        return stats

    async def process_token(self, token: RawBoost, details_endpoint: Optional[Dict[str, str]],
                            kind: CycleKind, stats: CycleStats):
        if not self.token_filter.apply_filters(token):
            stats.filtered += 1
            return

        try:
            stored = await self.store.get(token.token_address)
        except StoreError as e:
            logger.error(f"Store lookup failed, skipping {token.token_address}: {e}")
            stats.store_failures += 1
            return

        if decide(token, stored) is Decision.SKIP:
            stats.unchanged += 1
            return

        stats.processed += 1
        if details_endpoint is None:
            stats.no_details += 1
            return

        details = await self.client.fetch(f"{details_endpoint['url']}{token.token_address}")
        if details is None:
            stats.no_details += 1
            return

        record = enrich(token, details, self.dex_to_track)
        if record is None:
            stats.no_matching_pair += 1
            return

        if not await self.store.upsert(record):
            stats.store_failures += 1
            return
        stats.upserted += 1

        if not self.should_alert(token, kind):
            return

        risk_findings = None
        if self.rug_checker is not None:
            risk_findings = await self.rug_checker.check(record.token_address)

        try:
            # requests-based notifiers block, keep them off the event loop
            await asyncio.to_thread(self.notifier.display, record, risk_findings)
        except Exception as e:
            logger.error(f"Failed to display alert for {record.token_address}: {e}")
            return
        stats.alerts += 1

    def should_alert(self, token: RawBoost, kind: CycleKind) -> bool:
        if kind is CycleKind.SEED:
            return False
        return bool(token.total_amount) and token.total_amount >= self.min_boost_amount
