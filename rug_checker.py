# Filename: rug_checker.py

import json
from typing import Any, Dict, List, Optional

from loguru import logger

from data_sources import EndpointClient
from models import RiskFinding


class RugChecker:
    """
    Looks up the RugCheck risk summary of a token.
    None means no assessment is available; an empty list means RugCheck found no risks.
    """

    def __init__(self, client: EndpointClient, enabled: bool = True,
                 base_url: str = "https://api.rugcheck.xyz/v1/tokens", verbose: bool = False):
        self.client = client
        self.enabled = enabled
        self.base_url = base_url.rstrip("/")
        self.verbose = verbose

    @classmethod
    def from_config(cls, client: EndpointClient, config: Dict[str, Any]) -> "RugChecker":
        return cls(
            client,
            enabled=config.get("RUG_CHECK_ENABLED", True),
            base_url=config.get("RUGCHECK_BASE_URL", "https://api.rugcheck.xyz/v1/tokens"),
            verbose=config.get("RUG_CHECK_VERBOSE", False),
        )

    async def check(self, token_address: str) -> Optional[List[RiskFinding]]:
        if not self.enabled:
            return None

        url = f"{self.base_url}/{token_address}/report/summary"
        data = await self.client.fetch(url)
        if data is None:
            logger.info(f"[INFO] RugCheck: no report for {token_address}")
            return None

        if self.verbose:
            logger.debug(f"[RUGCHECK] {token_address}: {json.dumps(data, indent=2)}")

        risks = data.get("risks") if isinstance(data, dict) else None
        if not isinstance(risks, list):
            logger.warning(f"[WARN] RugCheck: unexpected summary format for {token_address}")
            return None

        return [RiskFinding.from_dict(risk) for risk in risks if isinstance(risk, dict)]
