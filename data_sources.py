"""
Module de sources de données pour BoostHunter
Récupère les données des endpoints déclarés (DexScreener, RugCheck)
"""

import asyncio
import json
import logging
from typing import Any, Dict, List, Optional

import aiohttp

logger = logging.getLogger("data_sources")

SUPPORTED_PLATFORMS = ("dexscreener",)

BOOSTS_ENDPOINT = "boosts-latest"
TOKEN_DETAILS_ENDPOINT = "get-token"


class EndpointClient:
    """
    Client HTTP pour les endpoints déclarés.
    Toute erreur (timeout, réseau, statut non-2xx, corps vide ou invalide) devient None:
    l'appelant considère simplement qu'il n'y a pas de nouvelles données pour ce cycle.
    """

    def __init__(self, timeout_seconds: float = 10):
        self.timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def fetch(self, url: str) -> Optional[Any]:
        """
        Effectue un GET sur l'URL donnée

        Args:
            url: URL complète de l'endpoint

        Returns:
            Le JSON décodé, ou None
        """
        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(url) as response:
                    if response.status < 200 or response.status >= 300:
                        logger.warning(f"Error fetching {url}: HTTP {response.status}")
                        return None

                    body = await response.read()
        except asyncio.TimeoutError:
            logger.warning(f"Timeout fetching {url}")
            return None
        except aiohttp.ClientError as e:
            logger.warning(f"Error fetching {url}: {e}")
            return None

        if not body or not body.strip():
            logger.warning(f"Empty response from {url}")
            return None

        try:
            data = json.loads(body)
        except ValueError as e:
            # UnicodeDecodeError is a ValueError
            logger.warning(f"Invalid JSON from {url}: {e}")
            return None

        if not data:
            return None
        return data


def find_endpoint(endpoints: List[Dict[str, str]], platform: str, name: str) -> Optional[Dict[str, str]]:
    for endpoint in endpoints:
        if endpoint.get("platform") == platform and endpoint.get("name") == name:
            return endpoint
    return None


def boost_endpoints(endpoints: List[Dict[str, str]]) -> List[Dict[str, str]]:
    """Endpoints polled every cycle: the latest boosts feed of each supported platform."""
    return [
        endpoint for endpoint in endpoints
        if endpoint.get("name") == BOOSTS_ENDPOINT and endpoint.get("platform") in SUPPORTED_PLATFORMS
    ]
