"""
Configuration du BoostHunter
"""

import os
import json
import logging
from typing import Dict, Any

from dotenv import load_dotenv

logger = logging.getLogger("config")

load_dotenv()

# Configuration par défaut
DEFAULT_CONFIG = {
    # Scan & Timing
    "HUNTER_INTERVAL_MS": 5000,
    "REQUEST_TIMEOUT_SECONDS": 10,
    "MAX_CONCURRENT_ENDPOINTS": 4,

    # Tracking
    "CHAINS_TO_TRACK": ["solana"],
    "DEX_TO_TRACK": "raydium",
    "IGNORE_PUMP_FUN": False,
    "MIN_BOOST_AMOUNT": 0,

    # RugCheck
    "RUG_CHECK_ENABLED": True,
    "RUG_CHECK_VERBOSE": False,
    "RUGCHECK_BASE_URL": "https://api.rugcheck.xyz/v1/tokens",

    # Endpoints
    "ENDPOINTS": [
        {"platform": "dexscreener", "name": "profiles", "url": "https://api.dexscreener.com/token-profiles/latest/v1"},
        {"platform": "dexscreener", "name": "boosts-latest", "url": "https://api.dexscreener.com/token-boosts/latest/v1"},
        {"platform": "dexscreener", "name": "boosts-top", "url": "https://api.dexscreener.com/token-boosts/top/v1"},
        {"platform": "dexscreener", "name": "get-token", "url": "https://api.dexscreener.com/latest/dex/tokens/"},
    ],

    # Trading bots linked in alerts
    "BOTS": [
        {"username": "TradeonNovaBot", "referral": "r-digitalbenjamins", "chain": "solana"},
    ],

    # Notifier
    "ENABLE_TELEGRAM": False,
    "TELEGRAM_BOT_TOKEN": "",
    "TELEGRAM_CHAT_ID": "",

    # System
    "DB_PATH": "data/boosts.db",
    "LOG_LEVEL": "INFO",
}

def load_config(config_file: str = "config.json") -> Dict[str, Any]:
    """
    Charge la configuration depuis le fichier config.json
    Si le fichier n'existe pas, crée un fichier avec la configuration par défaut

    Returns:
        Dictionnaire de configuration
    """
    if os.environ.get("USE_ENV_CONFIG", "").lower() == "true":
        logger.info("Chargement de la configuration depuis les variables d'environnement")
        return load_config_from_env()

    if not os.path.exists(config_file):
        with open(config_file, "w") as f:
            json.dump(DEFAULT_CONFIG, f, indent=2)
        logger.info(f"Fichier de configuration créé: {config_file}")
        return dict(DEFAULT_CONFIG)

    try:
        with open(config_file, "r") as f:
            config = json.load(f)
        logger.info(f"Configuration chargée depuis: {config_file}")
    except (OSError, ValueError) as e:
        logger.error(f"Erreur lors du chargement de la configuration: {e}")
        logger.info("Utilisation de la configuration par défaut")
        return dict(DEFAULT_CONFIG)

    # Fusion avec les clés manquantes
    for key, value in DEFAULT_CONFIG.items():
        if key not in config:
            config[key] = value

    return config

def load_config_from_env() -> Dict[str, Any]:
    """
    Charge la configuration depuis les variables d'environnement.
    Les listes de chaînes s'écrivent séparées par des virgules (CHAINS_TO_TRACK=solana,base);
    ENDPOINTS et BOTS attendent du JSON.

    Returns:
        Dictionnaire de configuration
    """
    config = {}

    for key, default_value in DEFAULT_CONFIG.items():
        env_value = os.environ.get(key)

        if env_value is None:
            config[key] = default_value
            continue

        try:
            config[key] = _parse_env_value(env_value, default_value)
        except ValueError as parse_err:
            logger.warning(f"Impossible de parser la variable d'env {key}: {parse_err}. Valeur par défaut utilisée.")
            config[key] = default_value

    return config

def _parse_env_value(env_value: str, default_value: Any) -> Any:
    # bool before int: bool is a subclass of int
    if isinstance(default_value, bool):
        return env_value.strip().lower() == "true"
    if isinstance(default_value, int):
        return int(env_value)
    if isinstance(default_value, float):
        return float(env_value)
    if isinstance(default_value, list):
        if default_value and isinstance(default_value[0], dict):
            parsed = json.loads(env_value)
            if not isinstance(parsed, list):
                raise ValueError("expected a JSON list")
            return parsed
        return [item.strip() for item in env_value.split(",") if item.strip()]
    return env_value
