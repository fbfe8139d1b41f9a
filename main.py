# Filename: main.py

import argparse
import asyncio
import logging
import sys

from config import load_config
from data_sources import EndpointClient
from boost_monitor import BoostMonitor
from models import CycleKind
from notifier import ConsoleNotifier, NotifierGroup
from rug_checker import RugChecker
from telegram_alert import TelegramNotifier
from token_store import TokenStore

logger = logging.getLogger("Main")


def setup_logging(level: str = "INFO"):
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler()]
    )


def build_notifier(config):
    notifiers = [ConsoleNotifier(bots=config.get("BOTS", []))]
    if config.get("ENABLE_TELEGRAM") and config.get("TELEGRAM_BOT_TOKEN") and config.get("TELEGRAM_CHAT_ID"):
        notifiers.append(TelegramNotifier(
            config["TELEGRAM_BOT_TOKEN"],
            config["TELEGRAM_CHAT_ID"],
            bots=config.get("BOTS", []),
        ))
    return NotifierGroup(notifiers)


def build_monitor(config, store: TokenStore) -> BoostMonitor:
    client = EndpointClient(timeout_seconds=config.get("REQUEST_TIMEOUT_SECONDS", 10))
    return BoostMonitor(
        config=config,
        client=client,
        store=store,
        notifier=build_notifier(config),
        rug_checker=RugChecker.from_config(client, config),
    )


async def list_tokens(store: TokenStore):
    for token in await store.all_tokens():
        print(f"{token['tokenAddress']}  {token['tokenSymbol'] or 'N/A':<10}  boosts={token['amountTotal']}  "
              f"price=${token['currentPrice']}")


async def run(args, config):
    store = TokenStore(config.get("DB_PATH", "data/boosts.db"))
    await store.init()

    if args.list_tokens:
        await list_tokens(store)
        return

    monitor = build_monitor(config, store)
    if args.once:
        await monitor.run_cycle(CycleKind.SEED)
        return
    await monitor.run()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Hunt newly boosted DexScreener tokens")
    parser.add_argument("--config", default="config.json", help="path to the JSON config file")
    parser.add_argument("--once", action="store_true", help="run a single seeding cycle and exit")
    parser.add_argument("--list-tokens", action="store_true", help="print stored tokens and exit")
    args = parser.parse_args(argv)

    setup_logging()
    config = load_config(args.config)
    logging.getLogger().setLevel(getattr(logging, str(config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO))
    logger.info("🚀 Starting BoostHunter...")

    try:
        asyncio.run(run(args, config))
    except KeyboardInterrupt:
        logger.info("❌ Hunter stopped by user.")
    except Exception:
        logger.exception("💥 Fatal error, hunter stopped.")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
