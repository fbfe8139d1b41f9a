import logging
import time
from typing import Any, Dict, List, Optional

from models import EnrichedTokenRecord, RiskFinding

logger = logging.getLogger("Notifier")

RISK_LEVEL_ICONS = {
    "danger": "🔴",
    "warn": "🟡",
}


def escape_md(text: str) -> str:
    return text.replace('_', '\\_').replace('*', '\\*').replace('[', '\\[').replace('`', '\\`')


def format_time_ago(timestamp_ms: int, now: Optional[float] = None) -> str:
    """Relative age of a millisecond timestamp, e.g. '5 minutes ago'."""
    if not timestamp_ms:
        return "N/A"

    now = time.time() if now is None else now
    seconds = now - timestamp_ms / 1000
    suffix = "ago"
    if seconds < 0:
        seconds = -seconds
        suffix = "from now"

    for unit, length in (("year", 31_536_000), ("month", 2_592_000), ("day", 86_400),
                         ("hour", 3_600), ("minute", 60)):
        if seconds >= length:
            count = int(seconds // length)
            return f"{count} {unit}{'s' if count != 1 else ''} {suffix}"
    return "just now"


def format_risk_findings(risk_findings: List[RiskFinding]) -> List[str]:
    if not risk_findings:
        return ["🟢 No risks found"]
    return [
        f"{RISK_LEVEL_ICONS.get(risk.level, '⚪')} {risk.name}: {risk.description}"
        for risk in risk_findings
    ]


def format_boost_alert(record: EnrichedTokenRecord, risk_findings: Optional[List[RiskFinding]] = None,
                       bots: Optional[List[Dict[str, Any]]] = None, markdown: bool = False) -> str:
    """
    Format the alert text for a token whose boosts changed.
    risk_findings=None leaves the RugCheck section out entirely.
    """
    def section(title):
        return f"*[ {title} ]*" if markdown else f"[ {title} ]"

    name = escape_md(record.token_name) if markdown else record.token_name
    symbol = escape_md(record.token_symbol) if markdown else record.token_symbol
    ticker = "🔥" if record.is_golden_ticker else "⚡"
    socials_icon = "🟢" if record.socials_count > 0 else "🔴"
    pumpfun_icon, is_pump_fun = ("🟢", "Yes") if record.is_pump_fun else ("🔴", "No")

    lines = [
        section("Boost Information"),
        f"✅ {record.amount} boosts added for {name} ({symbol}).",
        f"{ticker} Boost Amount: {record.total_amount}",
        section("Token Information"),
        f"{socials_icon} This token has {record.socials_count} socials.",
        f"🕝 This token pair was created {format_time_ago(record.pair_created_at)} and has "
        f"{record.pairs_available} pairs available including {record.dex_pair}",
        f"🤑 Current Price: ${record.current_price}",
        f"📦 Current Mkt Cap: ${record.market_cap}",
        f"💦 Current Liquidity: ${record.liquidity}",
        f"🚀 Pumpfun token: {pumpfun_icon} {is_pump_fun}",
    ]

    if risk_findings is not None:
        lines.append(section("Rugcheck Result"))
        lines.extend(format_risk_findings(risk_findings))

    lines.append(section("Checkout Token"))
    lines.append(f"👀 View on Dex https://dexscreener.com/{record.chain_id}/{record.token_address}")
    for bot in bots or []:
        if bot.get("chain", "").lower() != record.chain_id.lower():
            continue
        lines.append(f"🟣 Buy via {bot['username']} https://t.me/{bot['username']}?start={bot.get('referral', '')}-{record.token_address}")
    if record.chain_id.lower() == "solana":
        lines.append(f"👽 Buy via GMGN https://gmgn.ai/sol/token/{record.token_address}")

    return "\n".join(lines)


class ConsoleNotifier:
    def __init__(self, bots: Optional[List[Dict[str, Any]]] = None):
        self.bots = bots or []

    def display(self, record: EnrichedTokenRecord, risk_findings: Optional[List[RiskFinding]] = None):
        print("\n\n" + format_boost_alert(record, risk_findings, bots=self.bots))


class NotifierGroup:
    """Sends every alert to each notifier; one failing channel does not stop the others."""

    def __init__(self, notifiers: List[Any]):
        self.notifiers = notifiers

    def display(self, record: EnrichedTokenRecord, risk_findings: Optional[List[RiskFinding]] = None):
        for notifier in self.notifiers:
            try:
                notifier.display(record, risk_findings)
            except Exception as e:
                logger.error(f"[Notifier] {type(notifier).__name__} failed for {record.token_address}: {e}")
