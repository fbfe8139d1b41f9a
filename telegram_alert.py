# Filename: telegram_alert.py

import os
import requests
import logging
from typing import Any, Dict, List, Optional

from models import EnrichedTokenRecord, RiskFinding
from notifier import format_boost_alert

logger = logging.getLogger("TelegramNotifier")

class TelegramNotifier:
    def __init__(self, bot_token: str = None, chat_id: str = None,
                 bots: Optional[List[Dict[str, Any]]] = None, timeout: float = 5):
        self.bot_token = bot_token or os.getenv("TELEGRAM_BOT_TOKEN", "")
        self.chat_id = chat_id or os.getenv("TELEGRAM_CHAT_ID", "")
        self.bots = bots or []
        self.timeout = timeout

        if not self.bot_token or not self.chat_id:
            logger.error("[Telegram] Missing bot token or chat ID!")

    def display(self, record: EnrichedTokenRecord, risk_findings: Optional[List[RiskFinding]] = None):
        """
        Sends the boost alert to the configured Telegram channel/user.
        """
        self.send_markdown(format_boost_alert(record, risk_findings, bots=self.bots, markdown=True))

    def send_markdown(self, text: str):
        """
        Sends a raw Markdown message.
        """
        if not self.bot_token or not self.chat_id:
            return

        url = f"https://api.telegram.org/bot{self.bot_token}/sendMessage"
        payload = {
            "chat_id": self.chat_id,
            "text": text,
            "parse_mode": "Markdown",
            "disable_web_page_preview": True
        }

        try:
            response = requests.post(url, data=payload, timeout=self.timeout)
            if response.status_code != 200:
                logger.error(f"[Telegram] Failed: {response.status_code} - {response.text}")
            else:
                logger.info("[Telegram] ✅ Message sent successfully.")
        except requests.RequestException as e:
            logger.error(f"[Telegram] Request exception: {e}")
