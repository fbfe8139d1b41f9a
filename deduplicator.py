# Filename: deduplicator.py

import logging
from typing import Optional

from models import Decision, PersistedBoostState, RawBoost

logger = logging.getLogger("Deduplicator")


def decide(token: RawBoost, stored: Optional[PersistedBoostState]) -> Decision:
    """
    The boosts feed resends its whole list every cycle, so a token is only worth
    enriching when its boost total differs from the one we stored last time.
    Exact comparison: any difference, up or down, counts as a change.
    """
    if stored is None:
        return Decision.PROCESS

    if stored.amount_total == token.total_amount:
        return Decision.SKIP

    if token.total_amount < stored.amount_total:
        logger.warning(
            f"Boost total decreased for {token.token_address}: "
            f"{stored.amount_total} -> {token.total_amount}"
        )
    return Decision.PROCESS
