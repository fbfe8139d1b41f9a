"""
Token Store
Persists the last seen boost total per token address in SQLite.
"""

import logging
import os
import time
from typing import Dict, List, Optional

import aiosqlite

from models import EnrichedTokenRecord, PersistedBoostState

logger = logging.getLogger("TokenStore")


class StoreError(Exception):
    """Raised when the store cannot answer a lookup."""


class TokenStore:
    def __init__(self, db_path: str = "data/boosts.db"):
        self.db_path = db_path

    async def init(self):
        """Initialize database schema."""
        directory = os.path.dirname(self.db_path)
        if directory and not os.path.exists(directory):
            os.makedirs(directory)

        async with aiosqlite.connect(self.db_path) as db:
            await db.execute('''
            CREATE TABLE IF NOT EXISTS tokens (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                tokenAddress TEXT NOT NULL UNIQUE,
                chainId TEXT,
                amount REAL,
                amountTotal REAL NOT NULL,
                tokenName TEXT,
                tokenSymbol TEXT,
                currentPrice REAL,
                liquidity REAL,
                marketCap REAL,
                pairCreatedAt INTEGER,
                dexPair TEXT,
                pairsAvailable INTEGER,
                url TEXT,
                updated_at INTEGER NOT NULL
            )
            ''')
            await db.commit()
        logger.info(f"Token store ready at {self.db_path}")

    async def get(self, token_address: str) -> Optional[PersistedBoostState]:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                async with db.execute(
                    "SELECT tokenAddress, amountTotal FROM tokens WHERE tokenAddress = ?",
                    (token_address,),
                ) as cursor:
                    row = await cursor.fetchone()
        except aiosqlite.Error as e:
            raise StoreError(f"Lookup failed for {token_address}: {e}") from e

        if row is None:
            return None
        return PersistedBoostState(token_address=row[0], amount_total=row[1])

    async def upsert(self, record: EnrichedTokenRecord) -> bool:
        """
        Insert or update the row for record.token_address.

        Returns:
            True if the write was committed, False otherwise
        """
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute('''
                INSERT INTO tokens (
                    tokenAddress, chainId, amount, amountTotal, tokenName, tokenSymbol,
                    currentPrice, liquidity, marketCap, pairCreatedAt, dexPair, pairsAvailable,
                    url, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
                ON CONFLICT(tokenAddress) DO UPDATE SET
                    chainId = excluded.chainId,
                    amount = excluded.amount,
                    amountTotal = excluded.amountTotal,
                    tokenName = excluded.tokenName,
                    tokenSymbol = excluded.tokenSymbol,
                    currentPrice = excluded.currentPrice,
                    liquidity = excluded.liquidity,
                    marketCap = excluded.marketCap,
                    pairCreatedAt = excluded.pairCreatedAt,
                    dexPair = excluded.dexPair,
                    pairsAvailable = excluded.pairsAvailable,
                    url = excluded.url,
                    updated_at = excluded.updated_at
                ''', (
                    record.token_address,
                    record.chain_id,
                    record.amount,
                    record.total_amount,
                    record.token_name,
                    record.token_symbol,
                    record.current_price,
                    record.liquidity,
                    record.market_cap,
                    record.pair_created_at,
                    record.dex_pair,
                    record.pairs_available,
                    record.url,
                    int(time.time()),
                ))
                await db.commit()
            return True
        except aiosqlite.Error as e:
            logger.error(f"Failed to upsert {record.token_address}: {e}")
            return False

    async def all_tokens(self) -> List[Dict]:
        """Get all stored tokens, most recently updated first."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                async with db.execute("SELECT * FROM tokens ORDER BY updated_at DESC, id DESC") as cursor:
                    rows = await cursor.fetchall()
        except aiosqlite.Error as e:
            raise StoreError(f"Listing tokens failed: {e}") from e

        return [dict(row) for row in rows]
