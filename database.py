import aiosqlite
import json
import logging
from typing import Any, Optional


logger = logging.getLogger(__name__)


class DatabaseManager:
    """Async key-value store on a single sqlite table.

    Values are JSON-encoded. Every call opens its own connection, so a
    get followed by a set is not atomic; callers that need read-modify-write
    semantics must serialize themselves.
    """

    def __init__(self, db_path: str):
        self.db_path = db_path

    async def initialize(self):
        async with aiosqlite.connect(self.db_path) as conn:
            await conn.execute(
                "CREATE TABLE IF NOT EXISTS kv_store (key TEXT PRIMARY KEY, value TEXT NOT NULL)"
            )
            await conn.commit()
        logger.debug("Key-value store ready at %s", self.db_path)

    async def execute_query(self, query: str, params: tuple = (), fetch_one: bool = False):
        async with aiosqlite.connect(self.db_path) as conn:
            conn.row_factory = aiosqlite.Row
            cursor = await conn.cursor()
            await cursor.execute(query, params)

            # Commit if this is a write operation (INSERT, UPDATE, DELETE)
            if query.strip().upper().startswith(('INSERT', 'UPDATE', 'DELETE')):
                await conn.commit()

            if fetch_one:
                result = await cursor.fetchone()
            else:
                result = await cursor.fetchall()
            await cursor.close()
            return result

    async def get(self, key: str) -> Optional[Any]:
        row = await self.execute_query("SELECT value FROM kv_store WHERE key = ?", (key,), fetch_one=True)
        return json.loads(row["value"]) if row else None

    async def set(self, key: str, value: Any) -> None:
        await self.execute_query(
            "INSERT INTO kv_store (key, value) VALUES (?, ?) "
            "ON CONFLICT(key) DO UPDATE SET value = excluded.value",
            (key, json.dumps(value))
        )

    async def has(self, key: str) -> bool:
        row = await self.execute_query("SELECT 1 FROM kv_store WHERE key = ?", (key,), fetch_one=True)
        return row is not None
