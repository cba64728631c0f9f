"""Data access layer for fittrack."""

import json
from pathlib import Path

import aiosqlite

from .engine import get_db_path, init_db


class _Repository:
    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()
        self._initialized = False

    async def _ensure_schema(self) -> None:
        if not self._initialized:
            await init_db(self.db_path)
            self._initialized = True


class CredentialRepository(_Repository):
    """Repository for stored session tokens."""

    async def get_all(self) -> dict[str, str]:
        """Return every stored token keyed by name."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            cursor = await db.execute("SELECT name, value FROM credentials")
            rows = await cursor.fetchall()
            return {name: value for name, value in rows}

    async def put_many(self, values: dict[str, str | None]) -> None:
        """Upsert tokens; a None value deletes that token."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            for name, value in values.items():
                if value is None:
                    await db.execute("DELETE FROM credentials WHERE name = ?", (name,))
                else:
                    await db.execute(
                        """
                        INSERT INTO credentials (name, value) VALUES (?, ?)
                        ON CONFLICT(name) DO UPDATE SET
                            value = excluded.value,
                            updated_at = CURRENT_TIMESTAMP
                        """,
                        (name, value),
                    )
            await db.commit()

    async def delete_all(self) -> None:
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute("DELETE FROM credentials")
            await db.commit()


class StateRepository(_Repository):
    """Repository for persisted application state slices."""

    async def get(self, key: str) -> dict | None:
        """Load a JSON state blob by key."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            db.row_factory = aiosqlite.Row
            cursor = await db.execute(
                "SELECT value FROM app_state WHERE key = ?", (key,)
            )
            row = await cursor.fetchone()
            if row is None:
                return None
            try:
                value = json.loads(row["value"])
            except json.JSONDecodeError:
                return None
            return value if isinstance(value, dict) else None

    async def set(self, key: str, value: dict) -> None:
        """Save a JSON state blob."""
        await self._ensure_schema()
        async with aiosqlite.connect(self.db_path) as db:
            await db.execute(
                """
                INSERT INTO app_state (key, value) VALUES (?, ?)
                ON CONFLICT(key) DO UPDATE SET
                    value = excluded.value,
                    updated_at = CURRENT_TIMESTAMP
                """,
                (key, json.dumps(value)),
            )
            await db.commit()

