"""Credential stores for the session tokens.

The access and refresh tokens live outside the in-memory application state.
Each backend implements ``load``/``store``/``clear``; the token helpers on the
base class are built on those three.

- MemoryCredentialStore: process lifetime only (tests, embedding)
- FileCredentialStore: JSON file with mode 0o600
- SqliteCredentialStore: the local fittrack database (CLI default)
"""

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path

from loguru import logger

from ..config import Settings
from ..db.repositories import CredentialRepository
from ..models.user import TokenPair

_KEY_ACCESS = "access_token"
_KEY_REFRESH = "refresh_token"


class CredentialStore(ABC):
    """Persistence for the access/refresh token pair."""

    @abstractmethod
    async def load(self) -> TokenPair:
        """Return the stored tokens (fields are None when absent)."""

    @abstractmethod
    async def store(self, tokens: TokenPair) -> None:
        """Replace the stored tokens. None fields are removed."""

    @abstractmethod
    async def clear(self) -> None:
        """Remove both tokens."""

    async def get_access_token(self) -> str | None:
        return (await self.load()).access_token

    async def get_refresh_token(self) -> str | None:
        return (await self.load()).refresh_token

    async def set_access_token(self, access_token: str) -> None:
        """Rotate only the access token, keeping the refresh token."""
        tokens = await self.load()
        tokens.access_token = access_token
        await self.store(tokens)


class MemoryCredentialStore(CredentialStore):
    """In-memory token storage."""

    def __init__(self, tokens: TokenPair | None = None):
        self._tokens = TokenPair() if tokens is None else TokenPair(
            tokens.access_token, tokens.refresh_token
        )

    async def load(self) -> TokenPair:
        return TokenPair(self._tokens.access_token, self._tokens.refresh_token)

    async def store(self, tokens: TokenPair) -> None:
        self._tokens = TokenPair(tokens.access_token, tokens.refresh_token)

    async def clear(self) -> None:
        self._tokens = TokenPair()


class FileCredentialStore(CredentialStore):
    """JSON file storage, readable by the current user only."""

    def __init__(self, path: Path):
        self.path = path

    def _read(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as e:
            logger.warning(f"Could not read credentials file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    async def load(self) -> TokenPair:
        data = self._read()
        return TokenPair(
            access_token=data.get(_KEY_ACCESS),
            refresh_token=data.get(_KEY_REFRESH),
        )

    async def store(self, tokens: TokenPair) -> None:
        data = {
            key: value
            for key, value in (
                (_KEY_ACCESS, tokens.access_token),
                (_KEY_REFRESH, tokens.refresh_token),
            )
            if value
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(self.path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(json.dumps(data))
        # A file created earlier may still carry looser permissions
        self.path.chmod(0o600)

    async def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class SqliteCredentialStore(CredentialStore):
    """Token storage in the local fittrack database."""

    def __init__(self, db_path: Path | None = None):
        self._repo = CredentialRepository(db_path)

    async def load(self) -> TokenPair:
        rows = await self._repo.get_all()
        return TokenPair(
            access_token=rows.get(_KEY_ACCESS),
            refresh_token=rows.get(_KEY_REFRESH),
        )

    async def store(self, tokens: TokenPair) -> None:
        await self._repo.put_many(
            {
                _KEY_ACCESS: tokens.access_token or None,
                _KEY_REFRESH: tokens.refresh_token or None,
            }
        )

    async def clear(self) -> None:
        await self._repo.delete_all()


def create_credential_store(settings: Settings) -> CredentialStore:
    """Build the credential store selected by configuration."""
    if settings.credential_backend == "memory":
        return MemoryCredentialStore()
    if settings.credential_backend == "file":
        return FileCredentialStore(settings.credentials_file)
    return SqliteCredentialStore(settings.db_path)
