"""Credential storage and token refresh state."""

from .credentials import (
    CredentialStore,
    FileCredentialStore,
    MemoryCredentialStore,
    SqliteCredentialStore,
    create_credential_store,
)
from .refresh import RefreshCycle, RefreshState

__all__ = [
    "create_credential_store",
    "CredentialStore",
    "FileCredentialStore",
    "MemoryCredentialStore",
    "RefreshCycle",
    "RefreshState",
    "SqliteCredentialStore",
]
