"""Database layer for fittrack."""

from .engine import get_db_path, init_db
from .repositories import CredentialRepository, StateRepository

__all__ = [
    "CredentialRepository",
    "get_db_path",
    "init_db",
    "StateRepository",
]
