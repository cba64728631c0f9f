"""CLI commands for fittrack."""

from .activities import activities, comment, kudos
from .auth import login, logout, password, register, verify, whoami
from .dashboard import dashboard, prefs
from .profile import profile
from .segments import segments
from .users import users

__all__ = [
    "activities",
    "comment",
    "dashboard",
    "kudos",
    "login",
    "logout",
    "password",
    "prefs",
    "profile",
    "register",
    "segments",
    "users",
    "verify",
    "whoami",
]
