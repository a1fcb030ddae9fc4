"""CLI command modules."""

from .chat import ask, chat
from .init import init
from .facts import show, teach

__all__ = [
    "chat",
    "ask",
    "teach",
    "show",
    "init",
]
