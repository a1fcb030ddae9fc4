"""Chatbot front end — intent routing and the interactive session."""

from .intents import BotContext, Reply, dispatch, tokenize
from .session import ChatSession

__all__ = ["BotContext", "ChatSession", "Reply", "dispatch", "tokenize"]
