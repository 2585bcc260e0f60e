"""Chat relay feature."""

from .models import ChatRequest, ChatReply, ChatError
from .relay import ChatRelay, UpstreamError, get_chat_relay
from .routes import router

__all__ = [
    "ChatRequest", "ChatReply", "ChatError",
    "ChatRelay", "UpstreamError", "get_chat_relay", "router"
]
