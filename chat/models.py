"""Chat data models."""

from typing import Optional
from pydantic import BaseModel


class ChatRequest(BaseModel):
    """Chat request from user."""
    message: Optional[str] = None


class ChatReply(BaseModel):
    """Chat reply from the tutor."""
    reply: str


class ChatError(BaseModel):
    """Chat error body."""
    error: str
