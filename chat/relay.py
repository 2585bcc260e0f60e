"""Chat relay to the OpenAI completion service using Pydantic AI."""

from typing import Union
from fastapi import Request
from pydantic_ai import Agent
from pydantic_ai.models import Model
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.openai import OpenAIProvider
from pydantic_ai.settings import ModelSettings
import structlog

from config import Settings

logger = structlog.get_logger()

PERSONA = "You are Professor Hackmenomore, a friendly cybersecurity tutor."


class UpstreamError(Exception):
    """The completion service rejected or failed the request."""


class ChatRelay:
    """Forwards user messages to the completion model with the tutor persona."""

    def __init__(
        self,
        model: Union[Model, str],
        max_tokens: int = 500,
        temperature: float = 0.7,
    ):
        self.agent = Agent(
            model,
            instructions=PERSONA,
            model_settings=ModelSettings(max_tokens=max_tokens, temperature=temperature),
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "ChatRelay":
        """Build a relay backed by OpenAI from application settings."""
        model = OpenAIChatModel(
            settings.chat_model,
            provider=OpenAIProvider(api_key=settings.openai_api_key.get_secret_value()),
        )
        return cls(
            model,
            max_tokens=settings.chat_max_tokens,
            temperature=settings.chat_temperature,
        )

    async def reply(self, message: str) -> str:
        """Send a message and return the generated text.

        Raises:
            UpstreamError: if the completion request fails for any reason.
        """
        try:
            result = await self.agent.run(message)
        except Exception as e:
            logger.error("completion_failed", error=str(e), error_type=type(e).__name__)
            raise UpstreamError(str(e)) from e
        return result.output


# Dependency injection helper
def get_chat_relay(request: Request) -> ChatRelay:
    """FastAPI dependency for the ChatRelay built at startup."""
    return request.app.state.chat_relay
