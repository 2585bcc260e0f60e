"""Chat API routes."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
import structlog

from chat.models import ChatRequest, ChatReply, ChatError
from chat.relay import ChatRelay, UpstreamError, get_chat_relay
from request_body import json_body

logger = structlog.get_logger()

router = APIRouter()


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={
        400: {"model": ChatError, "description": "No message provided"},
        500: {"model": ChatError, "description": "Completion service failed"},
    },
)
async def chat(
    request: ChatRequest = Depends(json_body(ChatRequest)),
    relay: ChatRelay = Depends(get_chat_relay)
):
    """Send a message to Professor Hackmenomore and get a reply."""
    if not request.message:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=ChatError(error="No message provided").model_dump()
        )

    try:
        reply = await relay.reply(request.message)
    except UpstreamError:
        logger.error("chat_failed", message_length=len(request.message))
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ChatError(error="OpenAI request failed").model_dump()
        )

    logger.info("chat_completed", message_length=len(request.message))
    return ChatReply(reply=reply)
