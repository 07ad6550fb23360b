"""Direct messaging endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from skillswap.dependencies import get_messages
from skillswap.messaging.log import Message, MessageLog
from skillswap.messaging.schemas import MessageResponse, SendMessageRequest

router = APIRouter(tags=["Messaging"])


def _message_response(message: Message) -> MessageResponse:
    return MessageResponse(
        id=message.id,
        from_id=message.from_id,
        to_id=message.to_id,
        text=message.text,
        time=message.time,
    )


@router.post("/message", response_model=MessageResponse)
async def send_message(
    body: SendMessageRequest,
    log: MessageLog = Depends(get_messages),  # noqa: B008
) -> MessageResponse:
    return _message_response(log.send(body.from_id, body.to_id, body.text))


@router.get("/messages/{user_a}/{user_b}", response_model=list[MessageResponse])
async def get_conversation(
    user_a: str,
    user_b: str,
    log: MessageLog = Depends(get_messages),  # noqa: B008
) -> list[MessageResponse]:
    """Conversation between two users, oldest first."""
    return [_message_response(m) for m in log.conversation(user_a, user_b)]
