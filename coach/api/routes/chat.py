"""
Chat endpoint - proxies a guarded conversation to the completion provider.
"""

from fastapi import APIRouter, Depends, Request

from coach.api.deps import get_chat_pipeline
from coach.api.models import ChatReply, ErrorResponse
from coach.services.chat_pipeline import ChatPipeline


router = APIRouter(prefix="/api", tags=["chat"])


@router.post(
    "/chat",
    response_model=ChatReply,
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        402: {"model": ErrorResponse},
        413: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def chat(request: Request, pipeline: ChatPipeline = Depends(get_chat_pipeline)) -> ChatReply:
    """
    Send conversation history and receive the coach's reply

    **Authentication:** bearer token or auth cookie, plus a paid profile

    **Request:**
    ```json
    {
      "messages": [
        {"role": "user", "content": "I tighten up on match point."}
      ]
    }
    ```

    The body is read only after the caller is authorized. Messages with any
    role other than ``user``/``assistant`` are dropped, each message is clipped,
    and only the most recent ones are kept. Oversized conversations are
    rejected with 413.

    **Response:** ``{"reply": "..."}`` or ``{"error": "..."}``
    """
    reply = await pipeline.reply(request)
    return ChatReply(reply=reply)
