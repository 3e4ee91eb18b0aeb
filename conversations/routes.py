"""Chat routes."""
from fastapi import APIRouter, HTTPException, Body, Depends, Request

from common.error_messages import get_error_response
from common.models import ChatState
from conversations.controller import ChatController
from conversations.models import ChatSubmitRequest

router = APIRouter(prefix="/api", tags=["chat"])


def get_chat_controller(request: Request) -> ChatController:
    return request.app.state.chat_controller


@router.get("/chat", response_model=ChatState)
def api_get_chat(controller: ChatController = Depends(get_chat_controller)):
    """Full transcript, oldest turn first."""
    return controller.snapshot()


@router.post("/chat", response_model=ChatState)
def api_submit_chat(
    payload: ChatSubmitRequest = Body(...),
    controller: ChatController = Depends(get_chat_controller)
):
    """
    Ask Sparkle a question.
    payload: { message: string }
    returns the updated transcript; 502 (with the user turn kept) if Gemini fails
    """
    outcome = controller.submit(payload.message)
    if outcome is not None:
        message, status_code = get_error_response(outcome)
        raise HTTPException(status_code=status_code, detail=message)
    return controller.snapshot()
