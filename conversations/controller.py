"""Chat controller - owns the transcript shown to the child."""
from threading import Lock
from typing import Optional, List

from common.error_messages import ErrorCode, ServiceError
from common.models import ChatSender, ChatState, ChatTurn
from common.personas import get_greeting
from conversations.services import ChatSessionClient
from utils.logger import get_logger

logger = get_logger("conversations.controller")


class ChatController:
    """Append-only transcript driven by a ChatSessionClient."""

    def __init__(self, session_client: ChatSessionClient, greeting: Optional[str] = None):
        self._session_client = session_client
        self._lock = Lock()
        self.messages: List[ChatTurn] = [ChatTurn(sender=ChatSender.BOT, text=greeting or get_greeting())]
        self.is_loading = False
        self.error: Optional[str] = None

    def submit(self, text: str) -> Optional[ErrorCode]:
        """
        Send a user message and append the reply.

        Returns:
            None if the reply was appended, otherwise the outcome of this
            call: EMPTY_MESSAGE, RESPONSE_IN_PROGRESS, or the ServiceError
            code when Gemini fails (also recorded in ``error``).
        """
        if not text or not text.strip():
            return ErrorCode.EMPTY_MESSAGE

        with self._lock:
            if self.is_loading:
                return ErrorCode.RESPONSE_IN_PROGRESS
            self.is_loading = True
            self.error = None
            self.messages.append(ChatTurn(sender=ChatSender.USER, text=text))

        try:
            reply = self._session_client.send_turn(text)
            self.messages.append(ChatTurn(sender=ChatSender.BOT, text=reply))
            return None
        except ServiceError as e:
            self.error = e.message
            return e.error_code
        finally:
            self.is_loading = False

    def snapshot(self) -> ChatState:
        return ChatState(messages=list(self.messages), is_loading=self.is_loading, error=self.error)
