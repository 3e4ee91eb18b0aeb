"""Chat session services - Gemini chat integration."""
from threading import Lock
from typing import Optional, Any

from google.genai import types

from config import Config
from common.error_messages import ErrorCode, ServiceError
from common.personas import get_system_instruction
from utils.logger import get_logger

logger = get_logger("conversations.services")


class ChatSessionClient:
    """
    Owns the single long-lived Gemini chat session.

    The session is created lazily on the first turn with the Sparkle persona
    as system instruction and reused for every following turn so Gemini keeps
    the earlier context. Turns are serialised on the session.
    """

    def __init__(self, client: Any, model: Optional[str] = None, system_instruction: Optional[str] = None):
        self._client = client
        self.model = model or Config.CHAT_MODEL
        self.system_instruction = system_instruction or get_system_instruction()
        self._session = None
        self._lock = Lock()

    @property
    def has_session(self) -> bool:
        return self._session is not None

    def _get_session(self):
        # Caller holds self._lock
        if self._session is None:
            logger.info(f"Creating chat session with model {self.model}")
            self._session = self._client.chats.create(
                model=self.model,
                config=types.GenerateContentConfig(
                    system_instruction=self.system_instruction,
                ),
            )
        return self._session

    def send_turn(self, message: str) -> str:
        """
        Send one user message and return the assistant's reply text.

        Raises:
            ServiceError: ASSISTANT_UNAVAILABLE on any failure
        """
        try:
            with self._lock:
                session = self._get_session()
                response = session.send_message(message)
        except Exception as e:
            logger.error(f"Error sending chat message: {e}", exc_info=True)
            raise ServiceError(ErrorCode.ASSISTANT_UNAVAILABLE) from e

        text = response.text or ""
        logger.info(f"Chat reply received ({len(text)} chars)")
        return text

    def reset(self) -> None:
        """Drop the session; the next turn starts a fresh conversation."""
        with self._lock:
            self._session = None
