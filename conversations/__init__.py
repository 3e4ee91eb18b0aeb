"""Chat module."""
from conversations.services import ChatSessionClient
from conversations.controller import ChatController
from conversations.models import ChatSubmitRequest

__all__ = [
    "ChatSessionClient",
    "ChatController",
    "ChatSubmitRequest"
]
