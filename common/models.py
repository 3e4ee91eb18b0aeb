"""Shared models for coloring pages and chat."""
from enum import Enum
from typing import Optional, List
from pydantic import BaseModel, Field


class GeneratedImage(BaseModel):
    """A single generated coloring page as returned by Imagen."""
    data: bytes = Field(..., description="Raw encoded image bytes")
    mime_type: str = Field("image/jpeg", description="Image MIME type")


class ChatSender(str, Enum):
    """Who wrote a chat turn."""
    USER = "user"
    BOT = "bot"


class ChatTurn(BaseModel):
    """One message in the chat transcript."""
    sender: ChatSender = Field(..., description="Author of the turn")
    text: str = Field(..., description="Message text")


class ColoringBookState(BaseModel):
    """Snapshot of the coloring book controller."""
    theme: str = Field("", description="Theme used for the coloring pages")
    child_name: str = Field("", description="Name printed on the cover")
    is_loading: bool = Field(False, description="Whether a generation is in flight")
    error: Optional[str] = Field(None, description="Last user-facing error, if any")
    image_count: int = Field(0, description="Number of generated pages")
    image_urls: List[str] = Field(default_factory=list, description="Preview URLs for each page")


class ChatState(BaseModel):
    """Snapshot of the chat controller."""
    messages: List[ChatTurn] = Field(default_factory=list, description="Transcript, oldest first")
    is_loading: bool = Field(False, description="Whether a reply is in flight")
    error: Optional[str] = Field(None, description="Last user-facing error, if any")
