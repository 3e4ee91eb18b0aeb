"""Chat request models."""
from pydantic import BaseModel, Field


class ChatSubmitRequest(BaseModel):
    message: str = Field(..., description="The child's question for Sparkle")
