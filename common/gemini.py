"""Gemini client construction."""
from typing import Optional

from google import genai

from config import Config
from utils.logger import get_logger

logger = get_logger("gemini")


def create_gemini_client(api_key: Optional[str] = None) -> genai.Client:
    """
    Build the shared Gemini client.

    Raises:
        ValueError: If no API key is configured. This is fatal at startup.
    """
    api_key = api_key or Config.get_gemini_api_key()
    client = genai.Client(api_key=api_key)
    logger.info("Gemini client initialized")
    return client
