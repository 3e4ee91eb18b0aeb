"""
Configuration module - loads all settings from environment variables.
"""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
try:
    load_dotenv()
except Exception as e:
    print(f"Warning: Failed to load .env file: {e}")
    print("Continuing with environment variables or defaults...")


class Config:
    """Application configuration loaded from environment variables."""

    @staticmethod
    def _get_int(key: str, default: int) -> int:
        """Safely parse integer environment variable."""
        try:
            return int(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid integer for {key}, using default {default}: {e}")
            return default

    @staticmethod
    def _get_float(key: str, default: float) -> float:
        """Safely parse float environment variable."""
        try:
            return float(os.getenv(key, str(default)))
        except (ValueError, TypeError) as e:
            print(f"Warning: Invalid float for {key}, using default {default}: {e}")
            return default

    # Gemini API
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")
    IMAGE_MODEL: str = os.getenv("IMAGE_MODEL", "imagen-4.0-generate-001")
    CHAT_MODEL: str = os.getenv("CHAT_MODEL", "gemini-2.5-flash")

    # Coloring pages
    # Imagen caps a single request at 4 images
    IMAGES_PER_BOOK: int = _get_int.__func__("IMAGES_PER_BOOK", 5)
    MAX_IMAGES_PER_CALL: int = _get_int.__func__("MAX_IMAGES_PER_CALL", 4)
    IMAGE_MIME_TYPE: str = os.getenv("IMAGE_MIME_TYPE", "image/jpeg")
    IMAGE_ASPECT_RATIO: str = os.getenv("IMAGE_ASPECT_RATIO", "4:3")

    # PDF layout (points)
    PDF_MARGIN: float = _get_float.__func__("PDF_MARGIN", 20.0)

    # Language for user-facing messages, persona and cover text ("en" or "tr")
    LOCALE: str = os.getenv("LOCALE", "en")

    # Logging
    LOGS_DIR: str = os.getenv("LOGS_DIR", os.path.join(os.path.dirname(os.path.abspath(__file__)), "logs"))
    LOG_RETENTION_DAYS: int = _get_int.__func__("LOG_RETENTION_DAYS", 10)

    # Server
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = _get_int.__func__("PORT", 8000)

    @classmethod
    def validate(cls) -> None:
        """Validate required configuration."""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY environment variable is required")
        if cls.MAX_IMAGES_PER_CALL < 1:
            raise ValueError("MAX_IMAGES_PER_CALL must be at least 1")

    @classmethod
    def get_gemini_api_key(cls) -> str:
        """Get GEMINI_API_KEY, raise error if not set."""
        if not cls.GEMINI_API_KEY:
            raise ValueError("GEMINI_API_KEY must be set in environment variables")
        return cls.GEMINI_API_KEY
