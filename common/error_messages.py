"""
User-friendly error messages and status codes.

This module provides centralized, localized error message definitions that
are shown to the child/parent using the app and never expose the underlying
Gemini errors (those are logged instead).
"""
from typing import Tuple, Optional
from enum import Enum

from config import Config


DEFAULT_LOCALE = "en"


class ErrorCode(str, Enum):
    """Error codes for different types of failures."""

    # Validation Errors (400)
    MISSING_FIELD = "MISSING_FIELD"
    EMPTY_MESSAGE = "EMPTY_MESSAGE"

    # Busy (409)
    GENERATION_IN_PROGRESS = "GENERATION_IN_PROGRESS"
    RESPONSE_IN_PROGRESS = "RESPONSE_IN_PROGRESS"

    # Not Found (404)
    NO_IMAGES = "NO_IMAGES"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"

    # Bad generated content (422)
    INVALID_IMAGE_DATA = "INVALID_IMAGE_DATA"

    # Upstream (502)
    IMAGE_GENERATION_FAILED = "IMAGE_GENERATION_FAILED"
    ASSISTANT_UNAVAILABLE = "ASSISTANT_UNAVAILABLE"

    # Configuration Errors (500)
    MISSING_API_KEY = "MISSING_API_KEY"

    # Generic Errors
    UNKNOWN_ERROR = "UNKNOWN_ERROR"


# Localized messages, keyed by locale then error code
ERROR_MESSAGES = {
    "en": {
        ErrorCode.MISSING_FIELD: "Please enter a theme and a name.",
        ErrorCode.EMPTY_MESSAGE: "Please type a question first.",
        ErrorCode.GENERATION_IN_PROGRESS: "Your coloring pages are already being drawn. Please wait a moment.",
        ErrorCode.RESPONSE_IN_PROGRESS: "Sparkle is still answering your last question.",
        ErrorCode.NO_IMAGES: "Create some coloring pages before downloading the book.",
        ErrorCode.IMAGE_NOT_FOUND: "That coloring page doesn't exist.",
        ErrorCode.INVALID_IMAGE_DATA: "One of the coloring pages could not be read. Please create new pages.",
        ErrorCode.IMAGE_GENERATION_FAILED: "Could not generate coloring pages, please try again.",
        ErrorCode.ASSISTANT_UNAVAILABLE: "Sparkle is a little tired right now. Please try again in a minute!",
        ErrorCode.MISSING_API_KEY: "The service is not properly configured. Please contact support.",
        ErrorCode.UNKNOWN_ERROR: "Something unexpected happened. Please try again.",
    },
    "tr": {
        ErrorCode.MISSING_FIELD: "Lütfen bir tema ve bir isim girin.",
        ErrorCode.EMPTY_MESSAGE: "Lütfen önce sorunu yaz.",
        ErrorCode.GENERATION_IN_PROGRESS: "Boyama sayfaların zaten çiziliyor. Lütfen biraz bekle.",
        ErrorCode.RESPONSE_IN_PROGRESS: "Sparkle hâlâ son sorunu yanıtlıyor.",
        ErrorCode.NO_IMAGES: "Kitabı indirmeden önce boyama sayfaları oluşturun.",
        ErrorCode.IMAGE_NOT_FOUND: "Böyle bir boyama sayfası yok.",
        ErrorCode.INVALID_IMAGE_DATA: "Boyama sayfalarından biri okunamadı. Lütfen yeni sayfalar oluşturun.",
        ErrorCode.IMAGE_GENERATION_FAILED: "Boyama sayfaları oluşturulamadı. Lütfen tekrar deneyin.",
        ErrorCode.ASSISTANT_UNAVAILABLE: "Sparkle şu an biraz yorgun. Lütfen bir dakika içinde tekrar deneyin!",
        ErrorCode.MISSING_API_KEY: "Servis doğru yapılandırılmamış. Lütfen destek ile iletişime geçin.",
        ErrorCode.UNKNOWN_ERROR: "Bilinmeyen bir hata oluştu.",
    },
}


# HTTP status codes for each error type
ERROR_STATUS_CODES = {
    ErrorCode.MISSING_FIELD: 400,
    ErrorCode.EMPTY_MESSAGE: 400,
    ErrorCode.GENERATION_IN_PROGRESS: 409,
    ErrorCode.RESPONSE_IN_PROGRESS: 409,
    ErrorCode.NO_IMAGES: 404,
    ErrorCode.IMAGE_NOT_FOUND: 404,
    ErrorCode.INVALID_IMAGE_DATA: 422,
    ErrorCode.IMAGE_GENERATION_FAILED: 502,
    ErrorCode.ASSISTANT_UNAVAILABLE: 502,
    ErrorCode.MISSING_API_KEY: 500,
    ErrorCode.UNKNOWN_ERROR: 500,
}


def get_error_message(error_code: ErrorCode, locale: Optional[str] = None) -> str:
    """Localized message for an error code, falling back to English."""
    messages = ERROR_MESSAGES.get(locale or Config.LOCALE, ERROR_MESSAGES[DEFAULT_LOCALE])
    return messages.get(error_code, messages[ErrorCode.UNKNOWN_ERROR])


def get_error_response(
    error_code: ErrorCode,
    custom_message: Optional[str] = None,
    locale: Optional[str] = None
) -> Tuple[str, int]:
    """
    Get user-friendly error message and HTTP status code.

    Args:
        error_code: The error code enum
        custom_message: Optional custom message to append to the standard message
        locale: Message language (defaults to Config.LOCALE)

    Returns:
        Tuple of (error_message, status_code)
    """
    message = get_error_message(error_code, locale)
    status_code = ERROR_STATUS_CODES.get(error_code, 500)

    if custom_message:
        message = f"{message} {custom_message}"

    return message, status_code


class ServiceError(RuntimeError):
    """An error whose message is safe to show to the user as-is."""

    def __init__(self, error_code: ErrorCode, locale: Optional[str] = None):
        self.error_code = error_code
        self.message, self.status_code = get_error_response(error_code, locale=locale)
        super().__init__(self.message)
