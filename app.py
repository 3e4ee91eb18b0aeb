"""
FastAPI application for the Gemini coloring book and chat assistant.

Features:
- Coloring page generation from a theme using Imagen
- Coloring book PDF download (cover page + one page per image)
- Chat with Sparkle, a friendly children's assistant
"""
import time
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import Config
from common.error_messages import ErrorCode, get_error_response
from common.gemini import create_gemini_client
from conversations.controller import ChatController
from conversations.routes import router as chat_router
from conversations.services import ChatSessionClient
from image.controller import ColoringBookController
from image.routes import router as coloring_book_router
from image.services import ImageRequestClient
from pdf_generation.builder import ColoringBookPDFBuilder
from utils.logger import get_logger

logger = get_logger("main")


def create_app(gemini_client: Optional[Any] = None) -> FastAPI:
    """
    Build the application and its controllers.

    A missing GEMINI_API_KEY is fatal: the error is logged and re-raised so
    the process refuses to start.

    Args:
        gemini_client: Pre-configured Gemini client (mainly for tests)
    """
    if gemini_client is None:
        try:
            Config.validate()
            logger.info("Configuration validated successfully")
        except ValueError as e:
            message, _ = get_error_response(ErrorCode.MISSING_API_KEY)
            logger.error(f"Configuration error: {e}")
            logger.error("Please set required environment variables in .env file")
            raise RuntimeError(f"{message} ({e})") from e
        gemini_client = create_gemini_client()

    app = FastAPI(
        title="Gemini Coloring Book & Chat API",
        description="Generate coloring pages from a theme, download them as a PDF book, and chat with Sparkle.",
        version="1.0.0"
    )

    # Controllers live for the whole process; the chat session handle is owned by its client
    app.state.coloring_book_controller = ColoringBookController(
        ImageRequestClient(gemini_client),
        pdf_builder=ColoringBookPDFBuilder(),
    )
    app.state.chat_controller = ChatController(ChatSessionClient(gemini_client))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle all unhandled exceptions globally."""
        if isinstance(exc, HTTPException):
            return JSONResponse(
                status_code=exc.status_code,
                content={"detail": exc.detail}
            )

        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        message, status_code = get_error_response(ErrorCode.UNKNOWN_ERROR)
        return JSONResponse(
            status_code=status_code,
            content={"detail": message}
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log all HTTP requests with timing."""
        start_time = time.time()
        logger.info(f"→ {request.method} {request.url} - Client: {request.client.host if request.client else 'unknown'}")
        try:
            response = await call_next(request)
        except Exception as e:
            process_time = (time.time() - start_time) * 1000
            logger.error(f"← {request.method} {request.url} - Error: {str(e)} - Time: {process_time:.2f}ms")
            raise

        process_time = (time.time() - start_time) * 1000
        logger.info(f"← {request.method} {request.url} - Status: {response.status_code} - Time: {process_time:.2f}ms")
        return response

    app.include_router(coloring_book_router)
    logger.info("Coloring book router included")

    app.include_router(chat_router)
    logger.info("Chat router included")

    @app.get("/healthz")
    def health():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


app = create_app()


# Run server directly
if __name__ == "__main__":
    logger.info(f"Starting server on {Config.HOST}:{Config.PORT}")
    uvicorn.run(
        "app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=True,
        log_level="info"
    )
