"""Coloring book routes."""
from typing import Optional
from urllib.parse import quote

from fastapi import APIRouter, HTTPException, Path, Body, Depends, Request
from fastapi.responses import Response

from common.error_messages import ErrorCode, get_error_response
from common.models import ColoringBookState
from image.controller import ColoringBookController
from image.models import ColoringBookSettings
from utils.logger import get_logger

logger = get_logger("image")
router = APIRouter(prefix="/api/coloring-book", tags=["coloring-book"])


def get_coloring_book_controller(request: Request) -> ColoringBookController:
    return request.app.state.coloring_book_controller


def _raise_error(error_code: ErrorCode) -> None:
    message, status_code = get_error_response(error_code)
    raise HTTPException(status_code=status_code, detail=message)


def _apply_settings(controller: ColoringBookController, settings: ColoringBookSettings) -> None:
    if settings.theme is not None:
        controller.set_theme(settings.theme)
    if settings.child_name is not None:
        controller.set_child_name(settings.child_name)


@router.get("", response_model=ColoringBookState)
def api_get_coloring_book(controller: ColoringBookController = Depends(get_coloring_book_controller)):
    """Current theme, name, loading flag, last error and page previews."""
    return controller.snapshot()


@router.put("", response_model=ColoringBookState)
def api_update_coloring_book(
    settings: ColoringBookSettings = Body(...),
    controller: ColoringBookController = Depends(get_coloring_book_controller)
):
    """Update the theme and/or child name."""
    _apply_settings(controller, settings)
    return controller.snapshot()


@router.post("/generate", response_model=ColoringBookState)
def api_generate_coloring_pages(
    settings: Optional[ColoringBookSettings] = Body(None),
    controller: ColoringBookController = Depends(get_coloring_book_controller)
):
    """
    Generate a new set of coloring pages.

    Accepts optional { theme, child_name }, applied only if the request is accepted.

    Behavior:
      - 400 if theme or name is blank (nothing is generated)
      - 409 if a generation is already running
      - 502 if Gemini fails; previous pages are discarded
    """
    outcome = controller.generate(
        theme=settings.theme if settings is not None else None,
        child_name=settings.child_name if settings is not None else None,
    )
    if outcome is not None:
        _raise_error(outcome)

    logger.info(f"Generated {len(controller.images)} page(s) for theme '{controller.theme}'")
    return controller.snapshot()


@router.get("/images/{index}")
def api_get_coloring_page(
    index: int = Path(..., ge=0),
    controller: ColoringBookController = Depends(get_coloring_book_controller)
):
    """Raw image bytes for one generated page."""
    image = controller.get_image(index)
    if image is None:
        _raise_error(ErrorCode.IMAGE_NOT_FOUND)
    return Response(content=image.data, media_type=image.mime_type)


@router.get("/pdf")
def api_download_coloring_book(controller: ColoringBookController = Depends(get_coloring_book_controller)):
    """Download the coloring book as a PDF attachment."""
    try:
        result = controller.download()
    except ValueError as e:
        logger.error(f"Failed to build coloring book PDF: {e}")
        _raise_error(ErrorCode.INVALID_IMAGE_DATA)

    if result is None:
        _raise_error(ErrorCode.NO_IMAGES)

    filename, pdf_bytes = result
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{quote(filename)}"},
    )
