"""Coloring page generation module."""
from image.models import ColoringBookSettings
from image.services import (
    COLORING_PAGE_PROMPT,
    ImageRequestClient,
    build_coloring_prompt,
    split_into_batches
)
from image.controller import ColoringBookController

__all__ = [
    "COLORING_PAGE_PROMPT",
    "ColoringBookSettings",
    "ColoringBookController",
    "ImageRequestClient",
    "build_coloring_prompt",
    "split_into_batches"
]
