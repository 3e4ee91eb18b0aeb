"""PDF assembly for coloring books."""
from pdf_generation.builder import (
    ColoringBookPDFBuilder,
    ImageProperties,
    PageGeometry,
    Placement,
    coloring_book_filename,
    compute_placement,
    read_image_properties,
)

__all__ = [
    "ColoringBookPDFBuilder",
    "ImageProperties",
    "PageGeometry",
    "Placement",
    "coloring_book_filename",
    "compute_placement",
    "read_image_properties",
]
