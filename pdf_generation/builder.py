"""
Render generated coloring pages into a printable, landscape PDF book.
"""
from dataclasses import dataclass
from io import BytesIO
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.utils import ImageReader
from reportlab.pdfbase import pdfmetrics
from reportlab.pdfbase.ttfonts import TTFont
from reportlab.pdfgen import canvas

from config import Config
from common.models import GeneratedImage
from utils.logger import get_logger

logger = get_logger("pdf_generation")

TITLE_FONT_SIZE = 40
SUBTITLE_FONT_SIZE = 20
# Vertical distance between the cover lines
COVER_LINE_OFFSET = 40

COVER_TEXT: Dict[str, Dict[str, str]] = {
    "en": {
        "owner": "{name}'s",
        "title": "Amazing Coloring Book",
        "subtitle": "Theme: {theme}",
        "file_suffix": "coloring_book",
    },
    "tr": {
        "owner": "{name}'in",
        "title": "Harika Boyama Kitabı",
        "subtitle": "Tema: {theme}",
        "file_suffix": "boyama_kitabı",
    },
}

FONT_SEARCH_ROOTS = [
    Path("/usr/share/fonts"),
    Path("/usr/local/share/fonts"),
    Path("/Library/Fonts"),
    Path.home() / "Library" / "Fonts",
    Path("C:/Windows/Fonts"),
]


@dataclass(frozen=True)
class PageGeometry:
    width: float
    height: float
    margin: float

    @property
    def available_width(self) -> float:
        return self.width - 2 * self.margin

    @property
    def available_height(self) -> float:
        return self.height - 2 * self.margin

    @property
    def ratio(self) -> float:
        return self.available_width / self.available_height


@dataclass(frozen=True)
class ImageProperties:
    width: float
    height: float

    @property
    def ratio(self) -> float:
        return self.width / self.height


@dataclass(frozen=True)
class Placement:
    x: float
    y: float
    width: float
    height: float


def _cover_text(locale: Optional[str]) -> Dict[str, str]:
    return COVER_TEXT.get(locale or Config.LOCALE, COVER_TEXT["en"])


def coloring_book_filename(child_name: str, theme: str, locale: Optional[str] = None) -> str:
    """Download name for a book, e.g. ``Melis_forest animals_coloring_book.pdf``."""
    return f"{child_name}_{theme}_{_cover_text(locale)['file_suffix']}.pdf"


def read_image_properties(image: GeneratedImage) -> ImageProperties:
    """
    Decode the intrinsic pixel size of an image.

    Raises:
        ValueError: If the bytes cannot be decoded or either dimension is not positive
    """
    try:
        width, height = ImageReader(BytesIO(image.data)).getSize()
    except Exception as e:
        raise ValueError(f"Unreadable image data: {e}") from e

    if width <= 0 or height <= 0:
        raise ValueError(f"Degenerate image dimensions {width}x{height}")
    return ImageProperties(width=width, height=height)


def compute_placement(page: PageGeometry, image: ImageProperties) -> Placement:
    """
    Fit an image inside the page margins without cropping or distortion and
    center it on the page.
    """
    if image.ratio > page.ratio:
        draw_width = page.available_width
        draw_height = page.available_width / image.ratio
    else:
        draw_height = page.available_height
        draw_width = page.available_height * image.ratio

    return Placement(
        x=(page.width - draw_width) / 2,
        y=(page.height - draw_height) / 2,
        width=draw_width,
        height=draw_height,
    )


class ColoringBookPDFBuilder:
    """
    Build a coloring book PDF: a text-only cover page followed by one page per
    generated image.
    """

    def __init__(
        self,
        *,
        page_size: Tuple[float, float] = landscape(A4),
        margin: Optional[float] = None,
        locale: Optional[str] = None,
    ) -> None:
        self.page_size = page_size
        self.geometry = PageGeometry(
            width=page_size[0],
            height=page_size[1],
            margin=Config.PDF_MARGIN if margin is None else margin,
        )
        self.locale = locale
        self.regular_font, self.bold_font = self._configure_fonts()

    def build(self, images: Sequence[GeneratedImage], child_name: str, theme: str) -> bytes:
        """
        Render the book and return the PDF bytes.

        An empty ``images`` sequence yields a cover-only document.

        Raises:
            ValueError: If any image cannot be decoded or has a zero dimension
        """
        buffer = BytesIO()
        pdf = canvas.Canvas(buffer, pagesize=self.page_size)
        pdf.setTitle(coloring_book_filename(child_name, theme, self.locale)[:-len(".pdf")])

        self._draw_cover_page(pdf, child_name, theme)

        for index, image in enumerate(images, start=1):
            properties = read_image_properties(image)
            placement = compute_placement(self.geometry, properties)
            logger.debug(
                f"Page {index}: {properties.width}x{properties.height} px drawn at "
                f"({placement.x:.1f}, {placement.y:.1f}) size {placement.width:.1f}x{placement.height:.1f}"
            )
            pdf.drawImage(
                ImageReader(BytesIO(image.data)),
                placement.x,
                placement.y,
                placement.width,
                placement.height,
            )
            pdf.showPage()

        pdf.save()
        logger.info(f"Built coloring book for '{child_name}' ({theme}) with {len(images)} page(s)")
        return buffer.getvalue()

    # ------------------------------------------------------------------ cover rendering

    def _draw_cover_page(self, pdf: canvas.Canvas, child_name: str, theme: str) -> None:
        width, height = self.page_size
        text = _cover_text(self.locale)

        pdf.setFont(self.bold_font, TITLE_FONT_SIZE)
        pdf.drawCentredString(width / 2, height / 2 + COVER_LINE_OFFSET, text["owner"].format(name=child_name))
        pdf.drawCentredString(width / 2, height / 2, text["title"])

        pdf.setFont(self.regular_font, SUBTITLE_FONT_SIZE)
        pdf.drawCentredString(width / 2, height / 2 - COVER_LINE_OFFSET, text["subtitle"].format(theme=theme))
        pdf.showPage()

    # ------------------------------------------------------------------ helpers

    def _configure_fonts(self) -> Tuple[str, str]:
        # Helvetica lacks glyphs such as "ı" and "ş", so prefer DejaVu when installed
        regular_ready = self._register_font_if_available("DejaVuSans", ["DejaVuSans.ttf"])
        bold_ready = self._register_font_if_available("DejaVuSans-Bold", ["DejaVuSans-Bold.ttf"])
        if regular_ready and bold_ready:
            return "DejaVuSans", "DejaVuSans-Bold"
        return "Helvetica", "Helvetica-Bold"

    @staticmethod
    def _register_font_if_available(font_name: str, candidate_filenames: Sequence[str]) -> bool:
        if font_name in pdfmetrics.getRegisteredFontNames():
            return True

        for root in FONT_SEARCH_ROOTS:
            if not root.exists():
                continue
            for candidate in candidate_filenames:
                for font_path in root.rglob(candidate):
                    try:
                        pdfmetrics.registerFont(TTFont(font_name, str(font_path)))
                        return True
                    except Exception as e:
                        logger.warning(f"Failed to register font {font_path}: {e}")
        return False
