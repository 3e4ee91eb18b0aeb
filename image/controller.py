"""Coloring book controller - owns the theme, name and generated pages."""
from threading import Lock
from typing import Optional, List, Tuple

from common.error_messages import ErrorCode, ServiceError, get_error_message
from common.models import ColoringBookState, GeneratedImage
from image.services import ImageRequestClient
from pdf_generation.builder import ColoringBookPDFBuilder, coloring_book_filename
from utils.logger import get_logger

logger = get_logger("image.controller")

DEFAULT_THEME = "space dinosaurs"
DEFAULT_CHILD_NAME = "Melis"


class ColoringBookController:
    """
    State container for one coloring book session.

    The image list is only ever replaced as a whole: it is cleared when a
    generation starts and set once the generation completes.
    """

    def __init__(
        self,
        image_client: ImageRequestClient,
        pdf_builder: Optional[ColoringBookPDFBuilder] = None,
        theme: str = DEFAULT_THEME,
        child_name: str = DEFAULT_CHILD_NAME,
    ):
        self._image_client = image_client
        self._pdf_builder = pdf_builder or ColoringBookPDFBuilder()
        self._lock = Lock()
        self.theme = theme
        self.child_name = child_name
        self.images: List[GeneratedImage] = []
        self.is_loading = False
        self.error: Optional[str] = None

    def set_theme(self, theme: str) -> None:
        self.theme = theme

    def set_child_name(self, child_name: str) -> None:
        self.child_name = child_name

    def generate(self, theme: Optional[str] = None, child_name: Optional[str] = None) -> Optional[ErrorCode]:
        """
        Generate a fresh set of coloring pages for the current theme.

        A request made while another generation is running changes nothing:
        the optional theme/child_name are only applied once the request is
        accepted.

        Args:
            theme: Optional new theme, applied before validation
            child_name: Optional new child name, applied before validation

        Returns:
            None on success, otherwise the outcome of this call:
            GENERATION_IN_PROGRESS, MISSING_FIELD for blank inputs, or the
            ServiceError code when Gemini fails (also recorded in ``error``).
        """
        with self._lock:
            if self.is_loading:
                logger.info("Generation already in progress, ignoring request")
                return ErrorCode.GENERATION_IN_PROGRESS
            if theme is not None:
                self.theme = theme
            if child_name is not None:
                self.child_name = child_name
            if not self.theme.strip() or not self.child_name.strip():
                self.error = get_error_message(ErrorCode.MISSING_FIELD)
                return ErrorCode.MISSING_FIELD
            self.is_loading = True
            self.error = None
            self.images = []
            requested_theme = self.theme

        try:
            self.images = self._image_client.request_coloring_images(requested_theme)
            return None
        except ServiceError as e:
            self.error = e.message
            return e.error_code
        finally:
            self.is_loading = False

    def download(self) -> Optional[Tuple[str, bytes]]:
        """
        Assemble the current pages into a PDF.

        Returns:
            ``(filename, pdf_bytes)`` or None when there are no pages yet

        Raises:
            ValueError: If a stored image cannot be laid out
        """
        images = list(self.images)
        if not images:
            return None
        pdf_bytes = self._pdf_builder.build(images, self.child_name, self.theme)
        return coloring_book_filename(self.child_name, self.theme, self._pdf_builder.locale), pdf_bytes

    def get_image(self, index: int) -> Optional[GeneratedImage]:
        images = self.images
        if 0 <= index < len(images):
            return images[index]
        return None

    def snapshot(self, image_url_prefix: str = "/api/coloring-book/images") -> ColoringBookState:
        return ColoringBookState(
            theme=self.theme,
            child_name=self.child_name,
            is_loading=self.is_loading,
            error=self.error,
            image_count=len(self.images),
            image_urls=[f"{image_url_prefix}/{i}" for i in range(len(self.images))],
        )
