"""Coloring page generation - Imagen integration."""
from concurrent.futures import ThreadPoolExecutor
from typing import Optional, List, Any

from google.genai import types

from config import Config
from common.error_messages import ErrorCode, ServiceError
from common.models import GeneratedImage
from utils.logger import get_logger

logger = get_logger("image.services")

COLORING_PAGE_PROMPT = (
    "A simple, black and white coloring book page for a child. "
    "The art should have very thick, bold, clean black outlines and no shading or color. "
    "The scene should be a friendly, cute {theme}."
)


def build_coloring_prompt(theme: str) -> str:
    """Embed the theme verbatim into the fixed coloring page prompt."""
    return COLORING_PAGE_PROMPT.format(theme=theme)


def split_into_batches(total: int, max_per_call: int) -> List[int]:
    """
    Split the requested image count into per-call batch sizes.

    >>> split_into_batches(5, 4)
    [4, 1]

    Raises:
        ValueError: If max_per_call is less than 1
    """
    if max_per_call < 1:
        raise ValueError(f"max_per_call must be at least 1, got {max_per_call}")
    batches = []
    remaining = total
    while remaining > 0:
        size = min(max_per_call, remaining)
        batches.append(size)
        remaining -= size
    return batches


class ImageRequestClient:
    """
    Requests a full set of coloring pages for a theme from Imagen.

    Imagen returns at most MAX_IMAGES_PER_CALL images per request, so the
    total is fanned out over several concurrent requests and the results are
    joined back in request order.
    """

    def __init__(
        self,
        client: Any,
        model: Optional[str] = None,
        total_images: Optional[int] = None,
        max_images_per_call: Optional[int] = None,
        mime_type: Optional[str] = None,
        aspect_ratio: Optional[str] = None,
    ):
        self._client = client
        self.model = model or Config.IMAGE_MODEL
        self.total_images = total_images if total_images is not None else Config.IMAGES_PER_BOOK
        self.max_images_per_call = (
            max_images_per_call if max_images_per_call is not None else Config.MAX_IMAGES_PER_CALL
        )
        if self.max_images_per_call < 1:
            raise ValueError(f"max_images_per_call must be at least 1, got {self.max_images_per_call}")
        self.mime_type = mime_type or Config.IMAGE_MIME_TYPE
        self.aspect_ratio = aspect_ratio or Config.IMAGE_ASPECT_RATIO

    def batch_sizes(self) -> List[int]:
        return split_into_batches(self.total_images, self.max_images_per_call)

    def _generate_batch(self, prompt: str, count: int) -> List[GeneratedImage]:
        """Issue one generate_images call and return its images in service order."""
        logger.info(f"Requesting {count} image(s) from {self.model}")
        response = self._client.models.generate_images(
            model=self.model,
            prompt=prompt,
            config=types.GenerateImagesConfig(
                number_of_images=count,
                output_mime_type=self.mime_type,
                aspect_ratio=self.aspect_ratio,
            ),
        )

        images = []
        for generated in response.generated_images or []:
            image = getattr(generated, "image", None)
            data = getattr(image, "image_bytes", None) if image else None
            if not data:
                logger.warning("Skipping generated image without bytes")
                continue
            images.append(GeneratedImage(
                data=data,
                mime_type=getattr(image, "mime_type", None) or self.mime_type,
            ))
        return images

    def request_coloring_images(self, theme: str) -> List[GeneratedImage]:
        """
        Generate the coloring pages for a theme.

        All batches are issued at once and joined; the result is the first
        batch in service order, followed by the next batch, and so on.

        Args:
            theme: Non-empty theme text, embedded verbatim in the prompt

        Returns:
            Ordered list of generated images (possibly fewer than requested)

        Raises:
            ServiceError: IMAGE_GENERATION_FAILED if any batch fails
        """
        prompt = build_coloring_prompt(theme)
        batches = self.batch_sizes()
        logger.info(f"Generating {self.total_images} coloring pages for theme '{theme}' in batches {batches}")

        try:
            with ThreadPoolExecutor(max_workers=max(len(batches), 1)) as executor:
                futures = [executor.submit(self._generate_batch, prompt, count) for count in batches]
                # Join in submission order, not completion order
                results = [future.result() for future in futures]
        except Exception as e:
            logger.error(f"Error generating images: {e}", exc_info=True)
            raise ServiceError(ErrorCode.IMAGE_GENERATION_FAILED) from e

        images = [image for batch in results for image in batch]
        if len(images) < self.total_images:
            logger.warning(f"Requested {self.total_images} images but received {len(images)}")
        logger.info(f"Generated {len(images)} coloring page(s) for theme '{theme}'")
        return images
