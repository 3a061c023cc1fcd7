"""Receipt image preparation using OpenCV."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .errors import ImageEncodingError

logger = logging.getLogger(__name__)

# Longest side, in pixels, of the JPEG sent to the AI service.
MAX_DIMENSION = 768
JPEG_QUALITY = 70


@dataclass
class ReceiptImage:
    data: bytes  # downsized JPEG for the AI service
    original: bytes  # untouched source bytes, used for OCR
    width: int = 0
    height: int = 0
    mime_type: str = "image/jpeg"


def prepare_image(
    source: str | Path | bytes,
    max_dimension: int = MAX_DIMENSION,
    jpeg_quality: int = JPEG_QUALITY,
) -> ReceiptImage:
    """Load a receipt image and re-encode it as a bounded-size JPEG.

    Raises:
        ImageEncodingError: If the image cannot be read, decoded or encoded.
        ImportError: If opencv-python is not installed.
    """
    try:
        import cv2
        import numpy as np
    except ImportError:
        raise ImportError(
            "opencv-python is required: pip install opencv-python"
        ) from None

    if isinstance(source, (bytes, bytearray)):
        raw = bytes(source)
    else:
        try:
            raw = Path(source).read_bytes()
        except OSError as e:
            raise ImageEncodingError(f"Could not read image {source}: {e}") from e

    if not raw:
        raise ImageEncodingError("Image is empty")

    img = cv2.imdecode(np.frombuffer(raw, dtype=np.uint8), cv2.IMREAD_COLOR)
    if img is None:
        raise ImageEncodingError("Could not decode image data")

    height, width = img.shape[:2]
    longest = max(height, width)
    if longest > max_dimension:
        scale = max_dimension / longest
        width = max(1, round(width * scale))
        height = max(1, round(height * scale))
        img = cv2.resize(img, (width, height), interpolation=cv2.INTER_AREA)
        logger.debug("Resized receipt image to %dx%d", width, height)

    ok, encoded = cv2.imencode(".jpg", img, [cv2.IMWRITE_JPEG_QUALITY, jpeg_quality])
    if not ok:
        raise ImageEncodingError("Failed to convert image to JPEG")

    data = encoded.tobytes()
    logger.debug("Prepared receipt image: %d KB JPEG", len(data) // 1024)
    return ReceiptImage(data=data, original=raw, width=width, height=height)
