"""Resize and JPEG-encode images before they go into the catalog.

The catalog treats the result as opaque bytes; this is the only place that looks
inside an image.
"""

import io

from PIL import Image, ImageOps, UnidentifiedImageError

from photogrid.errors import ImageProcessingError


def resize_image(image_bytes: bytes, size: tuple[int, int], quality: int = 95) -> bytes:
    """Decode an image, stretch it to exactly ``size`` and encode it as JPEG.

    Args:
        image_bytes: Raw bytes of any format Pillow can open.
        size: Target (width, height) in pixels.
        quality: JPEG quality (1-95).

    Returns:
        The encoded JPEG bytes.

    Raises:
        ValueError: If a size dimension is not positive.
        ImageProcessingError: If the bytes are empty or cannot be decoded as an image.
    """
    width, height = size
    if width <= 0 or height <= 0:
        raise ValueError(f"Target size must be positive, got {size}")
    if not image_bytes:
        raise ImageProcessingError("No image data provided")

    try:
        with Image.open(io.BytesIO(image_bytes)) as img:
            img = ImageOps.exif_transpose(img)
            resized = img.convert("RGB").resize((width, height), Image.LANCZOS)
    except (UnidentifiedImageError, OSError) as e:
        raise ImageProcessingError(f"Cannot decode image: {e}") from e

    out = io.BytesIO()
    resized.save(out, format="JPEG", quality=quality)
    return out.getvalue()
