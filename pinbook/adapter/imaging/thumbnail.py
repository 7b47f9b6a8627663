"""Thumbnail rendering with Pillow."""

from io import BytesIO

from PIL import Image

from pinbook.adapter.error import ImageProcessingError

ThumbnailError = ImageProcessingError


def render_thumbnail(
    data: bytes, image_format: str, max_size: tuple[int, int]
) -> bytes:
    """Decode an image, shrink it to fit ``max_size`` and re-encode it.

    Decoding only tries ``image_format``; bytes of any other format are
    rejected rather than sniffed. Aspect ratio is preserved, images already
    inside the bounds are left at their size, and resampling is
    nearest-neighbour.

    This is CPU bound; call it from a worker thread.

    Args:
        data: Encoded image bytes
        image_format: Pillow codec name ("JPEG" or "PNG")
        max_size: (max_width, max_height)

    Returns:
        Encoded thumbnail bytes in the same format

    Raises:
        ThumbnailError: If the bytes cannot be decoded or encoded
    """
    try:
        with Image.open(BytesIO(data), formats=[image_format]) as image:
            image.load()
            image.thumbnail(max_size, resample=Image.Resampling.NEAREST)

            buffer = BytesIO()
            image.save(buffer, format=image_format)
    except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as e:
        # UnidentifiedImageError and truncated data are both OSError
        raise ThumbnailError(f"{type(e).__name__}: {e}") from e

    return buffer.getvalue()
