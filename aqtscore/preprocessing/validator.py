"""Input image validation."""

import numpy as np

from aqtscore.types import InvalidImage

SUPPORTED_CHANNELS = (1, 3, 4)


def validate_image(image) -> np.ndarray:
    """
    Check that an image can go through the pipeline.

    Args:
        image: 8-bit grayscale, BGR or BGRA array

    Returns:
        The same image, unchanged

    Raises:
        InvalidImage: if the buffer is missing, empty or has an unsupported layout
    """
    if image is None:
        raise InvalidImage("Image is None")
    if not isinstance(image, np.ndarray):
        raise InvalidImage(f"Expected a numpy array, got {type(image).__name__}")
    if image.size == 0:
        raise InvalidImage(f"Image is empty (shape {image.shape})")
    if image.ndim not in (2, 3):
        raise InvalidImage(f"Expected a 2-D or 3-D array, got {image.ndim} dimensions")

    height, width = image.shape[:2]
    if width <= 0 or height <= 0:
        raise InvalidImage(f"Invalid image size {width}x{height}")

    channels = 1 if image.ndim == 2 else image.shape[2]
    if channels not in SUPPORTED_CHANNELS:
        raise InvalidImage(f"Unsupported channel count {channels}")
    if image.dtype != np.uint8:
        raise InvalidImage(f"Expected 8-bit pixels, got {image.dtype}")

    return image
