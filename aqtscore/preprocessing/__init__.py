"""Image validation and preprocessing."""

from .enhancement import ImagePreprocessor, reduce_noise, to_grayscale
from .validator import validate_image

__all__ = ['ImagePreprocessor', 'validate_image', 'to_grayscale', 'reduce_noise']
