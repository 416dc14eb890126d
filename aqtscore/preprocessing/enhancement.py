"""Grayscale conversion and noise reduction ahead of circle detection."""

import cv2
import numpy as np

from aqtscore.preprocessing.validator import validate_image


class ImagePreprocessor:
    """Turn a raw target photo into a smoothed luminance image."""

    def __init__(self, blur_kernel: int = 9, sigma_x: float = 2.0, sigma_y: float = 2.0):
        """
        Initialize preprocessor.

        Args:
            blur_kernel: Gaussian kernel extent in pixels (odd)
            sigma_x: Gaussian standard deviation along x
            sigma_y: Gaussian standard deviation along y
        """
        if blur_kernel <= 0 or blur_kernel % 2 == 0:
            raise ValueError(f"blur_kernel must be a positive odd number, got {blur_kernel}")
        if sigma_x <= 0 or sigma_y <= 0:
            raise ValueError(f"Blur sigmas must be positive, got ({sigma_x}, {sigma_y})")
        self.blur_kernel = blur_kernel
        self.sigma_x = sigma_x
        self.sigma_y = sigma_y

    def preprocess(self, image: np.ndarray) -> np.ndarray:
        """
        Apply full preprocessing pipeline.

        Args:
            image: Input grayscale, BGR or BGRA image

        Returns:
            Blurred single-channel image of the same width and height
        """
        validate_image(image)
        gray = self.to_grayscale(image)
        return self.reduce_noise(gray)

    def to_grayscale(self, image: np.ndarray) -> np.ndarray:
        """Convert to a single luminance channel; returns a new array."""
        if image.ndim == 2:
            return image.copy()
        if image.shape[2] == 1:
            return image[:, :, 0].copy()
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)

    def reduce_noise(self, gray: np.ndarray) -> np.ndarray:
        """Gaussian blur tuned to flatten paper texture."""
        return cv2.GaussianBlur(gray, (self.blur_kernel, self.blur_kernel),
                                self.sigma_x, sigmaY=self.sigma_y)


# Utility functions for callers that do not need a preprocessor instance
def to_grayscale(image: np.ndarray) -> np.ndarray:
    """Convert an image to a single luminance channel."""
    return ImagePreprocessor().to_grayscale(validate_image(image))


def reduce_noise(gray: np.ndarray, kernel_size: int = 9, sigma: float = 2.0) -> np.ndarray:
    """Apply Gaussian blur to reduce noise."""
    return ImagePreprocessor(kernel_size, sigma, sigma).reduce_noise(gray)
