"""Bullet hole detection using the Hough Circle Transform."""

import logging
from typing import Any, Dict, List, Optional

import cv2
import numpy as np

from aqtscore.types import DetectedHole, InvalidImage

logger = logging.getLogger(__name__)


class CircleDetector:
    """Detects small circular marks left by projectiles."""
    
    def __init__(self, dp: float = 1.2, min_dist: float = 20,
                 param1: float = 100.0, param2: float = 30.0,
                 min_radius: int = 5, max_radius: int = 40):
        """
        Initialize detector.

        Args:
            dp: Inverse ratio of accumulator resolution to image resolution
            min_dist: Minimum distance between accepted circle centers
            param1: Upper Canny threshold used inside the transform
            param2: Accumulator vote threshold; lower finds more circles
            min_radius: Smallest accepted radius in pixels
            max_radius: Largest accepted radius in pixels
        """
        if dp <= 0:
            raise ValueError(f"dp must be positive, got {dp}")
        if min_dist <= 0:
            raise ValueError(f"min_dist must be positive, got {min_dist}")
        if param1 <= 0 or param2 <= 0:
            raise ValueError(f"param1 and param2 must be positive, got ({param1}, {param2})")
        if min_radius < 0 or max_radius < min_radius:
            raise ValueError(f"Invalid radius range [{min_radius}, {max_radius}]")
        self.dp = dp
        self.min_dist = min_dist
        self.param1 = param1
        self.param2 = param2
        self.min_radius = min_radius
        self.max_radius = max_radius

    @property
    def params(self) -> Dict[str, Any]:
        return {
            'dp': self.dp,
            'min_dist': self.min_dist,
            'param1': self.param1,
            'param2': self.param2,
            'min_radius': self.min_radius,
            'max_radius': self.max_radius,
        }
    
    def detect(self, image: np.ndarray) -> List[DetectedHole]:
        """
        Detect circles in a preprocessed image.
        
        Args:
            image: Single-channel 8-bit image, usually already blurred
            
        Returns:
            Detected holes in accumulator order; empty if nothing was found
        """
        if image is None or image.ndim != 2 or image.dtype != np.uint8:
            raise InvalidImage("Circle detection needs a single-channel 8-bit image")

        circles = cv2.HoughCircles(image, cv2.HOUGH_GRADIENT, self.dp, self.min_dist,
                                   param1=self.param1, param2=self.param2,
                                   minRadius=int(self.min_radius),
                                   maxRadius=int(self.max_radius))
        
        if circles is None:
            logger.debug("No circles detected")
            return []
        
        holes = [DetectedHole(float(x), float(y), float(r)) for x, y, r in circles[0, :]]
        logger.debug("Detected %d potential bullet holes", len(holes))
        return holes


def detect_circles(image: np.ndarray, params: Optional[Dict[str, Any]] = None) -> List[DetectedHole]:
    """Detect circular marks with the given detector parameters."""
    return CircleDetector(**(params or {})).detect(image)
