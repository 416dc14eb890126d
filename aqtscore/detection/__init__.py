"""Circle detection and center estimation."""

from .center_estimator import CENTER_POLICIES, CenterEstimator, image_center
from .circle_detector import CircleDetector, detect_circles

__all__ = ['CircleDetector', 'detect_circles', 'CenterEstimator', 'CENTER_POLICIES', 'image_center']
