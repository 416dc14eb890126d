"""Scoring origin estimation."""

from typing import Callable, Dict, Optional, Sequence

import numpy as np

from aqtscore.types import DetectedHole, TargetCenter

CenterPolicy = Callable[[np.ndarray, Sequence[DetectedHole]], Optional[TargetCenter]]


def image_center(image: np.ndarray, holes: Sequence[DetectedHole]) -> TargetCenter:
    """Geometric center of the frame; assumes the target is centered in the photo."""
    height, width = image.shape[:2]
    return TargetCenter(width / 2.0, height / 2.0)


CENTER_POLICIES: Dict[str, CenterPolicy] = {
    'image_center': image_center,
}


class CenterEstimator:
    """Pick the scoring origin for one analysis run."""

    def __init__(self, policy: str = 'image_center'):
        if policy not in CENTER_POLICIES:
            raise ValueError(
                f"Unknown center policy '{policy}', expected one of {sorted(CENTER_POLICIES)}"
            )
        self.policy = policy

    def estimate(self, image: np.ndarray,
                 holes: Sequence[DetectedHole] = ()) -> TargetCenter:
        """Return the scoring origin, falling back to the image center."""
        center = CENTER_POLICIES[self.policy](image, holes)
        if center is None:
            center = image_center(image, holes)
        return center
