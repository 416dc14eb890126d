"""
Data structures shared by the target analysis pipeline.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

import numpy as np


class InvalidImage(ValueError):
    """Raised when an input image is missing, empty or malformed."""


@dataclass(frozen=True)
class DetectedHole:
    """A circular mark found by the circle detector, in pixel units."""
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class TargetCenter:
    """Scoring origin of the zone system."""
    x: float
    y: float

    def as_point(self) -> Tuple[int, int]:
        """Integer pixel position for drawing."""
        return int(round(self.x)), int(round(self.y))


@dataclass(frozen=True)
class AnalysisResult:
    """Output of one analysis run."""
    annotated_image: np.ndarray = field(repr=False, compare=False)
    bullet_holes: Tuple[DetectedHole, ...]
    scores: Tuple[int, ...]
    total_score: int
    target_center: Optional[TargetCenter]
    processing_time_ms: float = field(default=0.0, compare=False)

    def __post_init__(self):
        if len(self.scores) != len(self.bullet_holes):
            raise ValueError(
                f"Got {len(self.scores)} scores for {len(self.bullet_holes)} holes"
            )
        if self.total_score != sum(self.scores):
            raise ValueError("total_score does not match the sum of scores")

    @property
    def image_size(self) -> Tuple[int, int]:
        """(width, height) of the annotated image."""
        return self.annotated_image.shape[1], self.annotated_image.shape[0]

    def to_dict(self) -> Dict[str, Any]:
        """JSON-serialisable summary (the annotated image is left out)."""
        width, height = self.image_size
        center = None
        if self.target_center is not None:
            center = {"x": self.target_center.x, "y": self.target_center.y}

        return {
            "holes_detected": len(self.bullet_holes),
            "bullet_holes": [
                {"x": hole.x, "y": hole.y, "radius": hole.radius, "score": score}
                for hole, score in zip(self.bullet_holes, self.scores)
            ],
            "scores": list(self.scores),
            "total_score": self.total_score,
            "target_center": center,
            "image_size": {"width": width, "height": height},
            "processing_time_ms": round(self.processing_time_ms, 2),
        }
