"""Render scoring overlays onto a copy of the target photo."""

from typing import Optional, Sequence

import cv2
import numpy as np

from aqtscore.scoring.zones import ScoreZone
from aqtscore.types import DetectedHole, TargetCenter
from aqtscore.utils.visualization import (draw_center_marker, draw_hole_marker,
                                          draw_label, draw_zone_rings, to_point)

# BGR, innermost ring first
DEFAULT_ZONE_COLORS = [
    (0, 0, 255),
    (0, 165, 255),
    (255, 128, 0),
    (255, 0, 255),
    (128, 128, 0),
]


class Annotator:
    """Draw zone guides, the center marker and per-hole marks."""

    def __init__(self, caliber_radius: int = 15, crosshair_size: int = 8,
                 line_thickness: int = 2, center_dot_radius: int = 5,
                 center_ring_radius: int = 10, font_scale: float = 0.7,
                 label_offset: int = 20, label_padding: int = 4,
                 zone_colors: Optional[Sequence[Sequence[int]]] = None):
        """
        Initialize annotator.

        Args:
            caliber_radius: Radius of the fixed reference circle for the projectile
            crosshair_size: Half-length of the crosshair segments
            line_thickness: Stroke width for all outlines
            center_dot_radius: Radius of the filled center dot
            center_ring_radius: Radius of the open ring around the center dot
            font_scale: Hershey font scale for all labels
            label_offset: Offset of a hole's score label up and right of the hole
            label_padding: Margin between label text and its background
            zone_colors: BGR colors for zone rings, cycled if there are more zones
        """
        if caliber_radius < 0:
            raise ValueError(f"caliber_radius must be non-negative, got {caliber_radius}")
        self.caliber_radius = int(caliber_radius)
        self.crosshair_size = int(crosshair_size)
        self.line_thickness = int(line_thickness)
        self.center_dot_radius = int(center_dot_radius)
        self.center_ring_radius = int(center_ring_radius)
        self.font_scale = font_scale
        self.label_offset = int(label_offset)
        self.label_padding = int(label_padding)
        colors = zone_colors or DEFAULT_ZONE_COLORS
        self.zone_colors = [tuple(int(c) for c in color) for color in colors]

    def annotate(self, image: np.ndarray, holes: Sequence[DetectedHole],
                 center: TargetCenter, scores: Sequence[int],
                 zones: Sequence[ScoreZone] = (),
                 zone_radii: Sequence[float] = ()) -> np.ndarray:
        """
        Draw all overlays onto a BGR copy of `image`.

        Args:
            image: Original image (grayscale, BGR or BGRA)
            holes: Detected holes in detection order
            center: Scoring origin
            scores: Score for each hole, parallel to `holes`
            zones: Zone table, innermost first
            zone_radii: Pixel radius of each zone boundary

        Returns:
            New BGR image with the same width and height
        """
        output = self._bgr_copy(image)
        center_pt = center.as_point()

        draw_zone_rings(output, center_pt, zone_radii,
                        [str(zone.points) for zone in zones],
                        self.zone_colors, self.line_thickness, self.font_scale)

        draw_center_marker(output, center_pt, self.center_dot_radius,
                           self.center_ring_radius, thickness=self.line_thickness)

        for hole, score in zip(holes, scores):
            hole_pt = to_point(hole.x, hole.y)
            draw_hole_marker(output, hole_pt, hole.radius, self.caliber_radius,
                             self.crosshair_size, thickness=self.line_thickness)
            label_origin = (hole_pt[0] + self.label_offset, hole_pt[1] - self.label_offset)
            draw_label(output, str(score), label_origin, self.font_scale,
                       self.line_thickness, self.label_padding)

        return output

    @staticmethod
    def _bgr_copy(image: np.ndarray) -> np.ndarray:
        if image.ndim == 2:
            return cv2.cvtColor(image, cv2.COLOR_GRAY2BGR)
        if image.shape[2] == 1:
            return cv2.cvtColor(np.ascontiguousarray(image[:, :, 0]), cv2.COLOR_GRAY2BGR)
        if image.shape[2] == 4:
            return cv2.cvtColor(image, cv2.COLOR_BGRA2BGR)
        return image.copy()
