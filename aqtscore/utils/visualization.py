"""Drawing primitives for score overlays."""

import cv2
import numpy as np
from typing import Sequence, Tuple

Color = Tuple[int, int, int]

FONT = cv2.FONT_HERSHEY_SIMPLEX


def to_point(x: float, y: float) -> Tuple[int, int]:
    """Round float coordinates to a drawable pixel."""
    return int(round(x)), int(round(y))


def draw_zone_rings(image: np.ndarray, center: Tuple[int, int],
                    radii: Sequence[float], labels: Sequence[str],
                    colors: Sequence[Color], thickness: int = 2,
                    font_scale: float = 0.7, label_gap: int = 5) -> np.ndarray:
    """Draw concentric zone boundaries, each labeled just right of the ring."""
    for i, (radius, label) in enumerate(zip(radii, labels)):
        color = colors[i % len(colors)]
        r = max(int(round(radius)), 0)
        cv2.circle(image, center, r, color, thickness)
        cv2.putText(image, label, (center[0] + r + label_gap, center[1]),
                    FONT, font_scale, color, thickness)
    return image


def draw_center_marker(image: np.ndarray, center: Tuple[int, int],
                       dot_radius: int = 5, ring_radius: int = 10,
                       color: Color = (0, 0, 255), thickness: int = 2) -> np.ndarray:
    """Filled dot inside an open ring."""
    cv2.circle(image, center, dot_radius, color, -1)
    cv2.circle(image, center, ring_radius, color, thickness)
    return image


def draw_crosshair(image: np.ndarray, center: Tuple[int, int], size: int = 8,
                   color: Color = (0, 0, 255), thickness: int = 2) -> np.ndarray:
    """Two perpendicular segments of half-length `size`."""
    x, y = center
    cv2.line(image, (x - size, y), (x + size, y), color, thickness)
    cv2.line(image, (x, y - size), (x, y + size), color, thickness)
    return image


def draw_label(image: np.ndarray, text: str, origin: Tuple[int, int],
               font_scale: float = 0.7, thickness: int = 2, padding: int = 4,
               text_color: Color = (255, 255, 255),
               background: Color = (0, 0, 0)) -> np.ndarray:
    """Put text on an opaque rectangle sized to the text extent."""
    (text_w, text_h), baseline = cv2.getTextSize(text, FONT, font_scale, thickness)
    x, y = origin
    cv2.rectangle(image, (x - padding, y - text_h - padding),
                  (x + text_w + padding, y + baseline + padding), background, -1)
    cv2.putText(image, text, (x, y), FONT, font_scale, text_color, thickness)
    return image


def draw_hole_marker(image: np.ndarray, center: Tuple[int, int], radius: float,
                     caliber_radius: int, crosshair_size: int = 8,
                     outline_color: Color = (0, 255, 0),
                     caliber_color: Color = (0, 255, 255),
                     crosshair_color: Color = (0, 0, 255),
                     thickness: int = 2) -> np.ndarray:
    """Detected outline, caliber reference circle and crosshair for one hole."""
    cv2.circle(image, center, max(int(round(radius)), 0), outline_color, thickness)
    cv2.circle(image, center, caliber_radius, caliber_color, thickness)
    draw_crosshair(image, center, crosshair_size, crosshair_color, thickness)
    return image
