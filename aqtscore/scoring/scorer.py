"""Zone-based scoring of detected holes."""

import logging
import math
from typing import List, Sequence

from aqtscore.scoring.zones import AQT_ZONES, ScoreZone, build_zone_table, zone_boundaries
from aqtscore.types import DetectedHole, TargetCenter

logger = logging.getLogger(__name__)


class ZoneScorer:
    """Map a hole to the point value of the ring it falls in."""

    def __init__(self, zones: Sequence = AQT_ZONES, edge_breaking: bool = True,
                 target_fill_ratio: float = 0.9):
        """
        Initialize scorer.

        Args:
            zones: (ratio, points) pairs or ScoreZone objects, innermost first
            edge_breaking: Credit the inner ring when the mark touches its line
            target_fill_ratio: Share of the shorter image side the target covers
        """
        if not 0 < target_fill_ratio <= 1:
            raise ValueError(f"target_fill_ratio must be in (0, 1], got {target_fill_ratio}")

        pairs = [(z.outer_radius_ratio, z.points) if isinstance(z, ScoreZone) else z
                 for z in zones]
        self.zones = build_zone_table(pairs)
        self.edge_breaking = edge_breaking
        self.target_fill_ratio = target_fill_ratio

    def estimate_target_diameter(self, image_width: int, image_height: int) -> float:
        """Target diameter in pixels, assuming the target is centered in frame."""
        return self.target_fill_ratio * min(image_width, image_height)

    def boundary_radii(self, image_width: int, image_height: int) -> List[float]:
        """Pixel radius of every zone boundary for an image of this size."""
        diameter = self.estimate_target_diameter(image_width, image_height)
        return zone_boundaries(self.zones, diameter)

    def edge_distance(self, hole: DetectedHole, center: TargetCenter) -> float:
        """Distance used for zone lookup, corrected by the hole radius if enabled."""
        distance = math.hypot(hole.x - center.x, hole.y - center.y)
        if self.edge_breaking:
            return distance - hole.radius
        return distance

    def score(self, hole: DetectedHole, center: TargetCenter,
              image_width: int, image_height: int) -> int:
        """
        Score a single hole.

        A zone is awarded when the edge distance lies strictly inside its
        boundary. A mark sitting exactly on a line with no radius to break
        it scores the outer ring.
        """
        edge_distance = self.edge_distance(hole, center)
        score = 0
        for zone, radius in zip(self.zones, self.boundary_radii(image_width, image_height)):
            if edge_distance < radius:
                score = zone.points
                break

        logger.debug("Hole at (%.1f, %.1f) r=%.1f, edge distance %.1f, score %d",
                     hole.x, hole.y, hole.radius, edge_distance, score)
        return score

    def score_all(self, holes: Sequence[DetectedHole], center: TargetCenter,
                  image_width: int, image_height: int) -> List[int]:
        """Score holes in detection order."""
        return [self.score(hole, center, image_width, image_height) for hole in holes]
