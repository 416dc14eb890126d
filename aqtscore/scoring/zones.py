"""Score zone tables and scoring presets."""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Sequence, Tuple


@dataclass(frozen=True)
class ScoreZone:
    """One ring of the target: outer radius as a ratio of the target diameter."""
    outer_radius_ratio: float
    points: int


# Project Appleseed AQT, 25 m target
AQT_ZONES = ((0.125, 5), (0.25, 4), (0.5, 3))

# Legacy policy: 11 equal bands across half the shorter image side, 10 down to 0.
# The legacy app counted a center exactly on a band edge as inside the band;
# ZoneScorer compares strictly, so such a hole gets the outer band here.
LINEAR_11_ZONES = tuple((k / 22.0, 11 - k) for k in range(1, 11))

SCORING_PRESETS = {
    "aqt": {
        "zones": [list(z) for z in AQT_ZONES],
        "edge_breaking": True,
        "target_fill_ratio": 0.9,
    },
    "linear_11": {
        "zones": [list(z) for z in LINEAR_11_ZONES],
        "edge_breaking": False,
        "target_fill_ratio": 1.0,
    },
}


def scoring_preset(name: str) -> Dict[str, Any]:
    """Return a copy of a named scoring section."""
    if name not in SCORING_PRESETS:
        raise ValueError(
            f"Unknown scoring preset '{name}', expected one of {sorted(SCORING_PRESETS)}"
        )
    preset = SCORING_PRESETS[name]
    return {
        "zones": [list(z) for z in preset["zones"]],
        "edge_breaking": preset["edge_breaking"],
        "target_fill_ratio": preset["target_fill_ratio"],
    }


def build_zone_table(pairs: Iterable[Sequence[float]]) -> Tuple[ScoreZone, ...]:
    """
    Build an ordered zone table from (ratio, points) pairs.

    Pairs must go from the innermost ring outwards: ratios strictly
    increasing, points strictly decreasing and never negative.

    Raises:
        ValueError: if the table is empty or breaks the ordering rules
    """
    zones: List[ScoreZone] = []
    for pair in pairs:
        if len(pair) != 2:
            raise ValueError(f"Zone entry must be (ratio, points), got {pair!r}")
        ratio, points = float(pair[0]), int(pair[1])
        if ratio <= 0:
            raise ValueError(f"Zone ratio must be positive, got {ratio}")
        if points < 0:
            raise ValueError(f"Zone points must be non-negative, got {points}")
        if zones:
            previous = zones[-1]
            if ratio <= previous.outer_radius_ratio:
                raise ValueError("Zone ratios must be strictly increasing")
            if points >= previous.points:
                raise ValueError("Zone points must be strictly decreasing")
        zones.append(ScoreZone(ratio, points))

    if not zones:
        raise ValueError("Zone table must contain at least one zone")
    return tuple(zones)


def zone_boundaries(zones: Sequence[ScoreZone], estimated_diameter: float) -> List[float]:
    """Boundary radius in pixels for each zone."""
    return [estimated_diameter * zone.outer_radius_ratio for zone in zones]
