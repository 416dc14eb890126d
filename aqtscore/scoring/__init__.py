"""Zone tables and hole scoring."""

from .scorer import ZoneScorer
from .zones import (AQT_ZONES, LINEAR_11_ZONES, SCORING_PRESETS, ScoreZone,
                    build_zone_table, scoring_preset, zone_boundaries)

__all__ = [
    'ZoneScorer',
    'ScoreZone',
    'AQT_ZONES',
    'LINEAR_11_ZONES',
    'SCORING_PRESETS',
    'build_zone_table',
    'scoring_preset',
    'zone_boundaries',
]
